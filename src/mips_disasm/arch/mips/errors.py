# src/mips_disasm/arch/mips/errors.py
"""
MIPSデコーダのエラー定義。
"""
from typing import Optional

# @intent:responsibility サポート対象外のオペコード／ファンクションコードを表します。
# @intent:rationale 既存のローダーやアセンブラと同様にValueErrorの派生とし、呼び出し側が一括で扱えるようにする。
class UnsupportedEncoding(ValueError):
    """
    命令語のオペコード (上位6ビット) またはファンクションコード (下位6ビット) が
    固定テーブルに存在しない場合に送出される例外。
    """
    def __init__(self, kind: str, code: int, word: Optional[int] = None):
        self.kind = kind  # "function" または "opcode"
        self.code = code
        self.word = word
        message = f"Unsupported {kind} 0x{code:02X}"
        if word is not None:
            message += f" in word 0x{word:08X}"
        super().__init__(message)

    def with_word(self, word: int) -> 'UnsupportedEncoding':
        """命令語の情報を付加した新しい例外を返します。"""
        return UnsupportedEncoding(self.kind, self.code, word)

    def placeholder(self) -> str:
        """リスティングに出力するプレースホルダ文字列。"""
        return f"<unsupported {self.kind} 0x{self.code:02X}>"

# @intent:responsibility 寛容モードでスキップされた命令語を呼び出し側へ通知するための警告カテゴリ。
class UnsupportedEncodingWarning(UserWarning):
    pass
