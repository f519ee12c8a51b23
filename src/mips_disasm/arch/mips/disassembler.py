# src/mips_disasm/arch/mips/disassembler.py
"""
MIPS逆アセンブラ。

形式判定 -> フィールド抽出 -> ニーモニック解決 -> オペランド整形 の順に処理し、
命令語ごとの結果を DecodeResult として返します。
サポート外の命令語も例外ではなく失敗結果として返すため、呼び出し側が継続・中断を選べます。
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from mips_disasm.common.types import Address, InstructionWord, RegisterNaming, WORD_MASK
from mips_disasm.core.sequencer import Sequencer
from mips_disasm.arch.mips.errors import UnsupportedEncoding
from mips_disasm.arch.mips.fields import Format, classify, decode_r, decode_i
from mips_disasm.arch.mips.maps import resolve_r, resolve_i
from mips_disasm.arch.mips.renderer import render, format_address

# @intent:responsibility 1命令語のデコード結果 (成功または失敗) を記録します。
@dataclass(frozen=True)
class DecodeResult:
    address: Address
    word: InstructionWord
    format: Format
    text: Optional[str] = None
    error: Optional[UnsupportedEncoding] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    # @intent:responsibility アドレス付きのリスティング行を生成します。失敗時はプレースホルダを出力します。
    def line(self) -> str:
        body = self.text if self.ok else self.error.placeholder()
        return f"{format_address(self.address)}: {body}"

# @intent:responsibility 命令語を指定アドレスの命令としてデコードします。
# @intent:pre-condition wordは32ビットに収まる値である必要があります。
def decode_word(word: InstructionWord, address: Address,
                naming: RegisterNaming = RegisterNaming.NUMERIC) -> DecodeResult:
    if not 0 <= word <= WORD_MASK:
        raise ValueError(f"Instruction word {word:#x} is not a 32-bit value.")

    fmt = classify(word)
    try:
        if fmt is Format.R:
            decoded = decode_r(word)
            mnemonic = resolve_r(decoded.function_code)
        else:
            decoded = decode_i(word)
            mnemonic = resolve_i(decoded.opcode)
    except UnsupportedEncoding as e:
        return DecodeResult(address=address, word=word, format=fmt, error=e.with_word(word))

    return DecodeResult(address=address, word=word, format=fmt,
                        text=render(mnemonic, decoded, address, naming))

# @intent:responsibility アドレスが外部から与えられた命令語の集合をデコードします。
# @intent:rationale 各命令語のデコードは独立しているため、順序や共有状態に依存しない。
def decode_batch(items: Iterable[Tuple[Address, InstructionWord]],
                 naming: RegisterNaming = RegisterNaming.NUMERIC) -> List[DecodeResult]:
    return [decode_word(word, address, naming) for address, word in items]

# @intent:responsibility 命令語列をシーケンサの割り当てるアドレスで順番にデコードします。
def disassemble(words: Iterable[InstructionWord], sequencer: Sequencer,
                naming: RegisterNaming = RegisterNaming.NUMERIC) -> List[DecodeResult]:
    return [decode_word(word, sequencer.next_address(), naming) for word in words]
