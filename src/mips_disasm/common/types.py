"""
共通の型定義を提供するモジュール。
デコーダ、ドライバ、セルフテストなど複数のレイヤーで共通して使用される型エイリアスを定義します。
"""
from enum import Enum
from typing import Dict

# @intent:data_structure 32ビット符号なし命令語。デコードへの唯一の入力です。
InstructionWord = int

# @intent:data_structure 命令のメモリ上のアドレス (32ビット符号なし)。
Address = int

# @intent:data_structure セルフテスト用のフィクスチャ。命令語から期待される出力文字列への順序付きマッピング。
Fixture = Dict[InstructionWord, str]

WORD_MASK = 0xFFFFFFFF

# @intent:data_structure レジスタオペランドの表示形式。
class RegisterNaming(Enum):
    NUMERIC = "numeric"  # $17
    ABI = "abi"          # $s1
