# src/mips_disasm/arch/mips/fields.py
"""
命令語のビットフィールド抽出と形式判定。

R形式: opcode(6)=0 | rs(5) | rt(5) | rd(5) | shamt(5) | funct(6)
I形式: opcode(6)   | rs(5) | rt(5) | imm(16)

いずれの関数も純粋関数であり、32ビットの全入力に対して定義されています。
"""
from dataclasses import dataclass
from enum import Enum

from mips_disasm.common.types import InstructionWord

OPCODE_MASK = 0xFC000000
RS_MASK = 0x03E00000
RT_MASK = 0x001F0000
RD_MASK = 0x0000F800
FUNCT_MASK = 0x0000003F
IMM_MASK = 0x0000FFFF

# @intent:data_structure 命令形式。上位6ビットのみで決定されます。
class Format(Enum):
    R = "R"
    I = "I"

# @intent:responsibility R形式命令のデコード結果を保持します。
@dataclass(frozen=True)
class DecodedR:
    rs: int
    rt: int
    rd: int
    function_code: int

# @intent:responsibility I形式命令のデコード結果を保持します。
@dataclass(frozen=True)
class DecodedI:
    opcode: int
    rs: int
    rt: int
    immediate: int  # 符号付き16ビット

def sign_extend_16(x: int) -> int:
    """16ビット値を2の補数として符号拡張します。"""
    x &= 0xFFFF
    if x & 0x8000:
        return x - 0x10000
    return x

def opcode_of(word: InstructionWord) -> int:
    return (word & OPCODE_MASK) >> 26

# @intent:responsibility 上位6ビットを見てR形式かI形式かを判定します。
def classify(word: InstructionWord) -> Format:
    if opcode_of(word) == 0:
        return Format.R
    return Format.I

# @intent:responsibility R形式のビットフィールドを抽出します。
def decode_r(word: InstructionWord) -> DecodedR:
    return DecodedR(
        rs=(word & RS_MASK) >> 21,
        rt=(word & RT_MASK) >> 16,
        rd=(word & RD_MASK) >> 11,
        function_code=word & FUNCT_MASK,
    )

# @intent:responsibility I形式のビットフィールドを抽出し、即値を符号拡張します。
def decode_i(word: InstructionWord) -> DecodedI:
    return DecodedI(
        opcode=opcode_of(word),
        rs=(word & RS_MASK) >> 21,
        rt=(word & RT_MASK) >> 16,
        immediate=sign_extend_16(word & IMM_MASK),
    )
