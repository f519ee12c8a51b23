# src/mips_disasm/arch/mips/maps.py
"""
ファンクションコード／オペコードとニーモニックのマッピング定義。
"""
from types import MappingProxyType

from mips_disasm.arch.mips.errors import UnsupportedEncoding

# @intent:map R形式のファンクションコード (下位6ビット) からニーモニックへのマッピングテーブル。
R_FUNCTION_MAP = MappingProxyType({
    0x20: "add",
    0x22: "sub",
    0x24: "and",
    0x25: "or",
    0x2A: "slt",
})

# @intent:map I形式のオペコード (上位6ビット) からニーモニックへのマッピングテーブル。
I_OPCODE_MAP = MappingProxyType({
    # Load/Store
    0x23: "lw",
    0x2B: "sw",

    # Branch
    0x04: "beq",
    0x05: "bne",
})

MEMORY_MNEMONICS = frozenset({"lw", "sw"})
BRANCH_MNEMONICS = frozenset({"beq", "bne"})

# @intent:responsibility ファンクションコードをニーモニックに変換します。
# @intent:pre-condition テーブル外のコードに対してデフォルト値を返してはならない。
def resolve_r(function_code: int) -> str:
    mnemonic = R_FUNCTION_MAP.get(function_code)
    if mnemonic is None:
        raise UnsupportedEncoding("function", function_code)
    return mnemonic

# @intent:responsibility オペコードをニーモニックに変換します。
def resolve_i(opcode: int) -> str:
    mnemonic = I_OPCODE_MAP.get(opcode)
    if mnemonic is None:
        raise UnsupportedEncoding("opcode", opcode)
    return mnemonic
