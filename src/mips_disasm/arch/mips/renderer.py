# src/mips_disasm/arch/mips/renderer.py
"""
デコード済みフィールドをアセンブリ言語の文字列に整形します。
"""
from typing import Union

from mips_disasm.common.types import Address, RegisterNaming, WORD_MASK
from mips_disasm.arch.mips.fields import DecodedR, DecodedI
from mips_disasm.arch.mips.maps import BRANCH_MNEMONICS
from mips_disasm.arch.mips.registers import register_name

# @intent:utility_function 分岐先アドレスを計算します。
# @intent:rationale オフセットはワード単位で、分岐命令の次の命令のアドレスを基準とする。
def branch_target(address: Address, immediate: int) -> Address:
    return ((address + 4) + (immediate << 2)) & WORD_MASK

# @intent:utility_function 命令自身のアドレスを小文字16進数 (0xなし) で表します。
def format_address(address: Address) -> str:
    return f"{address:x}"

# @intent:responsibility ニーモニックとオペランドを1行のテキストに整形します。
def render(mnemonic: str, decoded: Union[DecodedR, DecodedI], address: Address,
           naming: RegisterNaming = RegisterNaming.NUMERIC) -> str:
    """
    R形式:      "<mnemonic> <rd>, <rs>, <rt>"
    lw/sw:      "<mnemonic> <rt>, <immediate>(<rs>)"
    beq/bne:    "<mnemonic> <rs>, <rt>, address <TARGET>"
    """
    rs = register_name(decoded.rs, naming)
    rt = register_name(decoded.rt, naming)

    if isinstance(decoded, DecodedR):
        rd = register_name(decoded.rd, naming)
        return f"{mnemonic} {rd}, {rs}, {rt}"

    if mnemonic in BRANCH_MNEMONICS:
        target = branch_target(address, decoded.immediate)
        return f"{mnemonic} {rs}, {rt}, address {target:X}"

    return f"{mnemonic} {rt}, {decoded.immediate}({rs})"
