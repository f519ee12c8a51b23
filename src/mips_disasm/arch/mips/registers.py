# src/mips_disasm/arch/mips/registers.py
"""
MIPS汎用レジスタの表示名定義。

レジスタ番号 (0-31) を `$<n>` 形式、またはABI名 (`$t1` など) で表示します。
どちらの表示形式も `parse_register` で元の番号に戻せます。
"""
from typing import Dict

from mips_disasm.common.types import RegisterNaming

# @intent:data_structure レジスタ番号からABI名への全単射テーブル。
ABI_NAMES = (
    "zero", "at",
    "v0", "v1",
    "a0", "a1", "a2", "a3",
    "t0", "t1", "t2", "t3", "t4", "t5", "t6", "t7",
    "s0", "s1", "s2", "s3", "s4", "s5", "s6", "s7",
    "t8", "t9",
    "k0", "k1",
    "gp", "sp", "fp", "ra",
)

_ABI_INDEX: Dict[str, int] = {name: index for index, name in enumerate(ABI_NAMES)}

REGISTER_COUNT = 32

# @intent:utility_function レジスタ番号を指定された形式の文字列に変換します。
# @intent:pre-condition indexは0から31の範囲である必要があります。
def register_name(index: int, naming: RegisterNaming = RegisterNaming.NUMERIC) -> str:
    if not 0 <= index < REGISTER_COUNT:
        raise ValueError(f"Register index out of range: {index}")
    if naming is RegisterNaming.ABI:
        return f"${ABI_NAMES[index]}"
    return f"${index}"

# @intent:utility_function `$17` や `$s1` のようなレジスタ表記を番号に戻します。
def parse_register(text: str) -> int:
    text = text.strip()
    if not text.startswith('$'):
        raise ValueError(f"Invalid register: {text}")
    body = text[1:].lower()
    if body.isdigit():
        index = int(body)
        if index < REGISTER_COUNT:
            return index
        raise ValueError(f"Register index out of range: {text}")
    if body in _ABI_INDEX:
        return _ABI_INDEX[body]
    raise ValueError(f"Unknown register name: {text}")
