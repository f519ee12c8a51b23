# src/mips_disasm/selftest/fixtures.py
"""
セルフテスト用のリテラルデータ。
"""
from typing import List

from mips_disasm.common.types import Fixture, InstructionWord

# 分岐先はこのアドレスに置かれた命令として計算されます。
SELF_TEST_ADDRESS = 0x7A090

# @intent:data_structure 命令語から期待される出力 (アドレスなし) への順序付きマッピング。
SELF_TEST_FIXTURES: Fixture = {
    # R-Format
    0x01398820: "add $17, $9, $25",
    0x01398824: "and $17, $9, $25",
    0x01398822: "sub $17, $9, $25",
    0x01398825: "or $17, $9, $25",
    0x0139882A: "slt $17, $9, $25",
    # I-Format
    0x8D3104D2: "lw $17, 1234($9)",
    0x8D31FB2E: "lw $17, -1234($9)",
    0xAD3104D2: "sw $17, 1234($9)",
    0xAD31FB2E: "sw $17, -1234($9)",
    0x1229FFFF: "beq $17, $9, address 7A090",  # -1
    0x1229000E: "beq $17, $9, address 7A0CC",  # 14
    0x1629FFF1: "bne $17, $9, address 7A058",  # -15
    0x16290000: "bne $17, $9, address 7A094",  # 0
    0xAE77FFFC: "sw $23, -4($19)",
}

# @intent:data_structure ベースアドレス 0x7A05C から逆アセンブルするサンプルプログラム。
SAMPLE_PROGRAM: List[InstructionWord] = [
    0x022DA822, 0x8EF30018, 0x12A70004, 0x02689820, 0xAD930018, 0x02697824,
    0xAD8FFFF4, 0x018C6020, 0x02A4A825, 0x158FFFF6, 0x8E59FFF0,
]

SAMPLE_LISTING: List[str] = [
    "7a060: sub $21, $17, $13",
    "7a064: lw $19, 24($23)",
    "7a068: beq $21, $7, address 7A07C",
    "7a06c: add $19, $19, $8",
    "7a070: sw $19, 24($12)",
    "7a074: and $15, $19, $9",
    "7a078: sw $15, -12($12)",
    "7a07c: add $12, $12, $12",
    "7a080: or $21, $21, $4",
    "7a084: bne $12, $15, address 7A060",
    "7a088: lw $25, -16($18)",
]
