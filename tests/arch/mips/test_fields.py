# tests/arch/mips/test_fields.py
"""
mips_disasm.arch.mips.fieldsモジュールの単体テスト。
"""
import pytest

from mips_disasm.arch.mips.fields import (
    Format,
    DecodedR,
    DecodedI,
    classify,
    decode_r,
    decode_i,
    sign_extend_16,
)

# @intent:test_suite ビットフィールド抽出と形式判定の検証。

class TestClassify:
    # @intent:test_case_r_format 上位6ビットが0の命令語はR形式と判定されることを検証します。
    @pytest.mark.parametrize("word", [0x00000000, 0x01398820, 0x03FFFFFF])
    def test_zero_opcode_is_r_format(self, word):
        assert classify(word) is Format.R

    # @intent:test_case_i_format サポート対象のオペコードはI形式と判定されることを検証します。
    @pytest.mark.parametrize("word", [0x8D3104D2, 0xAD3104D2, 0x1229FFFF, 0x16290000])
    def test_supported_opcodes_are_i_format(self, word):
        assert classify(word) is Format.I

    # @intent:test_case_total サポート外のオペコードでも判定自体は失敗しないことを検証します。
    def test_unsupported_opcode_still_classifies(self):
        assert classify(0xF8000000) is Format.I
        assert classify(0xFFFFFFFF) is Format.I

class TestDecodeR:
    def test_decode_add(self):
        decoded = decode_r(0x01398820)
        assert decoded == DecodedR(rs=9, rt=25, rd=17, function_code=0x20)

    def test_shamt_is_ignored(self):
        # shamt = 0b11111
        decoded = decode_r(0x01398820 | (0x1F << 6))
        assert decoded.rd == 17
        assert decoded.function_code == 0x20

    # @intent:test_case_immutability デコード結果が不変であることを検証します。
    def test_decoded_r_is_frozen(self):
        decoded = decode_r(0x01398820)
        with pytest.raises(AttributeError):
            decoded.rs = 0

class TestDecodeI:
    def test_decode_positive_immediate(self):
        decoded = decode_i(0x8D3104D2)
        assert decoded == DecodedI(opcode=0x23, rs=9, rt=17, immediate=1234)

    # @intent:test_case_sign_extension 即値が符号付き16ビットとして解釈されることを検証します。
    def test_decode_negative_immediate(self):
        decoded = decode_i(0x8D31FB2E)
        assert decoded.immediate == -1234

    def test_decode_branch_fields(self):
        decoded = decode_i(0x1629FFF1)
        assert decoded.opcode == 0x05
        assert decoded.rs == 17
        assert decoded.rt == 9
        assert decoded.immediate == -15

class TestSignExtend16:
    @pytest.mark.parametrize("raw, expected", [
        (0x0000, 0),
        (0x7FFF, 32767),
        (0x8000, -32768),
        (0xFFFF, -1),
        (0x1FFFF, -1),  # 上位ビットは無視される
    ])
    def test_sign_extend(self, raw, expected):
        assert sign_extend_16(raw) == expected
