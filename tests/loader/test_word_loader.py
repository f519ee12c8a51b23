# tests/loader/test_word_loader.py
"""
mips_disasm.loader.loaderモジュールの単体テスト。
"""
import pytest

from mips_disasm.loader.loader import HexWordLoader, IntelHexLoader

# @intent:test_suite 命令語ローダー機能の検証。

class TestHexWordLoader:
    def test_load_words_with_comments(self, tmp_path):
        path = tmp_path / "program.txt"
        path.write_text("""
        ; sample
        0x022DA822
        8EF30018   # lw
        0x12a70004 ; beq

        """)
        words = HexWordLoader().load_hex_words(str(path))
        assert words == [0x022DA822, 0x8EF30018, 0x12A70004]

    def test_invalid_word(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("0x01398820\nxyz\n")
        with pytest.raises(ValueError, match="line 2"):
            HexWordLoader().load_hex_words(str(path))

    def test_word_too_wide(self, tmp_path):
        path = tmp_path / "wide.txt"
        path.write_text("0x100000000\n")
        with pytest.raises(ValueError, match="32-bit"):
            HexWordLoader().load_hex_words(str(path))

class TestIntelHexLoader:
    def test_load_big_endian_words(self, tmp_path):
        path = tmp_path / "simple.hex"
        path.write_text("""
        :08000000022DA8228EF3001866
        :00000001FF
        """)
        start, words = IntelHexLoader().load_intel_hex(str(path))
        assert start == 0x0000
        assert words == [0x022DA822, 0x8EF30018]

    def test_extended_linear_address(self, tmp_path):
        path = tmp_path / "ela.hex"
        path.write_text("""
        :020000040007F3 ; Set ELA to 0x0007xxxx
        :04A06000022DA82203
        :00000001FF
        """)
        start, words = IntelHexLoader().load_intel_hex(str(path))
        assert start == 0x7A060
        assert words == [0x022DA822]

    def test_partial_word(self, tmp_path):
        path = tmp_path / "partial.hex"
        path.write_text(":03000000AABBCCCC\n:00000001FF\n")
        with pytest.raises(ValueError, match="multiple of 4"):
            IntelHexLoader().load_intel_hex(str(path))

    def test_invalid_checksum(self, tmp_path):
        path = tmp_path / "checksum.hex"
        path.write_text(":08000000022DA8228EF3001867\n:00000001FF\n")
        with pytest.raises(ValueError, match="Checksum mismatch on line 1: Calculated 66, Expected 67"):
            IntelHexLoader().load_intel_hex(str(path))

    def test_unknown_record_type(self, tmp_path):
        path = tmp_path / "unknown.hex"
        path.write_text(":020000061234B2\n:00000001FF\n")
        with pytest.raises(ValueError, match="Unknown Intel HEX record type 06 on line 1"):
            IntelHexLoader().load_intel_hex(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.hex"
        path.write_text("")
        assert IntelHexLoader().load_intel_hex(str(path)) == (0, [])

    def test_non_hex_data_byte(self, tmp_path):
        path = tmp_path / "bad_data.hex"
        path.write_text(":04000000ZZ2DA82203\n:00000001FF\n")
        with pytest.raises(ValueError, match="Error parsing Intel HEX line 1"):
            IntelHexLoader().load_intel_hex(str(path))
