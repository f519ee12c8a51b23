# tests/config/test_config_loader.py
"""
mips_disasm.config.loaderモジュールの単体テスト。
"""
import pytest

from mips_disasm.common.types import RegisterNaming
from mips_disasm.config.loader import ConfigLoader
from mips_disasm.config.models import DisassemblerConfig

# @intent:test_suite YAML設定ファイルの読み込みの検証。

class TestConfigLoader:
    @pytest.fixture
    def write_config(self, tmp_path):
        def _write(text):
            path = tmp_path / "config.yaml"
            path.write_text(text)
            return str(path)
        return _write

    def test_load_full_config(self, write_config):
        path = write_config("""
base_address: 0x1000
register_naming: abi
strict: true
program:
  - 0x01398820
  - "0x8D3104D2"
  - 305419896
""")
        config = ConfigLoader().load_from_file(path)
        assert config.base_address == 0x1000
        assert config.register_naming is RegisterNaming.ABI
        assert config.strict is True
        assert config.program == [0x01398820, 0x8D3104D2, 0x12345678]

    def test_defaults(self, write_config):
        config = ConfigLoader().load_from_file(write_config(""))
        assert config == DisassemblerConfig()
        assert config.base_address == 0x7A05C
        assert config.register_naming is RegisterNaming.NUMERIC
        assert config.strict is False
        assert config.program == []

    def test_string_base_address(self, write_config):
        config = ConfigLoader().load_from_file(write_config('base_address: "0x7A05C"\n'))
        assert config.base_address == 0x7A05C

    def test_invalid_naming(self, write_config):
        with pytest.raises(ValueError, match="Invalid register_naming"):
            ConfigLoader().load_from_file(write_config("register_naming: symbolic\n"))

    def test_invalid_integer(self, write_config):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_file(write_config("program: [zz]\n"))

    def test_word_out_of_range(self, write_config):
        with pytest.raises(ValueError, match="32-bit"):
            ConfigLoader().load_from_file(write_config("program: [0x100000000]\n"))

    def test_invalid_strict_flag(self, write_config):
        with pytest.raises(ValueError, match="strict"):
            ConfigLoader().load_from_file(write_config("strict: sometimes\n"))

    def test_non_mapping_root(self, write_config):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_file(write_config("- 1\n- 2\n"))

    def test_scalar_program(self, write_config):
        with pytest.raises(ValueError, match="Invalid program: 4660"):
            ConfigLoader().load_from_file(write_config("program: 0x1234\n"))

    def test_malformed_yaml(self, write_config):
        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigLoader().load_from_file(write_config("program: [0x1234\n"))
