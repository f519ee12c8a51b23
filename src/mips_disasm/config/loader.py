import yaml
from typing import Dict, Any, List

from mips_disasm.common.types import RegisterNaming, WORD_MASK
from .models import DisassemblerConfig

class ConfigLoader:
    def load_from_file(self, path: str) -> DisassemblerConfig:
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}")
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> DisassemblerConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        base_address = self._parse_word(data.get("base_address", DisassemblerConfig.base_address))

        naming_value = data.get("register_naming", RegisterNaming.NUMERIC.value)
        try:
            naming = RegisterNaming(str(naming_value).lower())
        except ValueError:
            raise ValueError(f"Invalid register_naming: {naming_value}")

        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ValueError(f"Invalid strict flag: {strict}")

        program_data = data.get("program") or []
        if not isinstance(program_data, list):
            raise ValueError(f"Invalid program: {program_data}")
        program: List[int] = [self._parse_word(w) for w in program_data]

        return DisassemblerConfig(
            base_address=base_address,
            register_naming=naming,
            strict=strict,
            program=program
        )

    def _parse_word(self, value: Any) -> int:
        word = self._parse_int(value)
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"Value out of 32-bit range: {value}")
        return word

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
