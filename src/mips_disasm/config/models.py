from dataclasses import dataclass, field
from typing import List

from mips_disasm.common.types import InstructionWord, RegisterNaming
from mips_disasm.core.sequencer import DEFAULT_BASE_ADDRESS

@dataclass
class DisassemblerConfig:
    base_address: int = DEFAULT_BASE_ADDRESS
    register_naming: RegisterNaming = RegisterNaming.NUMERIC
    strict: bool = False  # Trueなら最初のサポート外命令語で中断する
    program: List[InstructionWord] = field(default_factory=list)
