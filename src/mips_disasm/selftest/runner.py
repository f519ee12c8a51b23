# src/mips_disasm/selftest/runner.py
"""
フィクスチャを使ったセルフテストの実行。
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from mips_disasm.common.types import Address, Fixture, InstructionWord, RegisterNaming
from mips_disasm.core.driver import Emit
from mips_disasm.arch.mips.disassembler import decode_word
from mips_disasm.selftest.fixtures import SELF_TEST_ADDRESS, SELF_TEST_FIXTURES

# @intent:responsibility セルフテストの結果を集計します。
@dataclass
class FixtureReport:
    passed: int = 0
    failures: List[Tuple[InstructionWord, str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

# @intent:responsibility 各フィクスチャをデコードし、期待値と比較して PASSED / FAILED を出力します。
def run_fixtures(fixtures: Fixture = SELF_TEST_FIXTURES, address: Address = SELF_TEST_ADDRESS,
                 emit: Optional[Emit] = print,
                 naming: RegisterNaming = RegisterNaming.NUMERIC) -> FixtureReport:
    report = FixtureReport()
    for word, expected in fixtures.items():
        result = decode_word(word, address, naming)
        actual = result.text if result.ok else result.error.placeholder()
        if actual == expected:
            report.passed += 1
            message = "PASSED"
        else:
            report.failures.append((word, expected, actual))
            message = f"FAILED: expected '{actual}' to equal '{expected}'"
        if emit is not None:
            emit(message)
    return report
