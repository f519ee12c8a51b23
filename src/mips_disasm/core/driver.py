# src/mips_disasm/core/driver.py
"""
Core Layer (逆アセンブルドライバ)

命令語列をシーケンサでアドレス付けしながらデコードし、1行ずつ出力先 (emit) へ書き出します。
サポート外の命令語は既定では警告を出して読み飛ばし、strictモードでは最初の失敗で中断します。
"""
import warnings
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from mips_disasm.common.types import Address, InstructionWord, RegisterNaming
from mips_disasm.core.sequencer import Sequencer, DEFAULT_BASE_ADDRESS
from mips_disasm.arch.mips.disassembler import DecodeResult, decode_word
from mips_disasm.arch.mips.errors import UnsupportedEncodingWarning

Emit = Callable[[str], None]

# @intent:responsibility 1回の実行の結果をまとめます。
@dataclass
class ListingReport:
    results: List[DecodeResult] = field(default_factory=list)

    @property
    def lines(self) -> List[str]:
        return [r.line() for r in self.results]

    @property
    def failures(self) -> List[DecodeResult]:
        return [r for r in self.results if not r.ok]

    @property
    def decoded_count(self) -> int:
        return sum(1 for r in self.results if r.ok)

# @intent:responsibility 命令語列のデコードと出力を駆動します。
class Disassembler:
    """
    シーケンサを所有し、命令語をプログラム順に1つずつデコードするドライバ。
    """
    def __init__(self, base_address: Address = DEFAULT_BASE_ADDRESS,
                 naming: RegisterNaming = RegisterNaming.NUMERIC,
                 strict: bool = False):
        self._sequencer = Sequencer(base_address)
        self._naming = naming
        self._strict = strict

    @property
    def sequencer(self) -> Sequencer:
        return self._sequencer

    @property
    def strict(self) -> bool:
        return self._strict

    # @intent:responsibility 命令語列をデコードし、各行をemitへ書き出します。
    # @intent:pre-condition strictモードでは最初のサポート外命令語でUnsupportedEncodingを送出します。
    def run(self, words: Iterable[InstructionWord], emit: Optional[Emit] = print) -> ListingReport:
        """
        `emit` に None を渡すと出力せずに結果だけを返します。
        シーケンサは呼び出しごとにベースアドレスへ戻されます。
        """
        self._sequencer.reset()
        report = ListingReport()

        for word in words:
            result = decode_word(word, self._sequencer.next_address(), self._naming)
            if not result.ok:
                if self._strict:
                    raise result.error
                warnings.warn(f"Skipping word at {result.address:#x}: {result.error}",
                              UnsupportedEncodingWarning)
            report.results.append(result)
            if emit is not None:
                emit(result.line())

        return report
