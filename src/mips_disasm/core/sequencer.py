# src/mips_disasm/core/sequencer.py
"""
Core Layer (アドレスシーケンサ)

命令列に単調増加するアドレスを割り当てます。デコーダ内で唯一の可変状態であり、
グローバルではなくドライバが所有して順番に進めます。
"""
from mips_disasm.common.types import Address, WORD_MASK

DEFAULT_BASE_ADDRESS = 0x7A05C
INSTRUCTION_SIZE = 4

# @intent:responsibility 命令ごとに4ずつ進むアドレスカウンタを保持します。
class Sequencer:
    """
    ベースアドレスから始まるカウンタ。
    デコード前にアドレスを進めるため、最初の命令は base + 4 に配置されます。
    """
    # @intent:pre-condition baseは32ビットの非負整数である必要があります。
    def __init__(self, base: Address = DEFAULT_BASE_ADDRESS):
        if not 0 <= base <= WORD_MASK:
            raise ValueError(f"Base address {base:#x} is not a 32-bit value.")
        self._base = base
        self._address = base

    @property
    def base(self) -> Address:
        return self._base

    @property
    def current(self) -> Address:
        """直近に割り当てたアドレス (未割り当てならベースアドレス)。"""
        return self._address

    def next_address(self) -> Address:
        self._address = (self._address + INSTRUCTION_SIZE) & WORD_MASK
        return self._address

    def reset(self) -> None:
        self._address = self._base
