# mips_disasm/loader/loader.py
"""
命令語ローダーモジュール。
16進数テキスト (1行1命令語) および Intel HEX 形式の読み込みをサポートします。
"""
from typing import Dict, List, Tuple

from mips_disasm.common.types import Address, InstructionWord, WORD_MASK

class HexWordLoader:
    """
    1行に1つの32ビット命令語を16進数で記述したテキストファイルを読み込むローダー。
    `;` または `#` 以降はコメントとして扱います。
    """
    def load_hex_words(self, file_path: str) -> List[InstructionWord]:
        words: List[InstructionWord] = []
        with open(file_path, 'r', encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.split(';')[0].split('#')[0].strip()
                if not line:
                    continue
                try:
                    word = int(line, 16)
                except ValueError:
                    raise ValueError(f"Invalid instruction word on line {line_num}: {line}")
                if not 0 <= word <= WORD_MASK:
                    raise ValueError(f"Instruction word on line {line_num} is not a 32-bit value: {line}")
                words.append(word)
        return words

class IntelHexLoader:
    """
    Intel HEX形式のファイルを解析し、ビッグエンディアンの32ビット命令語列に変換するローダー。
    """
    def load_intel_hex(self, file_path: str) -> Tuple[Address, List[InstructionWord]]:
        memory = self._read_records(file_path)
        if not memory:
            return 0, []

        start = min(memory)
        end = max(memory) + 1
        if (end - start) % 4 != 0:
            raise ValueError(f"Data length {end - start} is not a multiple of 4 bytes")

        words: List[InstructionWord] = []
        for addr in range(start, end, 4):
            word = 0
            for i in range(4):
                if addr + i not in memory:
                    raise ValueError(f"Gap in Intel HEX data at address {addr + i:08X}")
                word = (word << 8) | memory[addr + i]
            words.append(word)
        return start, words

    def _read_records(self, file_path: str) -> Dict[int, int]:
        memory: Dict[int, int] = {}
        current_extended_address = 0x0000

        with open(file_path, 'r') as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line or not line.startswith(':'):
                    continue

                comment_start = line.find(';')
                if comment_start != -1:
                    line = line[:comment_start].strip()

                if len(line) < 11:
                    raise ValueError(f"Invalid Intel HEX record format on line {line_num}: Too short - {line}")

                try:
                    data_length = int(line[1:3], 16)
                    address_field = int(line[3:7], 16)
                    record_type = int(line[7:9], 16)
                    data_part_str = line[9:-2]
                    checksum_field = int(line[-2:], 16)
                except ValueError as e:
                    raise ValueError(f"Error parsing Intel HEX line {line_num}: {line} - {e}")

                if len(data_part_str) != data_length * 2:
                    raise ValueError(f"Data length mismatch on line {line_num}")

                try:
                    data = [int(data_part_str[i*2:(i*2)+2], 16) for i in range(data_length)]
                except ValueError as e:
                    raise ValueError(f"Error parsing Intel HEX line {line_num}: {line} - {e}")

                checksum_sum = data_length + (address_field >> 8) + (address_field & 0xFF) + record_type + sum(data)
                calculated_checksum = (~checksum_sum + 1) & 0xFF

                if calculated_checksum != checksum_field:
                    raise ValueError(f"Checksum mismatch on line {line_num}: Calculated {calculated_checksum:02X}, Expected {checksum_field:02X}")

                if record_type == 0x00:
                    load_address = (current_extended_address + address_field) & WORD_MASK
                    for i, byte_data in enumerate(data):
                        memory[load_address + i] = byte_data
                elif record_type == 0x01:
                    break
                elif record_type == 0x04:
                    current_extended_address = int(data_part_str, 16) << 16
                elif record_type == 0x02:
                    current_extended_address = int(data_part_str, 16) << 4
                elif record_type == 0x03 or record_type == 0x05:
                    pass
                else:
                    raise ValueError(f"Unknown Intel HEX record type {record_type:02X} on line {line_num}")

        return memory
