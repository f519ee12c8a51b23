# src/mips_disasm/cli.py
"""
コマンドラインのエントリポイント。
命令語列を逆アセンブルして出力するか、セルフテストを実行します。
"""
import sys
import argparse
from typing import List, Optional

from mips_disasm.common.types import RegisterNaming, WORD_MASK
from mips_disasm.config.loader import ConfigLoader
from mips_disasm.config.models import DisassemblerConfig
from mips_disasm.core.driver import Disassembler
from mips_disasm.core.sequencer import INSTRUCTION_SIZE
from mips_disasm.arch.mips.errors import UnsupportedEncoding
from mips_disasm.loader.loader import HexWordLoader, IntelHexLoader
from mips_disasm.selftest.fixtures import SAMPLE_PROGRAM
from mips_disasm.selftest.runner import run_fixtures

def _parse_word(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hexadecimal word: {text}")
    if not 0 <= value <= WORD_MASK:
        raise argparse.ArgumentTypeError(f"not a 32-bit value: {text}")
    return value

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mips-disasm", description="MIPS R/I-format instruction disassembler")
    p.add_argument("words", nargs="*", type=_parse_word, help="Instruction words in hex (e.g. 0x01398820)")
    p.add_argument("--file", help="Text file with one hex word per line")
    p.add_argument("--intel-hex", help="Intel HEX image; words are read big-endian from its lowest address")
    p.add_argument("--config", help="YAML config (base_address, register_naming, strict, program)")
    p.add_argument("--base", type=_parse_word, default=None,
                   help="Base address; the first instruction is placed at base+4")
    p.add_argument("--abi", action="store_true", help="Render registers with ABI names ($t1) instead of numbers ($9)")
    p.add_argument("--strict", action="store_true", help="Stop at the first unsupported instruction word")
    p.add_argument("--self-test", action="store_true",
                   help="Run the built-in fixtures (numeric register names) and report PASSED/FAILED")
    return p

# @intent:responsibility 引数と設定ファイルを統合し、逆アセンブルまたはセルフテストを実行します。
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.self_test and args.abi:
        parser.error("--self-test compares against numeric register fixtures and cannot be combined with --abi")

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else DisassemblerConfig()
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    if args.abi:
        config.register_naming = RegisterNaming.ABI
    if args.strict:
        config.strict = True

    if args.self_test:
        report = run_fixtures()
        print(f"{report.passed} passed, {len(report.failures)} failed")
        return 0 if report.ok else 1

    words = list(args.words)
    try:
        if args.file:
            words.extend(HexWordLoader().load_hex_words(args.file))
        if args.intel_hex:
            start, hex_words = IntelHexLoader().load_intel_hex(args.intel_hex)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    if args.intel_hex:
        if not words and hex_words and args.base is None:
            config.base_address = (start - INSTRUCTION_SIZE) & WORD_MASK
        words.extend(hex_words)
    if not words:
        words = config.program or list(SAMPLE_PROGRAM)
    if args.base is not None:
        config.base_address = args.base

    disassembler = Disassembler(config.base_address, config.register_naming, config.strict)
    try:
        report = disassembler.run(words)
    except UnsupportedEncoding as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0 if not report.failures else 2

if __name__ == '__main__':
    sys.exit(main())
