"""
MIPS Architecture Package
"""
from .disassembler import DecodeResult, decode_word, decode_batch, disassemble
from .errors import UnsupportedEncoding, UnsupportedEncodingWarning
