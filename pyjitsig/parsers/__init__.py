"""
Format parsers. Each produces a finalized CanonicalSignature.
"""

from .assembly import AssemblyHeaderParser
from .bytecode import BytecodeHeaderParser, isolate_generics_tag
from .log import (
    LogCompilationParser,
    bytecode_comment_to_log_signature,
    split_log_signature,
)


def parse_log_signature(text: str, strict: bool = False):
    return LogCompilationParser(strict=strict).parse(text)


def parse_bytecode_comment(comment: str, strict: bool = False):
    return LogCompilationParser(strict=strict).parse_bytecode_comment(comment)


def parse_bytecode_header(text: str, class_name: str, class_context=None, strict: bool = False):
    return BytecodeHeaderParser(strict=strict).parse(text, class_name, class_context)


def parse_assembly_header(text: str, strict: bool = False):
    return AssemblyHeaderParser(strict=strict).parse(text)


__all__ = [
    'AssemblyHeaderParser',
    'BytecodeHeaderParser',
    'LogCompilationParser',
    'bytecode_comment_to_log_signature',
    'isolate_generics_tag',
    'split_log_signature',
    'parse_log_signature',
    'parse_bytecode_comment',
    'parse_bytecode_header',
    'parse_assembly_header',
]
