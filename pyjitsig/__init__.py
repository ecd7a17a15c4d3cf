"""pyjitsig - Member signature normalization for JIT log analysis."""

from .finalizer import finalize, from_parts
from .generics import ClassContext, parse_generics_declaration, resolve
from .model import (
    CanonicalSignature,
    MalformedAssemblySignature,
    MalformedLogSignature,
    SignatureParseError,
    SignatureParts,
    UnidentifiedMember,
)
from .modifiers import Modifier
from .parsers import (
    AssemblyHeaderParser,
    BytecodeHeaderParser,
    LogCompilationParser,
    parse_assembly_header,
    parse_bytecode_comment,
    parse_bytecode_header,
    parse_log_signature,
)
from .stats import JITStats
from .tokenizer import split_parameters
from .types import expand_type_name

__version__ = "0.1.0"
__all__ = [
    'AssemblyHeaderParser',
    'BytecodeHeaderParser',
    'CanonicalSignature',
    'ClassContext',
    'JITStats',
    'LogCompilationParser',
    'MalformedAssemblySignature',
    'MalformedLogSignature',
    'Modifier',
    'SignatureParseError',
    'SignatureParts',
    'UnidentifiedMember',
    'expand_type_name',
    'finalize',
    'from_parts',
    'parse_assembly_header',
    'parse_bytecode_comment',
    'parse_bytecode_header',
    'parse_generics_declaration',
    'parse_log_signature',
    'resolve',
    'split_parameters',
]
