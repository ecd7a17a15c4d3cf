"""
Descriptor block splitting using Lark.

A method descriptor packs its parameter types back to back with no separator:
``IJ[Ljava/lang/String;`` is three descriptors. The grammar in descriptor.lark
splits such a block; expansion to dotted names happens in ``types``.
"""

import threading
from pathlib import Path
from typing import Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError

from .types import expand_type_name


GRAMMAR_FILE = Path(__file__).parent / "descriptor.lark"


class DescriptorError(ValueError):
    """A descriptor block that the grammar does not accept."""
    pass


@v_args(inline=True)
class DescriptorTransformer(Transformer):
    """Transforms the parse tree into a list of raw descriptor strings."""

    def start(self, *descriptors):
        return list(descriptors)

    def base(self, token):
        return str(token)

    def object(self, token):
        return str(token)

    def array(self, descriptor):
        return "[" + descriptor


class DescriptorParser:
    """Splits concatenated field descriptors."""

    def __init__(self):
        with open(GRAMMAR_FILE, "r") as f:
            grammar = f.read()

        self._parser = Lark(grammar, parser="lalr")
        self._transformer = DescriptorTransformer()

    def split(self, block: str) -> list[str]:
        """Split a descriptor block into its descriptors, e.g. 'I[J' -> ['I', '[J']."""
        block = block.strip()
        if not block:
            return []
        try:
            tree = self._parser.parse(block)
        except LarkError as e:
            raise DescriptorError(f"Invalid descriptor block '{block}': {e}") from e
        return self._transformer.transform(tree)

    def expand(self, block: str) -> list[str]:
        """Split a descriptor block and expand each descriptor to a dotted type name."""
        return [expand_type_name(d) for d in self.split(block)]


_parser: Optional[DescriptorParser] = None
_parser_lock = threading.Lock()


def get_descriptor_parser() -> DescriptorParser:
    """Return the shared parser, building it once on first use."""
    global _parser
    if _parser is None:
        with _parser_lock:
            if _parser is None:
                _parser = DescriptorParser()
    return _parser


def split_descriptors(block: str) -> list[str]:
    return get_descriptor_parser().split(block)


def expand_descriptors(block: str) -> list[str]:
    return get_descriptor_parser().expand(block)
