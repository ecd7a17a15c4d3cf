"""
Running tallies of compiled members, fed by parsed signatures and compile events.
"""

from dataclasses import dataclass, fields
from typing import Optional

from .model import CanonicalSignature
from .modifiers import Modifier


_MODIFIER_COUNTERS = {
    Modifier.PUBLIC: "count_public",
    Modifier.PROTECTED: "count_protected",
    Modifier.PRIVATE: "count_private",
    Modifier.ABSTRACT: "count_abstract",
    Modifier.STATIC: "count_static",
    Modifier.FINAL: "count_final",
    Modifier.SYNCHRONIZED: "count_synchronized",
    Modifier.NATIVE: "count_native",
    Modifier.STRICT: "count_strictfp",
}

_COMPILER_COUNTERS = {
    "c1": "count_c1",
    "c2": "count_c2",
    "c2n": "count_c2n",
}


@dataclass
class JITStats:
    # method modifiers
    count_public: int = 0
    count_protected: int = 0
    count_private: int = 0
    count_abstract: int = 0
    count_static: int = 0
    count_final: int = 0
    count_synchronized: int = 0
    count_native: int = 0
    count_strictfp: int = 0

    # compilation stats
    count_osr: int = 0
    count_c1: int = 0
    count_c2: int = 0
    count_c2n: int = 0
    total_compile_time: int = 0
    native_bytes: int = 0
    count_compiler_threads: int = 0

    count_class: int = 0
    count_method: int = 0
    count_constructor: int = 0

    count_level1: int = 0
    count_level2: int = 0
    count_level3: int = 0
    count_level4: int = 0

    def reset(self):
        for f in fields(self):
            setattr(self, f.name, 0)

    def record_member(self, signature: CanonicalSignature):
        """Count a member's modifiers and whether it is a constructor or a method."""
        for flag, counter in _MODIFIER_COUNTERS.items():
            if signature.modifier_bits & flag:
                setattr(self, counter, getattr(self, counter) + 1)

        if signature.is_constructor:
            self.count_constructor += 1
        else:
            self.count_method += 1

    def record_compile(self, level: Optional[int] = None, osr: bool = False,
                       compiler: Optional[str] = None):
        """Count one compilation at a tiered level (1-4) by the given compiler."""
        if level is not None:
            if not 1 <= level <= 4:
                raise ValueError(f"Invalid compilation level: {level}")
            counter = f"count_level{level}"
            setattr(self, counter, getattr(self, counter) + 1)

        if osr:
            self.count_osr += 1

        if compiler is not None:
            counter = _COMPILER_COUNTERS.get(compiler.lower())
            if counter is None:
                raise ValueError(f"Unknown compiler: {compiler}")
            setattr(self, counter, getattr(self, counter) + 1)

    def record_delay(self, delay: int):
        self.total_compile_time += delay

    def add_native_bytes(self, count: int):
        self.native_bytes += count

    def inc_compiler_threads(self):
        self.count_compiler_threads += 1

    def inc_class(self):
        self.count_class += 1

    @property
    def total_compiled_methods(self) -> int:
        return self.count_level1 + self.count_level2 + self.count_level3 + self.count_level4
