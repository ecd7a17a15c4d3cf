"""Tests for generics declarations, resolution and class contexts."""

import pytest
from pathlib import Path
from types import SimpleNamespace

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from pyjitsig.generics import (
    ClassContext, chain, erase_type_arguments, parse_generics_declaration, resolve,
)
from pyjitsig.model import SignatureParseError
from pyjitsig.signature import parse_type_parameters


@pytest.fixture
def nested():
    outer = ClassContext("a.Outer", {"T": "java.lang.Number", "K": None})
    middle = ClassContext("a.Outer$Middle", None, parent=outer)
    return ClassContext("a.Outer$Middle$Inner", {"E": "java.lang.CharSequence"}, parent=middle)


class TestGenericsDeclaration:
    def test_bound_and_unbound(self):
        assert parse_generics_declaration("T extends java.lang.Number, U") == {
            "T": "java.lang.Number", "U": None,
        }

    def test_braces_and_slashes(self):
        assert parse_generics_declaration("{T extends java/lang/Number}") == {"T": "java.lang.Number"}

    def test_generic_bound_not_split(self):
        result = parse_generics_declaration("K extends java.lang.Comparable<K>, V")
        assert list(result) == ["K", "V"]
        assert result["K"] == "java.lang.Comparable"

    def test_intersection_bound(self):
        result = parse_generics_declaration("T extends java.lang.Number & java.lang.Comparable<T>")
        assert result == {"T": "java.lang.Number"}


class TestResolve:
    def test_method_binding(self):
        assert resolve("T", {"T": "java.lang.Number"}) == "java.lang.Number"

    def test_unbounded_is_object(self):
        assert resolve("U", {"U": None}) == "java.lang.Object"

    def test_array_of_type_variable(self):
        assert resolve("T[][]", {"T": "java.lang.Number"}) == "java.lang.Number[][]"

    def test_unbound_generic_suffix_erased(self):
        assert resolve("T<String>") == "T"
        assert resolve("java.util.List<java.lang.String>[]") == "java.util.List[]"

    def test_plain_token_unchanged(self):
        assert resolve("java.lang.String", {"T": "java.lang.Number"}) == "java.lang.String"
        assert resolve("T") == "T"

    def test_enclosing_chain(self, nested):
        assert resolve("T", None, nested) == "java.lang.Number"
        assert resolve("E", None, nested) == "java.lang.CharSequence"
        assert resolve("K", None, nested) == "java.lang.Object"

    def test_method_scope_first(self, nested):
        assert resolve("T", {"T": "java.lang.String"}, nested) == "java.lang.String"

    def test_innermost_class_first(self):
        outer = ClassContext("a.Outer", {"T": "java.lang.Number"})
        inner = ClassContext("a.Outer$Inner", {"T": "java.lang.String"}, parent=outer)
        assert resolve("T", None, inner) == "java.lang.String"

    def test_duck_typed_context(self):
        root = SimpleNamespace(generics={"T": "java.lang.Runnable"}, parent=None)
        child = SimpleNamespace(generics=None, parent=root)
        assert resolve("T", None, child) == "java.lang.Runnable"

    def test_chain_order(self, nested):
        assert [c.name for c in chain(nested)] == [
            "a.Outer$Middle$Inner", "a.Outer$Middle", "a.Outer",
        ]

    def test_erase_all_spans(self):
        assert erase_type_arguments("java.util.Map<K, java.util.List<V>>[]") == "java.util.Map[]"
        assert erase_type_arguments("a.Outer<T>.Inner<U>") == "a.Outer.Inner"


class TestClassContext:
    def test_from_class_header(self):
        ctx = ClassContext.from_class_header(
            "public class a.b.Box<T extends java.lang.Number, U> extends java.lang.Object")
        assert ctx.name == "a.b.Box"
        assert ctx.generics == {"T": "java.lang.Number", "U": None}
        assert ctx.parent is None

    def test_header_without_generics(self):
        parent = ClassContext("a.b.Outer")
        ctx = ClassContext.from_class_header("final class a.b.Outer$Plain implements java.lang.Runnable", parent)
        assert ctx.name == "a.b.Outer$Plain"
        assert ctx.generics is None
        assert ctx.parent is parent

    def test_interface_header(self):
        ctx = ClassContext.from_class_header("public interface a.Fn<T, R extends java.lang.Number>")
        assert ctx.generics == {"T": None, "R": "java.lang.Number"}

    def test_not_a_header(self):
        with pytest.raises(SignatureParseError):
            ClassContext.from_class_header("public void run()")

    def test_from_signature(self):
        ctx = ClassContext.from_signature(
            "a/b/Box", "<T:Ljava/lang/Number;U:Ljava/lang/Object;>Ljava/lang/Object;")
        assert ctx.name == "a.b.Box"
        assert ctx.generics == {"T": "java.lang.Number", "U": None}

    def test_from_missing_signature(self):
        assert ClassContext.from_signature("a/b/Plain", None).generics is None

    def test_malformed_signature(self):
        signature = "<T:Ljava/lang/Number;"
        with pytest.raises(SignatureParseError) as exc_info:
            ClassContext.from_signature("a/B", signature)
        assert exc_info.value.text == signature
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestSignatureAttribute:
    def test_interface_bound(self):
        assert parse_type_parameters("<T::Ljava/lang/Comparable<TT;>;>Ljava/lang/Object;") == {
            "T": "java.lang.Comparable",
        }

    def test_type_variable_and_array_bounds(self):
        params = parse_type_parameters("<K:Ljava/lang/Object;V:TK;>Ljava/util/AbstractMap<TK;TV;>;")
        assert params == {"K": None, "V": "K"}

    def test_inner_class_bound(self):
        params = parse_type_parameters("<E:Ljava/util/Map$Entry<**>;>Ljava/lang/Object;")
        assert params == {"E": "java.util.Map$Entry"}

    def test_no_type_parameters(self):
        assert parse_type_parameters("Ljava/lang/Object;") == {}

    def test_unterminated(self):
        with pytest.raises(ValueError):
            parse_type_parameters("<T:Ljava/lang/Number;")

    def test_missing_bound_separator(self):
        with pytest.raises(ValueError, match="Expected ':'"):
            parse_type_parameters("<T;Ljava/lang/Number;>Ljava/lang/Object;")
