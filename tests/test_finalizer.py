"""Tests for signature finalization and the canonical signature model."""

import json
import logging
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from pyjitsig import CanonicalSignature, SignatureParts, UnidentifiedMember, finalize, from_parts
from pyjitsig.finalizer import looks_like_synthetic_bridge_param


class TestFinalize:
    def test_init_renamed(self):
        sig = finalize(SignatureParts(owning_type="a.b.C", member_name="<init>", param_types=["int"]))
        assert sig.member_name == "C"
        assert sig.return_type == "void"

    def test_qualified_name_renamed(self):
        sig = finalize(SignatureParts(owning_type="a.b.C", member_name="a.b.C", return_type="int"))
        assert sig.member_name == "C"
        assert sig.return_type == "void"

    def test_static_initializer_has_no_params(self):
        sig = finalize(SignatureParts(owning_type="a.b.C", member_name="<clinit>", param_types=["int"]))
        assert sig.return_type == "void"
        assert sig.param_types == ()

    def test_synthetic_params_dropped(self, caplog):
        parts = SignatureParts(owning_type="a.Outer$Inner", member_name="<init>",
                               param_types=["a.Outer", "a.Outer$1", "int"])
        with caplog.at_level(logging.DEBUG, logger="pyjitsig.finalizer"):
            sig = finalize(parts)
        assert sig.param_types == ("a.Outer", "int")
        assert "a.Outer$1" in caplog.text

    def test_idempotent(self):
        parts = SignatureParts(owning_type="a.b.C", member_name="<init>",
                               param_types=["a.b.C$2", "long"])
        parts.add_modifier("private")
        once = finalize(parts)
        twice = finalize(once)
        assert twice == once
        assert twice.modifiers == once.modifiers == ("private",)
        assert twice.modifier_bits == once.modifier_bits

    def test_missing_member_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pyjitsig.finalizer"):
            sig = finalize(SignatureParts(owning_type="a.b.C"), "junk line")
        assert not sig.identified
        assert "junk line" in caplog.text

    def test_missing_member_strict(self):
        with pytest.raises(UnidentifiedMember) as exc_info:
            finalize(SignatureParts(owning_type="a.b.C"), "junk line", strict=True)
        assert exc_info.value.text == "junk line"
        assert exc_info.value.signature.member_name is None


class TestSyntheticParams:
    @pytest.mark.parametrize("param,expected", [
        ("a.Outer$1", True),
        ("a.Outer$12", True),
        ("a.Outer$Inner", False),
        ("a.Outer$1Local", False),
        ("int", False),
    ])
    def test_detection(self, param, expected):
        assert looks_like_synthetic_bridge_param(param) is expected


class TestFromParts:
    def test_constructor(self):
        sig = from_parts("a.b.C", "<init>", None, ["int"])
        assert sig.member_name == "C"
        assert sig.return_type == "void"

    def test_modifiers_canonical_order(self):
        sig = from_parts("a.b.C", "run", "void", [], modifiers=["static", "public"])
        assert sig.modifiers == ("public", "static")


class TestCanonicalSignature:
    def test_equality_ignores_modifiers(self):
        a = from_parts("a.b.C", "run", "void", ["int"], modifiers=["public", "synchronized"])
        b = from_parts("a.b.C", "run", "void", ["int"], modifiers=["public"])
        assert a == b
        assert hash(a) == hash(b)

    def test_param_order_matters(self):
        a = from_parts("a.b.C", "f", "void", ["int", "long"])
        b = from_parts("a.b.C", "f", "void", ["long", "int"])
        assert a != b

    def test_rendering(self):
        sig = from_parts("a.b.C", "sum", "long", ["int[]", "java.lang.String"],
                         modifiers=["static", "public"])
        assert sig.to_single_line() == "a.b.C.sum(int[],java.lang.String)"
        assert str(sig) == "public static long a.b.C.sum(int[],java.lang.String)"
        assert sig.package_name == "a.b"
        assert sig.has_modifier("static")
        assert not sig.has_modifier("final")

    def test_rendering_unidentified(self):
        sig = from_parts("a.b.C", None, "void", ["int"])
        assert not sig.identified
        assert sig.to_single_line() == "a.b.C.?(int)"

    def test_constructor_rendering(self):
        assert str(from_parts("a.b.C", "<init>", None, [])) == "a.b.C.C()"

    def test_to_json(self):
        sig = from_parts("a.b.C", "run", "void", [], modifiers=["public"])
        data = json.loads(sig.to_json())
        assert data["member_name"] == "run"
        assert data["modifiers"] == ["public"]
        assert data["modifier_bits"] == 1
        assert data["identified"] is True

    def test_frozen(self):
        sig = from_parts("a.b.C", "run", "void", [])
        with pytest.raises(Exception):
            sig.member_name = "other"

    def test_is_constructor_name(self):
        assert CanonicalSignature.is_constructor_name("<init>", None)
        assert CanonicalSignature.is_constructor_name("C", "a.b.C")
        assert not CanonicalSignature.is_constructor_name(None, "a.b.C")
        assert not CanonicalSignature.is_constructor_name("run", "a.b.C")
