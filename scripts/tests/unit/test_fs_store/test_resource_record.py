"""Tests for CatalogRecord – data contract, serialization, and id helpers."""

import json
from dataclasses import dataclass

import pytest

from fs_store import CatalogRecord, canonical_id, record_type_of, registry
from fs_store.type_registry import TypeRegistry


@dataclass
class Gadget(CatalogRecord):
    """Minimal typed record for tests."""

    record_type = "gadget"

    label: str = ""
    weight: float = 0.0


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestCreation:
    def test_id_is_generated(self):
        a, b = Gadget(), Gadget()
        assert a.id and b.id
        assert a.id != b.id

    def test_explicit_id_kept(self):
        assert Gadget(id=5).id == 5

    def test_subclass_registers_record_type(self):
        assert registry.get("gadget") is Gadget

    def test_base_class_is_not_registered(self):
        assert CatalogRecord not in registry.items().values()


# ---------------------------------------------------------------------------
# Key-value access
# ---------------------------------------------------------------------------

class TestKeyValue:
    def test_known_field_access(self):
        g = Gadget(label="knob")
        assert g["label"] == "knob"
        g["label"] = "dial"
        assert g.label == "dial"

    def test_extra_field_access(self):
        g = Gadget()
        g["finish"] = "matte"
        assert g.extra == {"finish": "matte"}
        assert "finish" in g
        del g["finish"]
        assert "finish" not in g

    def test_delete_unknown_raises(self):
        with pytest.raises(KeyError):
            del Gadget()["nope"]

    def test_keys(self):
        g = Gadget(extra={"finish": "matte"})
        assert g.keys() == ["id", "label", "weight", "finish"]


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

class TestSerialization:
    def test_to_dict_flattens_extra(self):
        g = Gadget(id="g1", label="knob", extra={"finish": "matte"})
        assert g.to_dict() == {"id": "g1", "label": "knob", "weight": 0.0, "finish": "matte"}

    def test_to_json_is_flat_json_text(self):
        g = Gadget(id="g1", label="knob")
        assert json.loads(g.to_json()) == g.to_dict()

    def test_from_dict_routes_unknown_keys_to_extra(self):
        g = Gadget.from_dict({"id": "g2", "label": "lever", "finish": "gloss"})
        assert g.label == "lever"
        assert g.extra == {"finish": "gloss"}

    def test_from_dict_merges_explicit_extra(self):
        g = Gadget.from_dict({"id": "g3", "extra": {"a": 1}, "b": 2})
        assert g.extra == {"a": 1, "b": 2}

    def test_round_trip(self):
        g = Gadget(id=7, label="x", weight=1.5, extra={"k": "v"})
        assert Gadget.from_dict(g.to_dict()) == g


# ---------------------------------------------------------------------------
# Id and type helpers
# ---------------------------------------------------------------------------

class TestCanonicalId:
    @pytest.mark.parametrize("value", [5, "5", 5.0])
    def test_equivalent_ids(self, value):
        assert canonical_id(value) == "5"

    def test_fractional_float_kept(self):
        assert canonical_id(5.5) == "5.5"

    def test_none_stays_none(self):
        assert canonical_id(None) is None


class TestRecordTypeOf:
    def test_from_class_instance_and_tag(self):
        assert record_type_of(Gadget) == "gadget"
        assert record_type_of(Gadget()) == "gadget"
        assert record_type_of("widget") == "widget"

    def test_undeclared_raises(self):
        with pytest.raises(TypeError):
            record_type_of(CatalogRecord)

    @pytest.mark.parametrize("tag", ["", "Case", "CPU"])
    def test_invalid_tag_rejected(self, tag):
        with pytest.raises(ValueError):
            record_type_of(tag)


class TestTypeRegistry:
    def test_resolve_unknown_raises(self):
        reg = TypeRegistry()
        with pytest.raises(KeyError, match="Unknown record type"):
            reg.resolve("nope")

    def test_register_and_resolve(self):
        reg = TypeRegistry()
        reg.register("gadget", Gadget)
        reg.register("", CatalogRecord)
        assert reg.resolve("gadget") is Gadget
        assert reg.items() == {"gadget": Gadget}
