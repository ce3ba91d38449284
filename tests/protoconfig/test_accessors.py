"""
Tests for attribute-style and item-style property access.

Tests the dynamic accessor surface of ProtoConfig:
- Arbitrary attribute names read and write properties
- Declared methods take precedence over properties
- Item access reaches every property, reserved names included
- responds_to() introspection
"""

import copy
import pickle

import pytest

from protoconfig import ProtoConfig

# =============================================================================
# Test Attribute Access
# =============================================================================


@pytest.mark.unit
class TestAttributeAccess:
    """Test properties read and written as attributes."""

    def test_getattr_reads_property(self, child):
        """Test attribute read routes to get()."""
        assert child.size == "L"
        assert child.color == "red"

    def test_getattr_missing_is_none(self, child):
        """Test an unknown attribute reads as None."""
        assert child.anything is None

    def test_setattr_writes_property(self, base, child):
        """Test attribute write routes to set() on the store itself."""
        child.color = "blue"
        assert child.has("color")
        assert child.get("color") == "blue"
        assert base.color == "red"

    def test_setattr_chained_assignment(self, base):
        """Test an attribute assignment evaluates to the assigned value."""
        result = base.shape = "round"
        assert result == "round"
        assert base.get("shape") == "round"

    def test_setattr_does_not_create_instance_attribute(self, base):
        """Test properties live in the store, not the instance __dict__."""
        base.shape = "round"
        assert "shape" not in vars(base)
        assert "shape" in base.keys()

    def test_delattr_removes_property(self, child):
        """Test attribute delete routes to delete()."""
        del child.size
        assert child.has("size") is False
        assert child.size is None

    def test_delattr_missing_raises(self, child):
        """Test deleting a property not stored locally raises AttributeError."""
        with pytest.raises(AttributeError):
            del child.color
        assert child.color == "red"

    def test_proto_attribute_is_declared(self, child):
        """Test assigning proto goes through the prototype setter."""
        new_proto = ProtoConfig({"color": "black"})
        child.proto = new_proto
        assert child.proto is new_proto
        assert child.has("proto") is False
        assert child.color == "black"

    def test_private_names_not_routed(self, base):
        """Test underscore names follow normal attribute rules."""
        with pytest.raises(AttributeError):
            base._missing
        with pytest.raises(AttributeError):
            base.__missing__
        base._note = "private"
        assert base.has("_note") is False
        assert base._note == "private"


# =============================================================================
# Test Declared Names Take Precedence
# =============================================================================


@pytest.mark.unit
class TestDeclaredPrecedence:
    """Test declared methods shadow same-named properties."""

    @pytest.mark.parametrize(
        "name", ["has", "get", "set", "delete", "to_dict", "to_json", "keys"]
    )
    def test_method_wins_over_property(self, name):
        """Test a property named like a method does not hide the method."""
        config = ProtoConfig({name: "value"})
        assert callable(getattr(config, name))
        assert config[name] == "value"
        assert config.get(name) == "value"

    def test_assigning_method_name_via_item(self):
        """Test item assignment stores reserved names as properties."""
        config = ProtoConfig()
        config["get"] = 1
        assert config.get("get") == 1
        assert config.has("get")

    @pytest.mark.parametrize("name", ["has", "get", "keys", "to_dict", "delete"])
    def test_assigning_method_name_via_attribute(self, name):
        """Test attribute assignment to a method name stores a property."""
        config = ProtoConfig({"a": 1})
        setattr(config, name, 1)
        assert config[name] == 1
        assert name not in vars(config)
        assert callable(getattr(config, name))
        assert config.has(name) is True
        assert config.has("a") is True
        assert list(config.keys()) == ["a", name]

    def test_deleting_method_name_via_attribute(self):
        """Test attribute delete of a method name removes the property."""
        config = ProtoConfig()
        config.has = 1
        del config.has
        assert config.has("has") is False
        with pytest.raises(AttributeError):
            del config.has
        assert callable(config.has)

    def test_proto_as_property_name(self, child):
        """Test a property called proto is only reachable by item access."""
        child["proto"] = "not a store"
        assert child["proto"] == "not a store"
        assert isinstance(child.proto, ProtoConfig)


# =============================================================================
# Test Item Access
# =============================================================================


@pytest.mark.unit
class TestItemAccess:
    """Test dictionary-style access."""

    def test_getitem(self, child):
        """Test item read falls back through the chain."""
        assert child["size"] == "L"
        assert child["color"] == "red"
        assert child["missing"] is None

    def test_setitem(self, child):
        """Test item write is local."""
        child["color"] = "blue"
        assert child.has("color")

    def test_delitem(self, child):
        """Test item delete removes local properties."""
        del child["size"]
        assert "size" not in child

    def test_delitem_missing_raises(self, child):
        """Test deleting a missing item raises KeyError."""
        with pytest.raises(KeyError):
            del child["color"]

    def test_contains_is_local(self, child):
        """Test 'in' only checks local properties."""
        assert "size" in child
        assert "color" not in child

    def test_private_names_via_item(self):
        """Test underscore names are ordinary keys through item access."""
        config = ProtoConfig()
        config["_hidden"] = 1
        assert config["_hidden"] == 1
        assert config.to_dict() == {"_hidden": 1}


# =============================================================================
# Test Introspection
# =============================================================================


@pytest.mark.unit
class TestRespondsTo:
    """Test responds_to() and dir()."""

    def test_declared_name(self, base):
        """Test declared methods are reported."""
        assert base.responds_to("to_dict") is True

    def test_local_property(self, base):
        """Test local properties are reported."""
        assert base.responds_to("color") is True

    def test_inherited_property(self, grandchild):
        """Test inherited properties are reported."""
        assert grandchild.responds_to("color") is True

    def test_any_name(self, grandchild):
        """Test every name is accepted, set or not."""
        assert grandchild.responds_to("never_set_anywhere") is True

    def test_hasattr_agrees(self, base):
        """Test the builtin hasattr() agrees for public names."""
        assert hasattr(base, "never_set_anywhere")
        assert not hasattr(base, "_never_set_anywhere")

    def test_private_names_match_hasattr(self, base):
        """Test underscore names answer like hasattr()."""
        assert base.responds_to("_never_set_anywhere") is False
        assert base.responds_to("_props") is True
        assert base.responds_to("__init__") is True

    def test_dir_lists_chain_properties(self, grandchild):
        """Test dir() includes inherited property names and methods."""
        names = dir(grandchild)
        for name in ("color", "size", "weight", "get", "to_dict"):
            assert name in names

    def test_dir_skips_non_identifiers(self):
        """Test keys that are not identifiers are left out of dir()."""
        config = ProtoConfig({"with space": 1, "ok": 2})
        names = dir(config)
        assert "ok" in names
        assert "with space" not in names


# =============================================================================
# Test Python Protocols
# =============================================================================


@pytest.mark.unit
class TestProtocols:
    """Test copy and pickle are not confused by the dynamic accessors."""

    def test_deepcopy(self, child):
        """Test deepcopy duplicates entries and prototype."""
        clone = copy.deepcopy(child)
        clone.color = "blue"
        clone.proto.set("color", "green")
        assert clone == ProtoConfig({"size": "L", "color": "blue"}, proto=clone.proto)
        assert child.color == "red"
        assert not child.has("color")

    def test_pickle(self, child):
        """Test pickling round-trips the chain."""
        restored = pickle.loads(pickle.dumps(child))
        assert restored == child
        assert restored.color == "red"
