"""
Prototype-chained property store.

This module provides ProtoConfig, a collection of properties that can inherit
from another collection of properties. A lookup that misses locally is
delegated to the prototype, then to its prototype, until a value is found or
the chain ends.

Properties can be reached through explicit methods (get/set/has/delete),
through item access (``config["name"]``) or as attributes
(``config.name``). Attribute access never shadows a declared method:
``config.get`` is always the method, ``config["get"]`` is the property, and
``config.get = 1`` stores the property without hiding the method.
"""

import logging
from collections.abc import ItemsView, Iterator, KeysView, Mapping, ValuesView
from typing import Any

from . import serialize
from .exceptions import InvalidPrototypeError
from .interface import PropertyInterface
from .keys import to_key, to_keys


class ProtoConfig(PropertyInterface):
    """
    Collection of properties with prototype inheritance.

    Keys are normalized to interned strings, so ``"color"`` and any other
    object whose text is ``color`` name the same property. Values are stored
    verbatim, ``None`` included: a locally stored ``None`` shadows the
    prototype's value. A property that exists nowhere in the chain reads as
    ``None``.

    A prototype may be shared by any number of stores. Cycles in the chain
    are not detected; looking up a missing key in a cyclic chain ends in
    RecursionError.

    Example:
        base = ProtoConfig({"color": "red"})
        child = ProtoConfig({"size": "L"}, proto=base)
        child.color          # "red", inherited
        child.color = "blue" # local override, base is untouched
        child.to_dict()      # {"color": "blue", "size": "L"}
    """

    def __init__(
        self,
        props: Mapping[Any, Any] | None = None,
        proto: "ProtoConfig | None" = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            props: Initial properties (copied, keys normalized)
            proto: Prototype consulted on lookup miss
        """
        self._props: dict[str, Any] = to_keys(props or {})
        self._proto: ProtoConfig | None = None
        self.proto = proto

    @property
    def proto(self) -> "ProtoConfig | None":
        """Prototype consulted when a property is not stored locally."""
        return self._proto

    @proto.setter
    def proto(self, proto: "ProtoConfig | None") -> None:
        if proto is not None and not isinstance(proto, ProtoConfig):
            logging.getLogger(__name__).debug(
                "rejected prototype", extra={"type": type(proto).__name__}
            )
            raise InvalidPrototypeError(proto)
        self._proto = proto

    def has(self, name: Any) -> bool:
        """
        Check if a property is stored on this store, ignoring the prototype.

        Args:
            name: Property name

        Returns:
            bool: True if the property is stored locally
        """
        return to_key(name) in self._props

    def get(self, name: Any, default: Any = None) -> Any:
        """
        Get a property, falling back to the prototype chain.

        Args:
            name: Property name
            default: Value returned when no store in the chain has the property

        Returns:
            Local value if present (even None), otherwise the prototype's value,
            otherwise default
        """
        key = to_key(name)
        if key in self._props:
            return self._props[key]
        if self._proto is not None:
            return self._proto.get(key, default)
        return default

    def set(self, name: Any, value: Any) -> None:
        """
        Set a property on this store. The prototype is never written.

        Args:
            name: Property name
            value: Value to store
        """
        self._props[to_key(name)] = value

    def delete(self, name: Any) -> bool:
        """
        Delete a property from this store.

        Only local properties can be deleted; an inherited value stays visible
        after deleting the local override.

        Args:
            name: Property name

        Returns:
            bool: True if the property was removed, False if it was not stored locally
        """
        key = to_key(name)
        if key not in self._props:
            return False
        del self._props[key]
        return True

    def to_dict(self) -> dict[str, Any]:
        """
        Flatten this store and its prototype chain into a plain dict.

        Inherited keys come first in prototype order; local values replace
        inherited ones in place, and local-only keys follow.

        Returns:
            dict: New dict of every visible property
        """
        if self._proto is None:
            return dict(self._props)
        result = self._proto.to_dict()
        result.update(self._props)
        return result

    def to_json(self, **kwargs: Any) -> str:
        """
        Serialize the flattened store as JSON.

        Args:
            **kwargs: Passed to json.dumps (e.g. indent=2)

        Returns:
            str: JSON document

        Raises:
            SerializationError: If a value cannot be represented in JSON
        """
        return serialize.dump_json(self.to_dict(), **kwargs)

    def to_yaml(self, **kwargs: Any) -> str:
        """
        Serialize the flattened store as YAML.

        Args:
            **kwargs: Passed to yaml.dump

        Returns:
            str: YAML document

        Raises:
            SerializationError: If a value cannot be represented in YAML
        """
        return serialize.dump_yaml(self.to_dict(), **kwargs)

    @classmethod
    def from_json(
        cls, text: str | bytes, proto: "ProtoConfig | None" = None
    ) -> "ProtoConfig":
        """
        Create a store from a JSON object.

        Args:
            text: JSON text
            proto: Prototype for the new store

        Raises:
            SerializationError: If the text is not a valid JSON object
        """
        return cls(serialize.load_json(text), proto=proto)

    @classmethod
    def from_yaml(
        cls, text: str | bytes, proto: "ProtoConfig | None" = None
    ) -> "ProtoConfig":
        """
        Create a store from a YAML mapping.

        Raises:
            SerializationError: If the text is not a valid YAML mapping
        """
        return cls(serialize.load_yaml(text), proto=proto)

    def chain(self) -> Iterator["ProtoConfig"]:
        """Iterate over this store and its prototypes, nearest first."""
        store: ProtoConfig | None = self
        while store is not None:
            yield store
            store = store._proto

    def responds_to(self, name: str) -> bool:
        """
        Check if the store can be asked for ``name`` as an attribute.

        True for every public name: declared attributes, local properties and
        anything the prototype responds to are accepted, and every other name
        reads as a property (None when unset) and can be assigned. Names
        starting with an underscore are never properties and answer like
        hasattr().

        Args:
            name: Attribute name

        Returns:
            bool: True for public names, hasattr(self, name) for private ones
        """
        if name.startswith("_"):
            return hasattr(self, name)
        if hasattr(type(self), name) or self.has(name):
            return True
        if self._proto is not None:
            return self._proto.responds_to(name)
        return True

    def keys(self) -> KeysView[str]:
        """Keys stored locally."""
        return self._props.keys()

    def values(self) -> ValuesView[Any]:
        """Values stored locally."""
        return self._props.values()

    def items(self) -> ItemsView[str, Any]:
        """Key-value pairs stored locally."""
        return self._props.items()

    def __len__(self) -> int:
        return len(self._props)

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __contains__(self, name: Any) -> bool:
        return self.has(name)

    def __getitem__(self, name: Any) -> Any:
        return self.get(name)

    def __setitem__(self, name: Any, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: Any) -> None:
        if not self.delete(name):
            raise KeyError(name)

    def _is_instance_attribute(self, name: str) -> bool:
        """
        Check if assigning ``name`` targets the object rather than the store.

        Private names and properties declared on the class (such as ``proto``)
        are real attributes; every other name, method names included, is a
        store property.
        """
        if name.startswith("_"):
            return True
        return isinstance(getattr(type(self), name, None), property)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so declared attributes win
        if name.startswith("_"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._is_instance_attribute(name):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if self._is_instance_attribute(name):
            object.__delattr__(self, name)
        elif not self.delete(name):
            raise AttributeError(name)

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        for store in self.chain():
            names.update(k for k in store._props if k.isidentifier())
        return sorted(names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProtoConfig):
            return NotImplemented
        return self._props == other._props and self._proto == other._proto

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._proto is None:
            return f"{type(self).__name__}({self._props!r})"
        return f"{type(self).__name__}({self._props!r}, proto={self._proto!r})"
