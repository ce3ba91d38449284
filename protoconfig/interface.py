"""
Property store interface definition.

This module provides the abstract base class shared by property stores: a
name-to-value mapping with explicit, non-raising lookup and mutation methods
and a flattening operation to a plain dict.
"""

from abc import ABC, abstractmethod
from collections.abc import KeysView
from typing import Any


class PropertyInterface(ABC):
    """
    Abstract base class defining the interface for property stores.

    Unlike the builtin mapping protocol, a missing key is never an error here:
    get() falls back to a default, has() and delete() report False.
    """

    @abstractmethod
    def has(self, name: Any) -> bool:
        """
        Check if a property is stored locally.

        Args:
            name: Property name

        Returns:
            bool: True if this store itself holds the property
        """
        pass  # pragma: no cover

    @abstractmethod
    def get(self, name: Any, default: Any = None) -> Any:
        """
        Get a property value.

        Args:
            name: Property name
            default: Value returned when the property is not found

        Returns:
            Value of the property, or default
        """
        pass  # pragma: no cover

    @abstractmethod
    def set(self, name: Any, value: Any) -> None:
        """
        Set a property value on this store.

        Args:
            name: Property name
            value: Value to store (any object)
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(self, name: Any) -> bool:
        """
        Remove a property from this store.

        Args:
            name: Property name

        Returns:
            bool: True if the property was removed, False if it was not stored here
        """
        pass  # pragma: no cover

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """
        Flatten the store into a plain dict.

        Returns:
            dict: Every visible property mapped to its value
        """
        pass  # pragma: no cover

    @abstractmethod
    def keys(self) -> KeysView[str]:
        """
        Get the keys stored locally.

        Returns:
            dict_keys: Local keys
        """
        pass  # pragma: no cover

    @abstractmethod
    def __len__(self) -> int:
        """
        Get the number of properties stored locally.

        Returns:
            int: Number of local properties
        """
        pass  # pragma: no cover
