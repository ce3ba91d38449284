"""
Prototype-chained property stores.

A ProtoConfig maps property names to values and, when a name is not stored
locally, asks its prototype, recursively up the chain. Flattening a store
merges the whole chain into one plain dict, which can be exported as JSON or
YAML.
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import InvalidPrototypeError, ProtoConfigError, SerializationError
from .interface import PropertyInterface
from .keys import to_key, to_keys
from .store import ProtoConfig

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("protoconfig")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Core classes
    "PropertyInterface",
    "ProtoConfig",
    # Keys
    "to_key",
    "to_keys",
    # Exceptions
    "ProtoConfigError",
    "InvalidPrototypeError",
    "SerializationError",
]
