"""
Text encoding and decoding for flattened property stores.

Encoders take the plain dict produced by a store's to_dict() and turn it into
JSON or YAML text. Nested stores found among the values are flattened the same
way. Decoders do the reverse and only accept documents whose top level is a
mapping.

Every failure surfaces as SerializationError, chained to the encoder's own
exception.
"""

import datetime
import json
import logging
from typing import Any

import yaml  # type: ignore[import-untyped]

from .constants import JSON_DUMP_DEFAULTS, MAX_DOCUMENT_SIZE_BYTES, YAML_DUMP_DEFAULTS
from .exceptions import SerializationError
from .interface import PropertyInterface
from .keys import to_key


def _fail(fmt: str, message: str, err: Exception) -> SerializationError:
    """Log a serialization failure and build the error to raise."""
    logging.getLogger(__name__).debug(
        "serialization failed", extra={"format": fmt, "error": str(err)}
    )
    return SerializationError(message, format=fmt, error=str(err))


def _encode_default(obj: Any) -> Any:
    """json.dumps hook: flatten nested stores, reject everything else."""
    if isinstance(obj, PropertyInterface):
        return obj.to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class Dumper(yaml.SafeDumper):
    """Safe YAML dumper that writes nested property stores as plain mappings."""

    pass


def _represent_store(dumper: Dumper, store: PropertyInterface) -> yaml.Node:
    return dumper.represent_dict(store.to_dict())


Dumper.add_multi_representer(PropertyInterface, _represent_store)


class Loader(yaml.SafeLoader):
    """
    Safe YAML loader that converts date and numeric keys to strings.

    Property names are text. Date and numeric keys are parsed by YAML first and
    then converted with to_key(), so ``2024-01-01T10:00:00`` becomes the same
    key a datetime gets anywhere else, and ``0x10`` becomes ``16``.
    """

    def _convert_key_to_string(self, key: Any) -> Any:
        if isinstance(key, datetime.date):
            return to_key(key)
        elif not isinstance(key, bool) and isinstance(key, (int, float)):
            return to_key(key)
        return key

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict:
        mapping = super().construct_mapping(node, deep=deep)
        return {self._convert_key_to_string(k): v for k, v in mapping.items()}


def dump_json(data: dict[str, Any], **kwargs: Any) -> str:
    """
    Encode a flattened mapping as JSON text.

    Args:
        data: Mapping to encode
        **kwargs: Passed to json.dumps, overriding JSON_DUMP_DEFAULTS

    Returns:
        str: JSON document

    Raises:
        SerializationError: If a value cannot be represented in JSON
    """
    options = {**JSON_DUMP_DEFAULTS, **kwargs}
    options.setdefault("default", _encode_default)
    try:
        return json.dumps(data, **options)
    except (TypeError, ValueError) as e:
        raise _fail("json", "Cannot encode config as JSON", e) from e


def dump_yaml(data: dict[str, Any], **kwargs: Any) -> str:
    """
    Encode a flattened mapping as YAML text.

    Args:
        data: Mapping to encode
        **kwargs: Passed to yaml.dump, overriding YAML_DUMP_DEFAULTS

    Returns:
        str: YAML document

    Raises:
        SerializationError: If a value cannot be represented in YAML
    """
    options = {**YAML_DUMP_DEFAULTS, **kwargs}
    try:
        return yaml.dump(data, Dumper=Dumper, **options)
    except yaml.YAMLError as e:
        raise _fail("yaml", "Cannot encode config as YAML", e) from e


def _check_size(fmt: str, text: str | bytes) -> None:
    """Reject documents above MAX_DOCUMENT_SIZE_BYTES."""
    size = len(text) if isinstance(text, bytes) else len(text.encode("utf-8"))
    if size > MAX_DOCUMENT_SIZE_BYTES:
        raise SerializationError(
            "Document exceeds maximum size",
            format=fmt,
            size=size,
            limit=MAX_DOCUMENT_SIZE_BYTES,
        )


def _check_mapping(fmt: str, data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SerializationError(
            "Document must be a mapping", format=fmt, got=type(data).__name__
        )
    return data


def load_json(text: str | bytes) -> dict[str, Any]:
    """
    Decode a JSON document into a plain dict.

    Args:
        text: JSON text whose top level is an object

    Returns:
        dict: Decoded mapping

    Raises:
        SerializationError: If the text is too large, malformed or not an object
    """
    _check_size("json", text)
    try:
        data = json.loads(text)
    except ValueError as e:
        raise _fail("json", "Cannot decode JSON document", e) from e
    return _check_mapping("json", data)


def load_yaml(text: str | bytes) -> dict[str, Any]:
    """
    Decode a YAML document into a plain dict.

    An empty document decodes to an empty dict.

    Args:
        text: YAML text whose top level is a mapping

    Returns:
        dict: Decoded mapping

    Raises:
        SerializationError: If the text is too large, malformed or not a mapping
    """
    _check_size("yaml", text)
    try:
        data = yaml.load(text, Loader=Loader)  # noqa: S506 - Loader extends SafeLoader
    except yaml.YAMLError as e:
        raise _fail("yaml", "Cannot decode YAML document", e) from e
    if data is None:
        return {}
    return _check_mapping("yaml", data)
