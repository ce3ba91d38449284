"""
Key normalization.

Every property name is reduced to a canonical key before it touches a store:
an interned ``str``. Two names that read the same always map to the same
entry, whatever object was used to spell them.
"""

import datetime
import sys
from collections.abc import Mapping
from typing import Any


def to_key(name: Any) -> str:
    """
    Convert a property name to its canonical key.

    Args:
        name: Property name. Strings (and str subclasses) are used as text,
              dates become ISO text, anything else goes through str().

    Returns:
        str: Interned canonical key
    """
    if isinstance(name, str):
        # exact str value, ignoring __str__ overrides on subclasses such as str enums
        key = str.__str__(name)
    elif isinstance(name, datetime.date):
        key = name.isoformat()
    else:
        key = str(name)
    return sys.intern(key)


def to_keys(props: Mapping[Any, Any]) -> dict[str, Any]:
    """
    Normalize every key of a mapping.

    Order is preserved. If two keys normalize to the same canonical key, the
    later one wins.

    Args:
        props: Mapping to convert

    Returns:
        dict: New dict keyed by canonical keys
    """
    return {to_key(k): v for k, v in props.items()}
