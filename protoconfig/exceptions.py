"""
Exception hierarchy for protoconfig.

All errors raised by the package derive from ProtoConfigError, so callers can
catch every package error with a single except clause. Specific errors also
derive from the closest builtin exception.

Looking up a missing key is never an error: get() returns None (or the given
default), has() and delete() return False.
"""

from typing import Any


class ProtoConfigError(Exception):
    """
    Base exception for all protoconfig errors.

    Example:
        try:
            text = config.to_json()
        except ProtoConfigError as e:
            lg.error(f"cannot export config: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidPrototypeError(ProtoConfigError, TypeError):
    """
    Raised when a prototype is assigned something other than a ProtoConfig or None.

    Attributes:
        value: The rejected value
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            "The prototype must be a ProtoConfig or None", got=type(value).__name__
        )


class SerializationError(ProtoConfigError, ValueError):
    """
    Serialization-related errors.

    Raised when a flattened config cannot be encoded, or when text handed to a
    decoder cannot be turned into a config.

    Examples:
        - Value the encoder cannot represent (sets, arbitrary objects)
        - Self-referencing containers
        - Malformed JSON or YAML
        - Document that is not a mapping
    """

    pass
