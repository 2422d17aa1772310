from typing import Any


class ReflexError(Exception):
    """Base class for errors raised by reflex."""


class NotCallableError(ReflexError, TypeError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a function: {value!r}")


def ensure_callable(value: Any) -> Any:
    """Return *value* unchanged, or raise NotCallableError if it cannot be invoked."""
    if not callable(value):
        raise NotCallableError(value)
    return value
