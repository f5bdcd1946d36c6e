"""Instance factory: builds the object under test with its zero-argument constructor."""

import inspect
from typing import Any, Callable

from .errors import ConstructionError, NoDefaultConstructor


def get_default_constructor(cls: type) -> Callable[[], Any]:
    """
    Return a callable that builds an instance of cls without arguments.

    Raises:
        TypeError: cls is not a class
        NoDefaultConstructor: the constructor requires arguments
    """
    if not inspect.isclass(cls):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        # Some built-in types expose no signature: let the call decide
        return cls

    try:
        signature.bind()
    except TypeError as e:
        raise NoDefaultConstructor(
            f"No default constructor for {cls.__name__} {signature}"
        ) from e
    return cls


def create_instance_with_default_constructor(constructor: Callable[[], Any]) -> Any:
    """Invoke a zero-argument constructor, wrapping any failure in ConstructionError."""
    try:
        return constructor()
    except Exception as e:
        name = getattr(constructor, "__name__", repr(constructor))
        raise ConstructionError(
            f"Constructor error for {name} ({type(e).__name__}: {e})"
        ) from e


def create_instance(cls: type) -> Any:
    """Build a fresh instance of cls; a new object on every call."""
    return create_instance_with_default_constructor(get_default_constructor(cls))
