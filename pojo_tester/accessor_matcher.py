"""
Accessor matcher.

Finds the setters of a class and pairs each one with its getter:
- setter: public, concrete, instance-level method named 'set...' taking one
  positional argument
- getter: public, concrete, instance-level method named 'get...' or 'is...'
  taking no argument, whose name is the setter name with 'set' replaced by
  'get' (checked first) or 'is'

Both camelCase and snake_case accessors pair the same way:
    setName  -> getName  / isName
    set_name -> get_name / is_name
"""

import inspect
import typing
from typing import Any

from .models import PropertyAccessorPair


# Setter/Getter prefix
SET = "set"
GET = "get"
IS = "is"

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

_MISSING = object()


def change_prefix(name: str, old_prefix: str, new_prefix: str) -> str:
    """Replace the leading prefix of a name: change_prefix('setX', 'set', 'get') -> 'getX'."""
    return new_prefix + name[len(old_prefix):]


class AccessorMatcher:
    """
    Discovers setter/getter pairs on a class.

    Pairs are rebuilt on every call to match(); nothing is cached.

    Usage:
        pairs = AccessorMatcher().match(Employee)
        for pair in pairs:
            print(pair.setter_name, pair.getter_name)
    """

    def match(self, cls: type) -> list[PropertyAccessorPair]:
        """Return one pair per setter, in attribute name order."""
        pairs = []
        for name in dir(cls):
            if not self.is_setter_with_single_parameter(cls, name):
                continue
            setter = getattr(cls, name)
            getter_name = self.search_getter_from_setter(cls, name)
            pairs.append(PropertyAccessorPair(
                setter_name=name,
                setter=setter,
                value_type=self._parameter_type(setter),
                getter_name=getter_name,
                getter=getattr(cls, getter_name) if getter_name else None,
            ))
        return pairs

    def is_setter_with_single_parameter(self, cls: type, name: str) -> bool:
        return name.startswith(SET) and self._argument_count(cls, name) == 1

    def is_getter(self, cls: type, name: str) -> bool:
        return (name.startswith(GET) or name.startswith(IS)) and self._argument_count(cls, name) == 0

    def search_getter_from_setter(self, cls: type, setter_name: str) -> str | None:
        """Name of the getter paired with a setter ('getXxx' before 'isXxx'), or None."""
        for prefix in (GET, IS):
            candidate = change_prefix(setter_name, SET, prefix)
            if self.is_getter(cls, candidate):
                return candidate
        return None

    def _argument_count(self, cls: type, name: str) -> int | None:
        """
        Number of arguments a public, concrete instance method takes (self excluded).

        Returns None when the attribute is missing, private, static, a class
        method, abstract, not a method at all, or has a signature that cannot
        be read or is not made of plain positional parameters.
        """
        if name.startswith("_"):
            return None

        raw = inspect.getattr_static(cls, name, _MISSING)
        if raw is _MISSING or isinstance(raw, (staticmethod, classmethod)):
            return None
        if not inspect.isroutine(raw) or getattr(raw, "__isabstractmethod__", False):
            return None

        try:
            params = list(inspect.signature(raw).parameters.values())
        except (TypeError, ValueError):
            return None

        # First parameter is the receiver
        if not params or any(p.kind not in _POSITIONAL for p in params):
            return None
        return len(params) - 1

    def _parameter_type(self, setter: Any) -> Any:
        """Declared type of the setter's value parameter (object if not annotated)."""
        param = list(inspect.signature(setter).parameters.values())[1]
        try:
            hints = typing.get_type_hints(setter)
        except (NameError, TypeError, AttributeError):
            hints = {}  # Unresolvable forward reference: keep the raw annotation

        annotation = hints.get(param.name, param.annotation)
        if annotation is inspect.Parameter.empty:
            return object
        return annotation
