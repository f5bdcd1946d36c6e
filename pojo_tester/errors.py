"""
Errors raised by the POJO tester.

Every error aborts the checks for the class under test. None of them are
retried or aggregated; the first one raised is the one the caller sees.
"""

from typing import Any


class PojoException(Exception):
    """Base class for every failure reported by the tester."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class NoDefaultConstructor(PojoException):
    """The class cannot be instantiated without arguments."""


class ConstructionError(PojoException):
    """The zero-argument constructor raised."""


class AccessorInvocationError(PojoException):
    """A setter or getter raised when invoked."""

    def __init__(self, message: str, method_name: str):
        super().__init__(f"{message} method '{method_name}'")
        self.method_name = method_name


class PropertyMismatch(PojoException, AssertionError):
    """The getter did not return the value given to the setter.

    Also an AssertionError so that test frameworks report it as a failed
    assertion rather than an error.
    """

    def __init__(
        self,
        class_name: str,
        property_name: str,
        setter_name: str,
        getter_name: str,
        written: Any,
        read: Any,
    ):
        self.class_name = class_name
        self.property_name = property_name
        self.setter_name = setter_name
        self.getter_name = getter_name
        self.written = written
        self.read = read
        self.written_type = type(written).__name__
        self.read_type = type(read).__name__
        super().__init__(
            f"{class_name} : "
            f"{setter_name} : {written!r} ({self.written_type})"
            f" / "
            f"{getter_name} : {read!r} ({self.read_type})"
        )
