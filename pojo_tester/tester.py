"""
Automated testing tool for plain data object ('POJO') classes.

Usable from any test framework: each entry point takes a class and either
returns None or raises a PojoException subclass.

Usage (pytest):
    def test_employee():
        PojoUnitTester().test_all(Employee)
"""

from typing import Any

from .accessor_matcher import AccessorMatcher
from .errors import AccessorInvocationError, PropertyMismatch
from .instance_factory import (
    create_instance,
    create_instance_with_default_constructor,
    get_default_constructor,
)
from .models import PropertyAccessorPair
from .sample_values import SampleValueRegistry, default_registry


def same_value(value1: Any, value2: Any) -> bool:
    """Null-aware equality: two Nones are equal, one None never is."""
    if value1 is None and value2 is None:
        return True
    if value1 is None or value2 is None:
        return False
    return value1 == value2


class PojoUnitTester:
    """
    Checks that every setter/getter pair of a class round-trips a sample value.

    The getter can be 'getXxx' or 'isXxx'; it is invoked only when a
    corresponding setter exists. Setters without a getter are still called.
    """

    def __init__(self, log_enabled: bool = False, registry: SampleValueRegistry | None = None):
        self._log_enabled = log_enabled
        self.registry = registry if registry is not None else default_registry()
        self.matcher = AccessorMatcher()

    @property
    def log_enabled(self) -> bool:
        return self._log_enabled

    def _log(self, cls: type | None, msg: str) -> None:
        if self._log_enabled:
            prefix = f"{cls.__name__}: " if cls is not None else ""
            print(f"PojoTester: {prefix}{msg}")

    # ========================================================================
    # Entry points
    # ========================================================================

    def test_all(self, cls: type) -> None:
        """
        Test everything checked by default for the given class.

        Only the setter/getter behaviour: it builds an instance with the
        default constructor, which covers construction as well.
        """
        self.test_setters_and_getters_behavior(cls)

    def test_default_constructor(self, cls: type) -> None:
        """Test instance creation with the default constructor."""
        self._log(cls, "new instance")
        create_instance_with_default_constructor(get_default_constructor(cls))

    def test_setters_and_getters_behavior(self, cls: type) -> None:
        """
        Test the behaviour of all the setter/getter pairs of the class.

        Stops at the first pair whose getter does not return the value given
        to its setter.

        Raises:
            NoDefaultConstructor / ConstructionError: instance creation failed
            AccessorInvocationError: a setter or getter raised
            PropertyMismatch: a getter returned a different value
        """
        self._log(cls, "new instance with default constructor")
        instance = create_instance(cls)
        for pair in self.matcher.match(cls):
            written = self._set_value_using_setter(instance, pair)
            if not pair.has_getter:
                continue
            read = self._get_value_using_getter(instance, pair)
            if not same_value(read, written):
                raise PropertyMismatch(
                    class_name=cls.__name__,
                    property_name=pair.property_name,
                    setter_name=pair.setter_name,
                    getter_name=pair.getter_name,
                    written=written,
                    read=read,
                )

    # ========================================================================
    # Invocation helpers
    # ========================================================================

    def _set_value_using_setter(self, instance: Any, pair: PropertyAccessorPair) -> Any:
        value = self.registry.sample_for(pair.value_type)
        try:
            pair.setter(instance, value)
        except Exception as e:
            raise AccessorInvocationError(
                f"Cannot set value ({type(e).__name__})", pair.setter_name
            ) from e
        self._log(type(instance), f"{pair.setter_name}({value!r})")
        return value

    def _get_value_using_getter(self, instance: Any, pair: PropertyAccessorPair) -> Any:
        try:
            value = pair.getter(instance)
        except Exception as e:
            raise AccessorInvocationError(
                f"Cannot get value ({type(e).__name__})", pair.getter_name
            ) from e
        self._log(type(instance), f"{pair.getter_name}() {value!r}")
        return value
