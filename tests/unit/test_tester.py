"""
Unit tests for PojoUnitTester.

Covers the round-trip scenarios:
- A: faithful setter/getter passes
- B: setter that alters the value fails with PropertyMismatch
- C: read-only property (getter without setter) is skipped
- D: protected getter leaves the setter unpaired
- E: class without zero-argument constructor
plus fail-fast behaviour, null handling, invocation errors and tracing.
"""

import pytest

from pojo_tester import PojoUnitTester, SampleValueRegistry, same_value
from pojo_tester.errors import (
    AccessorInvocationError,
    ConstructionError,
    NoDefaultConstructor,
    PojoException,
    PropertyMismatch,
)
from pojo_tester.examples import Employee, Imbalance, Invalid
from pojo_tester.sample_values import DEFAULT_SAMPLES


class Opaque:
    """Type the default registry does not know."""


def make_holder(value_type: type, received: list) -> type:
    """Build a class with one property annotated with value_type; setter calls land in received."""
    def get_value(self):
        return self._value

    def set_value(self, value):
        received.append(value)
        self._value = value

    set_value.__annotations__ = {"value": value_type}
    return type(f"{value_type.__name__}Holder", (), {
        "get_value": get_value,
        "set_value": set_value,
    })


# ============================================================================
# Scenarios
# ============================================================================

class TestScenarios:
    """Round-trip scenarios on the demonstration classes."""

    def test_faithful_accessors_pass(self, tester, pojo_factory):
        tester.test_setters_and_getters_behavior(pojo_factory.create_named())

    def test_employee_passes(self, tester):
        tester.test_all(Employee)

    def test_altering_setter_fails(self, tester):
        with pytest.raises(PropertyMismatch) as exc_info:
            tester.test_all(Invalid)

        mismatch = exc_info.value
        assert mismatch.class_name == "Invalid"
        assert mismatch.property_name == "name"
        assert mismatch.setter_name == "set_name"
        assert mismatch.getter_name == "get_name"
        assert mismatch.written == "Z"
        assert mismatch.read == "Z foo"
        assert mismatch.written_type == "str"
        assert mismatch.read_type == "str"

    def test_mismatch_message(self, tester):
        with pytest.raises(PropertyMismatch) as exc_info:
            tester.test_all(Invalid)

        assert str(exc_info.value) == "Invalid : set_name : 'Z' (str) / get_name : 'Z foo' (str)"

    def test_mismatch_is_an_assertion_error(self, tester, pojo_factory):
        lowering = pojo_factory.create_named(store=str.lower, name="Lowering")

        with pytest.raises(AssertionError):
            tester.test_all(lowering)

    def test_read_only_property_is_skipped(self, tester):
        tester.test_all(Imbalance)

    def test_protected_getter_runs_setter_only(self, tracing_tester, capsys):
        tracing_tester.test_all(Imbalance)

        out = capsys.readouterr().out
        assert "set_birth_date(" in out
        assert "get_birth_date" not in out

    def test_missing_default_constructor(self, tester, needs_arguments):
        with pytest.raises(NoDefaultConstructor):
            tester.test_default_constructor(needs_arguments)

    def test_missing_default_constructor_fails_behavior_check(self, tester, needs_arguments):
        with pytest.raises(NoDefaultConstructor):
            tester.test_all(needs_arguments)


# ============================================================================
# Engine Behaviour
# ============================================================================

class TestEngineBehaviour:
    """Tests for invocation order, fail-fast and null handling."""

    def test_every_setter_invoked_once(self, tester, pojo_factory):
        calls = []
        tester.test_setters_and_getters_behavior(pojo_factory.create_recording(calls))

        assert calls == ["set_a", "get_a", "set_b", "get_b", "set_c"]

    def test_first_mismatch_aborts_remaining_pairs(self, tester):
        calls = []

        class Broken:
            def __init__(self):
                self._a = None

            def get_a(self) -> str:
                return "wrong"

            def set_a(self, a: str) -> None:
                calls.append("set_a")

            def set_b(self, b: int) -> None:
                calls.append("set_b")

        with pytest.raises(PropertyMismatch):
            tester.test_all(Broken)

        assert calls == ["set_a"]

    def test_unrecognised_type_round_trips_none(self, tester):
        calls = []

        class Holder:
            def __init__(self):
                self._thing = Opaque()

            def get_thing(self) -> Opaque:
                return self._thing

            def set_thing(self, thing: Opaque) -> None:
                calls.append(thing)
                self._thing = thing

        tester.test_all(Holder)

        assert calls == [None]

    def test_getter_replacing_none_is_mismatch(self, tester):
        class Defaulting:
            def __init__(self):
                self._thing = None

            def get_thing(self) -> Opaque:
                return self._thing or Opaque()

            def set_thing(self, thing: Opaque) -> None:
                self._thing = thing

        with pytest.raises(PropertyMismatch) as exc_info:
            tester.test_all(Defaulting)

        assert exc_info.value.written is None
        assert exc_info.value.written_type == "NoneType"
        assert exc_info.value.read_type == "Opaque"

    def test_getter_returning_none_is_mismatch(self, tester, pojo_factory):
        forgetful = pojo_factory.create_named(store=lambda value: None, name="Forgetful")

        with pytest.raises(PropertyMismatch) as exc_info:
            tester.test_all(forgetful)

        assert exc_info.value.read is None

    def test_instance_attribute_does_not_replace_matched_getter(self, tester):
        class Shadow:
            def __init__(self):
                self._x = None
                self.get_x = lambda: "shadow"

            def get_x(self) -> str:
                return self._x

            def set_x(self, x: str) -> None:
                self._x = x

        tester.test_all(Shadow)

    def test_instance_attribute_does_not_replace_matched_setter(self, tester):
        class Shadow:
            def __init__(self):
                self._x = None
                self.set_x = lambda x: None

            def get_x(self) -> str:
                return self._x

            def set_x(self, x: str) -> None:
                self._x = x

        tester.test_all(Shadow)

    def test_custom_registry_is_used(self):
        registry = SampleValueRegistry({Opaque: Opaque})
        received = []

        class Holder:
            def set_thing(self, thing: Opaque) -> None:
                received.append(thing)

        PojoUnitTester(registry=registry).test_all(Holder)

        assert isinstance(received[0], Opaque)


# ============================================================================
# Registered Types
# ============================================================================

@pytest.mark.parametrize("value_type", list(DEFAULT_SAMPLES), ids=lambda t: t.__name__)
def test_every_registered_type_round_trips(value_type):
    received = []
    holder = make_holder(value_type, received)

    PojoUnitTester().test_setters_and_getters_behavior(holder)

    assert len(received) == 1
    if received[0] is not None:
        assert isinstance(received[0], value_type)


# ============================================================================
# Invocation Errors
# ============================================================================

class TestInvocationErrors:
    """Tests for setters and getters that raise."""

    def test_setter_error_is_wrapped(self, tester):
        class Person:
            def get_age(self) -> int:
                return 0

            def set_age(self, age: int) -> None:
                if age > 150:
                    raise ValueError("age out of range")

        with pytest.raises(AccessorInvocationError) as exc_info:
            tester.test_all(Person)

        error = exc_info.value
        assert error.method_name == "set_age"
        assert "set_age" in str(error)
        assert isinstance(error.cause, ValueError)

    def test_getter_error_is_wrapped(self, tester):
        class Person:
            def get_name(self) -> str:
                raise KeyError("name")

            def set_name(self, name: str) -> None:
                pass

        with pytest.raises(AccessorInvocationError) as exc_info:
            tester.test_all(Person)

        assert exc_info.value.method_name == "get_name"
        assert isinstance(exc_info.value.cause, KeyError)

    def test_constructor_error(self, tester):
        class Exploding:
            def __init__(self):
                raise RuntimeError("boom")

        with pytest.raises(ConstructionError):
            tester.test_default_constructor(Exploding)

    def test_all_errors_share_base_class(self, tester, needs_arguments):
        with pytest.raises(PojoException):
            tester.test_all(needs_arguments)
        with pytest.raises(PojoException):
            tester.test_all(Invalid)


# ============================================================================
# Diagnostic Output
# ============================================================================

class TestDiagnosticOutput:
    """Tests for the log flag."""

    def test_silent_by_default(self, tester, capsys):
        tester.test_all(Employee)
        tester.test_default_constructor(Employee)

        assert capsys.readouterr().out == ""

    def test_trace_lines(self, tracing_tester, capsys):
        tracing_tester.test_all(Employee)

        out = capsys.readouterr().out
        assert "PojoTester: Employee: new instance with default constructor" in out
        assert "PojoTester: Employee: set_first_name('Z')" in out
        assert "PojoTester: Employee: get_first_name() 'Z'" in out
        assert "PojoTester: Employee: is_manager() True" in out

    def test_trace_does_not_change_outcome(self, tracing_tester, capsys):
        with pytest.raises(PropertyMismatch):
            tracing_tester.test_all(Invalid)

        assert "set_name('Z')" in capsys.readouterr().out

    def test_log_flag_is_read_only(self, tester):
        assert tester.log_enabled is False

        with pytest.raises(AttributeError):
            tester.log_enabled = True


# ============================================================================
# Null-aware Equality
# ============================================================================

@pytest.mark.parametrize("value1, value2, expected", [
    (None, None, True),
    (None, "Z", False),
    ("Z", None, False),
    ("Z", "Z", True),
    ("Z", "Z foo", False),
    (0, None, False),
    (12345, 12345, True),
])
def test_same_value(value1, value2, expected):
    assert same_value(value1, value2) is expected
