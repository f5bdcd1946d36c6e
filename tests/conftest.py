"""
Shared fixtures and utilities for testing the POJO tester.

Provides:
- Tester / registry / matcher fixtures
- PojoFactory for building small data object classes on the fly
"""

import pytest
from pathlib import Path
from typing import Any, Callable

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from pojo_tester import AccessorMatcher, PojoUnitTester, default_registry


# ============================================================================
# Data Object Factories
# ============================================================================

class PojoFactory:
    """Factory for creating data object classes for testing."""

    @staticmethod
    def create_named(
        store: Callable[[Any], Any] = lambda value: value,
        name: str = "Person",
    ) -> type:
        """Class with set_name/get_name; `store` transforms the value before it is kept."""

        def __init__(self):
            self._name = None

        def get_name(self) -> str:
            return self._name

        def set_name(self, name: str) -> None:
            self._name = store(name)

        return type(name, (), {
            "__init__": __init__,
            "get_name": get_name,
            "set_name": set_name,
        })

    @staticmethod
    def create_recording(calls: list[str]) -> type:
        """Class whose accessors append their own name to `calls`."""

        class Recording:

            def __init__(self):
                self._a = None
                self._b = None

            def get_a(self) -> str:
                calls.append("get_a")
                return self._a

            def set_a(self, a: str) -> None:
                calls.append("set_a")
                self._a = a

            def get_b(self) -> int:
                calls.append("get_b")
                return self._b

            def set_b(self, b: int) -> None:
                calls.append("set_b")
                self._b = b

            def set_c(self, c: float) -> None:
                calls.append("set_c")

        return Recording


class NeedsArguments:
    """Data object without a zero-argument constructor."""

    def __init__(self, name: str):
        self._name = name

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def tester():
    """Tester with diagnostic output disabled."""
    return PojoUnitTester()


@pytest.fixture
def tracing_tester():
    """Tester with diagnostic output enabled."""
    return PojoUnitTester(log_enabled=True)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def matcher():
    return AccessorMatcher()


@pytest.fixture
def pojo_factory():
    return PojoFactory


@pytest.fixture
def needs_arguments():
    return NeedsArguments
