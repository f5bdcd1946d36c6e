"""POJO Tester - Automated setter/getter round-trip checks for plain data objects."""

from .tester import PojoUnitTester, same_value
from .accessor_matcher import AccessorMatcher
from .sample_values import SampleValueRegistry, default_registry
from .instance_factory import create_instance, get_default_constructor
from .runner import PojoRunner
from .models import CheckKind, CheckStatus, CheckResult, PropertyAccessorPair, RunSummary
from .errors import (
    PojoException,
    NoDefaultConstructor,
    ConstructionError,
    AccessorInvocationError,
    PropertyMismatch,
)

__version__ = "1.0.0"
__all__ = [
    "PojoUnitTester",
    "same_value",
    "AccessorMatcher",
    "SampleValueRegistry",
    "default_registry",
    "create_instance",
    "get_default_constructor",
    "PojoRunner",
    "CheckKind",
    "CheckStatus",
    "CheckResult",
    "PropertyAccessorPair",
    "RunSummary",
    "PojoException",
    "NoDefaultConstructor",
    "ConstructionError",
    "AccessorInvocationError",
    "PropertyMismatch",
]
