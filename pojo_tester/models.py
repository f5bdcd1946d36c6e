"""
Core data models for the POJO tester.

These models define the contracts between components:
- Accessor matcher → Verification engine (PropertyAccessorPair)
- Verification engine → Runner (CheckResult)
- Runner → Reporter / JSON output (CheckResult, RunSummary)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


# ============================================================================
# Enums
# ============================================================================

class CheckKind(str, Enum):
    """Entry points of the tester that the runner can drive."""
    ALL = "all"                        # test_all
    CONSTRUCTOR = "constructor"        # test_default_constructor
    ACCESSORS = "accessors"            # test_setters_and_getters_behavior


class CheckStatus(str, Enum):
    """Outcome of one check against one class."""
    PASS = "pass"
    FAIL = "fail"                      # Round-trip mismatch
    ERROR = "error"                    # Construction or invocation failure


# ============================================================================
# Accessor Models
# ============================================================================

@dataclass
class PropertyAccessorPair:
    """A setter and the getter paired with it (if any)."""
    setter_name: str
    setter: Callable[..., Any]
    value_type: Any = object           # Declared type of the setter parameter
    getter_name: str | None = None
    getter: Callable[..., Any] | None = None

    @property
    def property_name(self) -> str:
        """Setter name without its 'set' prefix ('setName' -> 'Name', 'set_name' -> 'name')."""
        return self.setter_name[len("set"):].lstrip("_")

    @property
    def has_getter(self) -> bool:
        return self.getter is not None


# ============================================================================
# Run Models
# ============================================================================

@dataclass
class CheckResult:
    """Result of running one check against one class."""
    class_name: str
    check: CheckKind
    status: CheckStatus
    message: str = ""
    error_type: str | None = None
    duration_sec: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASS

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "check": self.check.value,
            "status": self.status.value,
            "message": self.message,
            "error_type": self.error_type,
            "duration_sec": self.duration_sec,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CheckResult":
        return cls(
            class_name=data["class_name"],
            check=CheckKind(data["check"]),
            status=CheckStatus(data["status"]),
            message=data.get("message", ""),
            error_type=data.get("error_type"),
            duration_sec=data.get("duration_sec", 0.0),
        )


@dataclass
class RunSummary:
    """Summary statistics for a list of check results."""
    total: int
    passed: int
    failed: int
    errors: int
    pass_rate: float
    total_duration_sec: float = 0.0
    failed_classes: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.total > 0 and self.passed == self.total

    @classmethod
    def from_results(cls, results: list[CheckResult]) -> "RunSummary":
        total = len(results)
        passed = sum(1 for r in results if r.status == CheckStatus.PASS)
        return cls(
            total=total,
            passed=passed,
            failed=sum(1 for r in results if r.status == CheckStatus.FAIL),
            errors=sum(1 for r in results if r.status == CheckStatus.ERROR),
            pass_rate=passed / total if total else 0.0,
            total_duration_sec=sum(r.duration_sec for r in results),
            failed_classes=[r.class_name for r in results if not r.passed],
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "pass_rate": self.pass_rate,
            "total_duration_sec": self.total_duration_sec,
            "failed_classes": self.failed_classes,
        }
