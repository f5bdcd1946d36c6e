"""
Check runner.

Applies one tester entry point to many classes and turns the outcome of each
into a CheckResult, so a whole module of data objects can be verified and
reported at once.
"""

import inspect
import time
from types import ModuleType
from typing import Iterable

from .accessor_matcher import AccessorMatcher
from .errors import PojoException, PropertyMismatch
from .models import CheckKind, CheckResult, CheckStatus, RunSummary
from .sample_values import SampleValueRegistry
from .tester import PojoUnitTester


class PojoRunner:
    """
    Runs tester checks over classes and collects results.

    Unlike the tester, the runner never stops at the first failing class:
    each class gets its own CheckResult. Within a class the tester still
    stops at the first failure.

    Usage:
        runner = PojoRunner(verbose=True)
        results = runner.run_classes(runner.discover_classes(my_models))
        summary = runner.summarize(results)
    """

    def __init__(
        self,
        log_enabled: bool = False,
        verbose: bool = True,
        registry: SampleValueRegistry | None = None,
    ):
        self.verbose = verbose
        self.tester = PojoUnitTester(log_enabled=log_enabled, registry=registry)
        self.matcher = AccessorMatcher()

        self.checks = {
            CheckKind.ALL: self.tester.test_all,
            CheckKind.CONSTRUCTOR: self.tester.test_default_constructor,
            CheckKind.ACCESSORS: self.tester.test_setters_and_getters_behavior,
        }

    def run_class(self, cls: type, check: CheckKind = CheckKind.ALL) -> CheckResult:
        """
        Run one check against one class.

        Taxonomy errors become FAIL (round-trip mismatch) or ERROR (anything
        else); exceptions outside the taxonomy propagate.
        """
        start = time.time()
        status = CheckStatus.PASS
        message = ""
        error_type = None

        try:
            self.checks[check](cls)
        except PropertyMismatch as e:
            status = CheckStatus.FAIL
            message = str(e)
            error_type = type(e).__name__
        except PojoException as e:
            status = CheckStatus.ERROR
            message = str(e)
            if e.cause is not None:
                message += f" [{type(e.cause).__name__}: {e.cause}]"
            error_type = type(e).__name__

        return CheckResult(
            class_name=cls.__qualname__,
            check=check,
            status=status,
            message=message,
            error_type=error_type,
            duration_sec=time.time() - start,
        )

    def run_classes(self, classes: Iterable[type], check: CheckKind = CheckKind.ALL) -> list[CheckResult]:
        classes = list(classes)
        results = []

        for i, cls in enumerate(classes):
            if self.verbose:
                print(f"[{i+1}/{len(classes)}] {cls.__qualname__}...", end=" ", flush=True)

            result = self.run_class(cls, check)
            results.append(result)

            if self.verbose:
                print(result.status.value.upper())

        return results

    def discover_classes(self, module: ModuleType) -> list[type]:
        """
        Classes defined in the module that have at least one setter.

        For a package, classes re-exported from its own submodules count as
        defined in it; classes imported from elsewhere never do.
        """
        own_prefix = module.__name__ + "." if hasattr(module, "__path__") else None

        classes = []
        for name, obj in inspect.getmembers(module, inspect.isclass):
            defined_here = obj.__module__ == module.__name__ or (
                own_prefix is not None and obj.__module__.startswith(own_prefix)
            )
            if not defined_here:
                continue
            if self.matcher.match(obj):
                classes.append(obj)
        return classes

    def summarize(self, results: list[CheckResult]) -> RunSummary:
        return RunSummary.from_results(results)
