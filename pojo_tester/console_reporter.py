"""
Console reporter.

Prints check results to the terminal in a readable format.
"""

from .models import CheckResult, CheckStatus, RunSummary


class ConsoleReporter:
    """Prints check results to the console."""

    def report(self, results: list[CheckResult], summary: RunSummary) -> None:
        """
        Print a results table, the totals and the failure details.

        Args:
            results: Results in the order they were produced
            summary: Summary computed from the same results
        """
        print()
        print("=" * 70)
        print("POJO CHECK SUMMARY")
        print("=" * 70)

        print(f"{'Class':<40} {'Check':<12} {'Status':<8} {'Time':<8}")
        print("-" * 70)

        for result in results:
            # Truncate class name for display
            name = result.class_name[:38] + ".." if len(result.class_name) > 40 else result.class_name
            status = result.status.value.upper()
            time_str = f"{result.duration_sec * 1000:.1f}ms"

            print(f"{name:<40} {result.check.value:<12} {status:<8} {time_str:<8}")

        print("-" * 70)
        print()

        print(f"Total Checks: {summary.total}")
        print(f"Passed: {summary.passed} ({summary.pass_rate*100:.1f}%)")
        print(f"Failed: {summary.failed}")
        if summary.errors > 0:
            print(f"Errors: {summary.errors}")

        failures = [r for r in results if r.status != CheckStatus.PASS]
        if failures:
            print()
            print("FAILURES:")
            print("-" * 70)
            for result in failures:
                print(f"{result.class_name} [{result.error_type}]")
                print(f"  {result.message}")

        print("=" * 70)
        print()
