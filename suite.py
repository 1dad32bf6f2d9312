"""
minimal test registry and runner used by linqish_tests.

each test module registers cases with @test("description") and ends with
`suite.run(title=...)`, so a module can be run directly from the repo root:

    python -m linqish_tests.linqish_ordering_test

the same functions are plain `test_*` callables, so pytest collects them too.
"""
import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """ansi colour codes for the report"""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that, reported as a failure rather than an error"""
    pass


def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def run(title: str = "test run", verbose: Optional[bool] = None, exit_on_failure: bool = True) -> bool:
    """
    run every registered test, print a report and clear the registry.
    pass `-v` on the command line (or verbose=True) for tracebacks of errors.
    exits with status 1 if anything failed, unless exit_on_failure is false.
    """
    verbose = ('-v' in sys.argv) if verbose is None else verbose
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _registry['results'] = []
    for case in _registry['tests']:
        description = case['description']
        error = None

        try:
            case['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        passed = error is None
        _registry['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}pass{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {description}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    all_passed = _print_summary(start_time)
    _registry['tests'] = []

    if not all_passed and exit_on_failure:
        sys.exit(1)
    return all_passed


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    total = len(results)
    failed_count = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{colour}ran {total} tests in {duration:.2f}ms: "
          f"{total - failed_count} passed, {failed_count} failed{_c.reset}\n")
    return failed_count == 0
