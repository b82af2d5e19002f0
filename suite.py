import sys
import time
import logging
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'

SLOW_MS = 250.0


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- assertion error ---

class SuiteAssertionError(AssertionError):
    """raised by the assert helpers so the runner can tell a failed check from a crash."""
    pass


# --- registering tests ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case. the function stays callable by pytest."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# --- assertions ---

def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_equal(actual: Any, expected: Any, what: str = "value") -> None:
    """equality check whose message shows both sides."""
    if actual != expected:
        raise SuiteAssertionError(f"{what}: expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """
    call func and require it to raise error_type.
    returns the raised error so a test can inspect its fields (a ParseError's failure, for one).
    """
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    except Exception as e:
        raise SuiteAssertionError(f"expected {error_type.__name__}, got {type(e).__name__}: {e}")
    raise SuiteAssertionError(f"expected {error_type.__name__}, nothing was raised")


# --- running ---

def run(title: str = "test run", verbose: Optional[bool] = None) -> int:
    """
    executes all registered tests and prints a report, returning the number of failures.
    verbose (or -v on the command line) turns on debug logging from elfkit and prints
    tracebacks for unexpected errors.
    """
    if verbose is None:
        verbose = '-v' in sys.argv[1:]
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(message)s')

    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None

        test_start = time.perf_counter()
        try:
            test_item['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()
        elapsed = (time.perf_counter() - test_start) * 1000

        _suite_state['results'].append({'passed': error is None, 'description': description,
                                        'error': error, 'ms': elapsed})
        _print_result(description, error, elapsed)

    failed_count = _print_summary(start_time)

    # clear tests so one script can hold several separate suite runs
    _suite_state['tests'] = []

    return failed_count


def _print_result(description: str, error: Optional[str], elapsed: float) -> None:
    timing = f"{_c.warn}{elapsed:.1f}ms{_c.reset}" if elapsed >= SLOW_MS else ""
    if error is None:
        print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}  {timing}")
    else:
        print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}  {timing}")
        print(f"    {_c.grey}└─> {error}{_c.reset}")


def _print_summary(start_time: float) -> int:
    """prints the final summary of the test run and returns the failure count."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count
    slowest = max(results, key=lambda r: r['ms'], default=None)

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    if slowest is not None:
        print(f"  {_c.grey}slowest: {slowest['description']} ({slowest['ms']:.2f}ms){_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
