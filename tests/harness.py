"""
Shared test runner for the LRU Cache Engine test modules
Copyright 2025 Jurden Bruce

Test classes hold plain test_* methods so pytest can collect them; this
module lets each test file also run standalone:

    python tests/test_lru_cache.py --verbose
"""

import sys
import logging
import argparse
from contextlib import contextmanager
import os


def assert_raises(exc_type, func, *args, **kwargs):
    """Call func and return the exception it raises, failing if it does not"""
    try:
        func(*args, **kwargs)
    except exc_type as e:
        return e
    raise AssertionError(f"{getattr(func, '__name__', func)} did not raise {exc_type.__name__}")


@contextmanager
def env(**overrides):
    """Temporarily set (or, with None, unset) environment variables"""
    saved = {name: os.environ.get(name) for name in overrides}
    try:
        for name, value in overrides.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value
        yield
    finally:
        for name, value in saved.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


def run_test_class(test_class, verbose=False):
    """Run every test_* method of test_class, returning (passed, failed)"""
    instance = test_class()
    passed = 0
    failed = 0
    for name in sorted(dir(instance)):
        if not name.startswith("test_"):
            continue
        try:
            getattr(instance, name)()
        except Exception as e:
            failed += 1
            print(f"  [FAIL] {test_class.__name__}.{name}: {e!r}")
        else:
            passed += 1
            if verbose:
                print(f"  [PASS] {test_class.__name__}.{name}")
    return passed, failed


def main(test_classes, title):
    """Main test runner"""
    parser = argparse.ArgumentParser(description=f"Run {title}")
    parser.add_argument('--verbose', '-v', action='store_true', help="Verbose output")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    )

    print("\n" + "="*70)
    print(title)
    print("="*70)

    passed = 0
    failed = 0
    for test_class in test_classes:
        class_passed, class_failed = run_test_class(test_class, verbose=args.verbose)
        passed += class_passed
        failed += class_failed

    print("="*70)
    print("RESULTS")
    print("="*70)
    print(f"Passed: {passed}")
    print(f"Failed: {failed}")
    print(f"Total:  {passed + failed}")

    if failed == 0:
        print("\nALL TESTS PASSED")
        sys.exit(0)
    print(f"\n{failed} TEST(S) FAILED")
    sys.exit(1)
