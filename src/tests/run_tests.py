#!/usr/bin/env python3
"""
Test runner for the camelcase-lint project.
Runs the name style, role classification, conversion and pipeline tests.
"""

import argparse
import os
import sys
import time
import unittest

# Add the src directory to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

TEST_DIR = os.path.dirname(__file__)


def build_suite(module_name=None):
    loader = unittest.TestLoader()
    if module_name:
        return loader.loadTestsFromName(f"test_{module_name}")
    return loader.discover(TEST_DIR, pattern="test_*.py")


def run_suite(suite, verbosity=2, failfast=False):
    print(f"Found {suite.countTestCases()} tests")
    start_time = time.time()
    runner = unittest.TextTestRunner(
        verbosity=verbosity,
        failfast=failfast,
        stream=sys.stdout,
    )
    result = runner.run(suite)
    print(f"\nTests completed in {time.time() - start_time:.2f} seconds")
    return result


def run_with_coverage(suite, verbosity):
    import coverage

    cov = coverage.Coverage(source=["camelcase_lint"])
    cov.start()
    result = run_suite(suite, verbosity)
    cov.stop()
    cov.save()
    cov.report()
    return result


def list_available_tests() -> None:
    for test_file in sorted(os.listdir(TEST_DIR)):
        if test_file.startswith("test_") and test_file.endswith(".py"):
            print(test_file[len("test_") : -len(".py")])


def create_test_parser():
    parser = argparse.ArgumentParser(
        description="Run tests for the camelcase-lint project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                           # Run all tests
  python run_tests.py --module role_classifier  # Run specific module tests
  python run_tests.py --list                    # List available test modules
  python run_tests.py --coverage                # Run with coverage analysis
        """,
    )
    parser.add_argument(
        "--module",
        "-m",
        help="Run tests for specific module (e.g., naming_patterns, lint_pipeline)",
    )
    parser.add_argument("--list", "-l", action="store_true", help="List test modules")
    parser.add_argument("--coverage", action="store_true", help="Measure coverage")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    parser.add_argument("--failfast", "-f", action="store_true", help="Stop on first failure")
    return parser


def main() -> None:
    args = create_test_parser().parse_args()

    if args.list:
        list_available_tests()
        return

    sys.path.insert(0, TEST_DIR)
    verbosity = 0 if args.quiet else 2
    suite = build_suite(args.module)
    if args.coverage:
        result = run_with_coverage(suite, verbosity)
    else:
        result = run_suite(suite, verbosity, args.failfast)

    sys.exit(0 if result.wasSuccessful() else 1)


if __name__ == "__main__":
    main()
