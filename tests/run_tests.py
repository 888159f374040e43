#!/usr/bin/env python3
"""
Test runner for the Parking Spot Allocator tests.
"""

import unittest
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def run_all_tests():
    """Run all test suites"""
    test_loader = unittest.TestLoader()

    start_dir = str(Path(__file__).parent)
    top_level_dir = str(Path(__file__).parent.parent)

    test_suite = test_loader.discover(start_dir, pattern='test_*.py', top_level_dir=top_level_dir)

    test_runner = unittest.TextTestRunner(verbosity=2)
    return test_runner.run(test_suite)


def run_specific_test(test_name):
    """Run a specific test module or test case, e.g. unit.test_models.TestVehicle"""
    test_loader = unittest.TestLoader()
    test_suite = test_loader.loadTestsFromName(f'tests.{test_name}')

    test_runner = unittest.TextTestRunner(verbosity=2)
    return test_runner.run(test_suite)


if __name__ == "__main__":
    if len(sys.argv) > 1:
        result = run_specific_test(sys.argv[1])
    else:
        result = run_all_tests()

    sys.exit(0 if result.wasSuccessful() else 1)
