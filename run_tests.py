#!/usr/bin/env python3
"""
Test Runner for the LRU Cache Engine
Copyright 2025 Jurden Bruce

Quick test runner script for the root directory.
Runs every test module under tests/ in turn.

Usage:
    python run_tests.py
    python run_tests.py --verbose
"""

import sys
import subprocess
from pathlib import Path

def main():
    """Run the test suite"""
    test_files = sorted((Path(__file__).parent / "tests").glob("test_*.py"))

    if not test_files:
        print("Error: No test files found in tests/")
        sys.exit(1)

    exit_code = 0
    for test_file in test_files:
        # Pass through any arguments (like --verbose)
        cmd = [sys.executable, str(test_file)] + sys.argv[1:]

        print(f"Running: {' '.join(cmd)}\n")
        result = subprocess.run(cmd)
        exit_code = exit_code or result.returncode

    sys.exit(exit_code)

if __name__ == "__main__":
    main()
