#!/usr/bin/env python3
"""
Utility to load exported load test results from CSV and print statistics without sending requests.
"""
import sys

from src.loadtest.cli import replay_main


if __name__ == "__main__":
    sys.exit(replay_main())
