"""Run the demonstration scenario and print its report.

Usage:
    python -m warehouse_simulator
"""

import logging

from .analyzer import BatchAnalyzer
from .scenarios import build_demo_batch


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    BatchAnalyzer(build_demo_batch()).print_report()


if __name__ == "__main__":
    main()
