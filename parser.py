"""
Number Parser: sort integers descending and persist them as text, JSON or XML.

Backwards-compatibility wrapper for existing scripts.

Recommended usage:
  - Command line: number-parser 5,3,9,1 json
  - Python module: python -m number_parser.cli
  - Programmatic: from number_parser.orchestrator import sort_and_persist
"""

import sys

from number_parser.cli import main
from number_parser.orchestrator import sort_and_persist

__all__ = ['main', 'sort_and_persist']

if __name__ == "__main__":
    sys.exit(main())
