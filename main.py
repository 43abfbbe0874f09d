"""
Entry point for the WordPress export parser.
"""

import sys

from wp_export.cli import main

if __name__ == "__main__":
    sys.exit(main())
