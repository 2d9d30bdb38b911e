"""
Entry point for running bellowscfg as a module.

Usage:
    python -m bellowscfg match --diameter 4 --length 10
    python -m bellowscfg schematic BSI-0400-10 --cuff "U CUFF"
    python -m bellowscfg serve --port 8000
"""

import sys

from bellowscfg.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
