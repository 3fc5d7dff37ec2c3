#!/usr/bin/env python3
"""
Runner for a source checkout - forwards to the lavaboard CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from lavaboard.cli.main import cli

if __name__ == "__main__":
    # If no arguments, show the demo
    if len(sys.argv) == 1:
        sys.argv.append('demo')

    cli()
