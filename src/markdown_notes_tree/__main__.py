"""Module entry point for running with python -m markdown_notes_tree."""

import sys

from markdown_notes_tree.cli import main

if __name__ == "__main__":
    sys.exit(main())
