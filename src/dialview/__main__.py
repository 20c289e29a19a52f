"""Command-line interface."""
import sys

from dialview.app.main import main

if __name__ == "__main__":
    sys.exit(main())
