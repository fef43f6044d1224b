"""Entry point for the LC-3 virtual machine.
Run `python main.py image.obj [more.obj ...]` from the project root, add
`--gui` to open the Qt viewer."""
import sys

from lc3.cli import main

if __name__ == "__main__":
    sys.exit(main())
