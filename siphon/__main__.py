"""Package entry point for ``python -m siphon``."""

from siphon.cli import main

if __name__ == "__main__":
    main()
