"""Main entry point for wwdcsearch CLI when run as a module."""

from wwdcsearch.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
