"""Main entry point for the mangashelf package."""

from mangashelf.cli import app


def main():
    """Run the command-line interface."""
    app()


if __name__ == "__main__":
    main()
