"""Entry point for ``python -m string_calculator``."""

from string_calculator.interfaces.cli import CLIInterface
from string_calculator.utils.logging import configure_logging


def main() -> None:
    """Configure logging and run the command line interface."""
    configure_logging()
    CLIInterface().run()


if __name__ == "__main__":
    main()
