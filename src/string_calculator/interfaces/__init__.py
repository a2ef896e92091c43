"""User-facing interfaces for the string calculator."""

from string_calculator.interfaces.base import BaseInterface
from string_calculator.interfaces.cli import CLIInterface

__all__ = ["BaseInterface", "CLIInterface"]
