"""Data models exchanged by the string calculator interfaces."""

from string_calculator.models.io import CalculationResult, WelcomeMessage

__all__ = ["CalculationResult", "WelcomeMessage"]
