"""Base component providing structured logging to subclasses."""

from __future__ import annotations

from typing import Any

from string_calculator.utils.logging import get_logger


class BaseComponent:
    """Base class for all components that need a bound logger."""

    def __init__(self) -> None:
        """Initialize the component with a logger named after its class."""
        self.logger: Any = get_logger(self.__class__.__name__)
