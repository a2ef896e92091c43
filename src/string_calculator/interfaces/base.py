"""Abstract base for user-facing interfaces."""

from abc import ABC, abstractmethod

from string_calculator.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Common contract implemented by every interface."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
