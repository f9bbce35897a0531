"""
Style Host Interfaces
Capabilities the matcher needs from the environment that renders elements.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional


class StyleSandbox(ABC):
    """A throwaway style declaration that accepts only properties the host recognizes."""

    @abstractmethod
    def set_property(self, name: str, value: str) -> bool:
        """Assign a kebab-case property. Returns False when the host rejects it."""

    @property
    @abstractmethod
    def css_text(self) -> str:
        """The accepted declarations as ``prop: value;`` items joined by a space."""


class StyleHost(ABC):
    @abstractmethod
    def check_element(self, element: Any, is_not: bool = False) -> None:
        """Raise StyleCheckError (INVALID_INPUT_TYPE) unless ``element`` is a styleable element."""

    @abstractmethod
    def get_applied_style(self, element: Any, properties: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """
        Cascaded and inline declarations that apply to ``element``.

        ``properties`` names the properties the caller is about to compare,
        for hosts that can only answer per-property queries for shorthands.
        """

    @abstractmethod
    def create_sandbox(self) -> StyleSandbox:
        """A new, empty sandbox. Never shared between calls."""
