"""
Colors component port definitions.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol

from .models import ElementName, TextStyle


class ColorValidatorPort(Protocol):
    """Decides whether a token names a color."""

    def is_valid_color(self, color: str) -> bool:
        """Return True if the color name is recognized."""
        ...


class AttributeValidatorPort(Protocol):
    """Decides whether a token names a text attribute."""

    def is_valid_attribute(self, attribute: str) -> bool:
        """Return True if the attribute name is recognized."""
        ...


class StyleStorePort(Protocol):
    """Element to style mapping."""

    def get(self, element: ElementName) -> TextStyle | None:
        """Get the style for an element, or None if not configured."""
        ...

    def set(self, element: ElementName, style: TextStyle) -> None:
        """Insert or overwrite the style for an element."""
        ...

    def items(self) -> Iterator[tuple[ElementName, TextStyle]]:
        """Iterate stored entries in a stable order."""
        ...


class StyleSetterPort(Protocol):
    """Renderer-facing sink receiving exported style strings."""

    def __call__(self, key: str, value: str) -> None: ...


class DirectiveHandlerPort(Protocol):
    """Anything that can handle a tokenized directive."""

    def handle_action(self, action: str, params: Sequence[str]) -> None:
        """Validate and apply one directive, raising on invalid input."""
        ...


class ConfigParserPort(Protocol):
    """Configuration dispatcher that routes directives by keyword."""

    def register_handler(self, action: str, handler: DirectiveHandlerPort) -> None:
        """Route directives starting with `action` to `handler`."""
        ...
