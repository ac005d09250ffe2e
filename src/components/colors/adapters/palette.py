"""
Palette adapters for the colors component.

Implement the color and attribute ports from a ColorRules instance.
"""

from __future__ import annotations

from src.rules.models import ColorRules


class PaletteColorValidator:
    """
    Color names from the configured palette.

    Accepts the named colors plus, when the extended palette is enabled,
    `<prefix><n>` where n is a decimal index without leading zeros.
    """

    def __init__(self, rules: ColorRules) -> None:
        self._named = frozenset(rules.palette.named_colors)
        self._extended = rules.palette.extended

    def is_valid_color(self, color: str) -> bool:
        if color in self._named:
            return True

        extended = self._extended
        if not extended.enabled or not color.startswith(extended.prefix):
            return False

        index = color[len(extended.prefix) :]
        if not (index.isascii() and index.isdigit()):
            return False
        if len(index) > 1 and index.startswith("0"):
            return False
        if len(index) > len(str(extended.max_index)):
            return False
        return int(index) <= extended.max_index


class PaletteAttributeValidator:
    """Attribute names from the configured list."""

    def __init__(self, rules: ColorRules) -> None:
        self._attributes = frozenset(rules.attributes)

    def is_valid_attribute(self, attribute: str) -> bool:
        return attribute in self._attributes


# Default adapter instances
default_rules = ColorRules()
default_color_validator = PaletteColorValidator(default_rules)
default_attribute_validator = PaletteAttributeValidator(default_rules)
