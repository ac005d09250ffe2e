"""
Adapters for the colors component.
"""

from .palette import (
    PaletteAttributeValidator,
    PaletteColorValidator,
    default_attribute_validator,
    default_color_validator,
)

__all__ = [
    "PaletteColorValidator",
    "PaletteAttributeValidator",
    "default_color_validator",
    "default_attribute_validator",
]
