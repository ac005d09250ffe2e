"""
ColorManager - Color rule store for terminal UI elements.

Validates `color` directives, keeps the resulting styles, serializes them back
to directive text and exports them as renderer style strings.

Directive syntax:
    color <element> <fgcolor> <bgcolor> [<attribute> ...]

Key behaviors:
- Colors are checked before attributes, attributes before the element name
- Nothing is stored unless every token validates
- A later directive for the same element replaces the earlier one
- `article` also yields `color_bold` and `color_underline`
- `title` inherits the `info` style when it has none of its own
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from src.rules.models import ColorRules

from .adapters.palette import PaletteAttributeValidator, PaletteColorValidator
from .models import DEFAULT_COLOR, ElementName, TextStyle
from .ports import (
    AttributeValidatorPort,
    ColorValidatorPort,
    ConfigParserPort,
    StyleSetterPort,
    StyleStorePort,
)

logger = logging.getLogger(__name__)

COLOR_ACTION = "color"
BOLD_KEY = "color_bold"
UNDERLINE_KEY = "color_underline"


# --- Errors ---


class ColorConfigError(Exception):
    """Raised when a directive cannot be applied."""

    code = "invalid_directive"

    def __init__(self, message: str, token: str | None = None) -> None:
        self.message = message
        self.token = token
        super().__init__(message)


class UnknownCommandError(ColorConfigError):
    code = "unknown_command"

    def __init__(self, action: str) -> None:
        super().__init__(f"unknown command `{action}'", token=action)


class TooFewParametersError(ColorConfigError):
    code = "too_few_params"

    def __init__(self) -> None:
        super().__init__("too few parameters")


class InvalidColorError(ColorConfigError):
    code = "invalid_color"

    def __init__(self, color: str) -> None:
        super().__init__(f"`{color}' is not a valid color", token=color)


class InvalidAttributeError(ColorConfigError):
    code = "invalid_attribute"

    def __init__(self, attribute: str) -> None:
        super().__init__(f"`{attribute}' is not a valid attribute", token=attribute)


class UnsupportedElementError(ColorConfigError):
    code = "unsupported_element"

    def __init__(self, element: str) -> None:
        super().__init__(
            f"`{element}' is not a valid configuration element", token=element
        )


# --- Formatting ---


def format_style(style: TextStyle) -> str:
    """
    Render a style as a renderer descriptor, e.g. "fg=red,bg=blue,attr=bold".

    An all-default style without attributes renders as "".
    """
    parts: list[str] = []
    if style.fg_color != DEFAULT_COLOR:
        parts.append(f"fg={style.fg_color}")
    if style.bg_color != DEFAULT_COLOR:
        parts.append(f"bg={style.bg_color}")
    parts.extend(f"attr={attr}" for attr in style.attributes)
    return ",".join(parts)


def _with_attribute(formatted: str, attribute: str) -> str:
    if formatted:
        return f"{formatted},attr={attribute}"
    return f"attr={attribute}"


def parse_element(name: str) -> ElementName:
    """Parse an element name, raising UnsupportedElementError if unknown."""
    try:
        return ElementName(name)
    except ValueError:
        raise UnsupportedElementError(name) from None


# --- Store ---


class InMemoryStyleStore:
    """
    Default style store.

    Iterates in insertion order; overwriting an element keeps its position.
    """

    def __init__(self) -> None:
        self._styles: dict[ElementName, TextStyle] = {}

    def get(self, element: ElementName) -> TextStyle | None:
        return self._styles.get(element)

    def set(self, element: ElementName, style: TextStyle) -> None:
        self._styles[element] = style

    def items(self) -> Iterator[tuple[ElementName, TextStyle]]:
        return iter(list(self._styles.items()))

    def __len__(self) -> int:
        return len(self._styles)


# --- Manager ---


class ColorManager:
    """
    Color rule store.

    Provides:
    - handle_action: validate and record one directive
    - dump_config: directives that rebuild the current store
    - export_styles / apply_colors: renderer key/value pairs
    """

    def __init__(
        self,
        color_validator: ColorValidatorPort,
        attribute_validator: AttributeValidatorPort,
        store: StyleStorePort | None = None,
    ) -> None:
        self._colors = color_validator
        self._attributes = attribute_validator
        self._store: StyleStorePort = store if store is not None else InMemoryStyleStore()

    @property
    def store(self) -> StyleStorePort:
        return self._store

    def register_commands(self, parser: ConfigParserPort) -> None:
        """Register this manager as the handler for `color` directives."""
        parser.register_handler(COLOR_ACTION, self)

    def handle_action(self, action: str, params: Sequence[str]) -> None:
        """
        Validate and store one directive.

        Args:
            action: Directive keyword, must be "color".
            params: element, fgcolor, bgcolor, then zero or more attributes.

        Raises:
            ColorConfigError: If any token is invalid. The store is untouched.
        """
        logger.debug("ColorManager.handle_action(%s, %s) was called", action, list(params))

        if action != COLOR_ACTION:
            raise UnknownCommandError(action)
        if len(params) < 3:
            raise TooFewParametersError()

        name, fg_color, bg_color = params[0], params[1], params[2]
        attributes = tuple(params[3:])

        for color in (fg_color, bg_color):
            if not self._colors.is_valid_color(color):
                raise InvalidColorError(color)

        for attr in attributes:
            if not self._attributes.is_valid_attribute(attr):
                raise InvalidAttributeError(attr)

        # Element is validated only after all colors and attributes pass
        element = parse_element(name)

        style = TextStyle(fg_color=fg_color, bg_color=bg_color, attributes=attributes)
        self._store.set(element, style)
        logger.debug(
            "ColorManager: %s fg=%s bg=%s attributes=%s",
            element.value,
            fg_color,
            bg_color,
            list(attributes),
        )

    def get_style(self, element: ElementName) -> TextStyle | None:
        return self._store.get(element)

    def dump_config(self) -> list[str]:
        """Return one `color` directive per stored element, in store order."""
        lines: list[str] = []
        for element, style in self._store.items():
            tokens = [COLOR_ACTION, element.value, style.fg_color, style.bg_color]
            tokens.extend(style.attributes)
            lines.append(" ".join(tokens))
        return lines

    def export_styles(self) -> list[tuple[str, str]]:
        """
        Build renderer key/value pairs.

        Order: stored elements (with the two `article` derivatives right after
        `article`), then the `title` fallback from `info` if it applies.
        """
        values: list[tuple[str, str]] = []

        for element, style in self._store.items():
            formatted = format_style(style)
            logger.debug("ColorManager.export_styles: %s %s", element.value, formatted)
            values.append((element.value, formatted))

            if element is ElementName.ARTICLE:
                # Renderers without these variables ignore them
                bold = _with_attribute(formatted, "bold")
                underline = _with_attribute(formatted, "underline")
                logger.debug("ColorManager.export_styles: %s %s", BOLD_KEY, bold)
                values.append((BOLD_KEY, bold))
                logger.debug("ColorManager.export_styles: %s %s", UNDERLINE_KEY, underline)
                values.append((UNDERLINE_KEY, underline))

        title_style = self._store.get(ElementName.TITLE)
        info_style = self._store.get(ElementName.INFO)
        if title_style is None and info_style is not None:
            inherited = format_style(info_style)
            logger.debug(
                "ColorManager.export_styles: title inherited from info %s", inherited
            )
            values.append((ElementName.TITLE.value, inherited))

        return values

    def apply_colors(self, set_value: StyleSetterPort) -> None:
        """Push every exported key/value pair to `set_value`."""
        for key, value in self.export_styles():
            set_value(key, value)


# --- Factory ---


def create_color_manager(
    rules: ColorRules | None = None,
    store: StyleStorePort | None = None,
) -> ColorManager:
    """
    Create a color manager.

    Args:
        rules: Palette and attribute rules. Built-in defaults if None.
        store: Optional style store. In-memory if None.

    Returns:
        Configured ColorManager
    """
    rules = rules or ColorRules()
    return ColorManager(
        color_validator=PaletteColorValidator(rules),
        attribute_validator=PaletteAttributeValidator(rules),
        store=store,
    )
