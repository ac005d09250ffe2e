"""
Colors component input/output models.

Holds the style value type, the closed set of configurable elements and the
frozen input/output dataclasses used by the component entry points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_COLOR = "default"


class ElementName(str, Enum):
    """UI elements that accept a `color` directive."""

    LISTNORMAL = "listnormal"
    LISTFOCUS = "listfocus"
    LISTNORMAL_UNREAD = "listnormal_unread"
    LISTFOCUS_UNREAD = "listfocus_unread"
    INFO = "info"
    BACKGROUND = "background"
    ARTICLE = "article"
    END_OF_TEXT_MARKER = "end-of-text-marker"
    TITLE = "title"


@dataclass(frozen=True)
class TextStyle:
    """Foreground, background and ordered attributes for one element."""

    fg_color: str
    bg_color: str
    attributes: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


# --- Handle ---


@dataclass(frozen=True)
class HandleDirectiveInput:
    """Input for handling one tokenized directive."""

    action: str
    params: tuple[str, ...] = ()


@dataclass(frozen=True)
class HandleDirectiveOutput:
    """Output from handling a directive."""

    element: ElementName | None = None
    style: TextStyle | None = None
    errors: list[ValidationError] = field(default_factory=list)
    success: bool = True


# --- Dump ---


@dataclass(frozen=True)
class DumpConfigInput:
    """Input for dumping stored styles as directives."""

    pass


@dataclass(frozen=True)
class DumpConfigOutput:
    """Output from dumping stored styles."""

    lines: list[str]


# --- Apply ---


@dataclass(frozen=True)
class ApplyColorsInput:
    """Input for exporting stored styles to the renderer."""

    pass


@dataclass(frozen=True)
class ApplyColorsOutput:
    """Output from exporting stored styles, in emission order."""

    values: list[tuple[str, str]]
