"""
Colors component - Terminal color theming for UI elements.

Handles `color <element> <fg> <bg> [<attr> ...]` directives.
"""

from ._impl import (
    BOLD_KEY,
    COLOR_ACTION,
    UNDERLINE_KEY,
    ColorConfigError,
    ColorManager,
    InMemoryStyleStore,
    InvalidAttributeError,
    InvalidColorError,
    TooFewParametersError,
    UnknownCommandError,
    UnsupportedElementError,
    create_color_manager,
    format_style,
    parse_element,
)
from .component import (
    run,
    run_apply,
    run_dump,
    run_handle,
)
from .models import (
    DEFAULT_COLOR,
    ApplyColorsInput,
    ApplyColorsOutput,
    DumpConfigInput,
    DumpConfigOutput,
    ElementName,
    HandleDirectiveInput,
    HandleDirectiveOutput,
    TextStyle,
    ValidationError,
)
from .ports import (
    AttributeValidatorPort,
    ColorValidatorPort,
    ConfigParserPort,
    DirectiveHandlerPort,
    StyleSetterPort,
    StyleStorePort,
)

__all__ = [
    # Component entry points
    "run",
    "run_handle",
    "run_dump",
    "run_apply",
    # Models
    "ElementName",
    "TextStyle",
    "ValidationError",
    "HandleDirectiveInput",
    "HandleDirectiveOutput",
    "DumpConfigInput",
    "DumpConfigOutput",
    "ApplyColorsInput",
    "ApplyColorsOutput",
    # Ports
    "ColorValidatorPort",
    "AttributeValidatorPort",
    "StyleStorePort",
    "StyleSetterPort",
    "DirectiveHandlerPort",
    "ConfigParserPort",
    # Exceptions
    "ColorConfigError",
    "UnknownCommandError",
    "TooFewParametersError",
    "InvalidColorError",
    "InvalidAttributeError",
    "UnsupportedElementError",
    # Service
    "ColorManager",
    "InMemoryStyleStore",
    "create_color_manager",
    "format_style",
    "parse_element",
    # Constants
    "COLOR_ACTION",
    "BOLD_KEY",
    "UNDERLINE_KEY",
    "DEFAULT_COLOR",
]
