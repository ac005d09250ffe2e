"""
Colors component - Terminal color theming for UI elements.

Entry points wrap ColorManager and report directive failures as
ValidationError lists instead of exceptions.
"""

from __future__ import annotations

from ._impl import ColorConfigError, ColorManager, parse_element
from .models import (
    ApplyColorsInput,
    ApplyColorsOutput,
    DumpConfigInput,
    DumpConfigOutput,
    HandleDirectiveInput,
    HandleDirectiveOutput,
    ValidationError,
)
from .ports import StyleSetterPort


def _to_validation_error(exc: ColorConfigError) -> ValidationError:
    return ValidationError(
        field=exc.token or "_directive",
        code=exc.code,
        message=exc.message,
    )


# --- Component Entry Points ---


def run_handle(
    inp: HandleDirectiveInput,
    *,
    manager: ColorManager,
) -> HandleDirectiveOutput:
    """
    Validate and store one directive.

    Args:
        inp: Input containing the directive keyword and parameters.
        manager: Color manager holding the store.

    Returns:
        HandleDirectiveOutput with the stored style or the validation error.
    """
    try:
        manager.handle_action(inp.action, inp.params)
    except ColorConfigError as e:
        return HandleDirectiveOutput(errors=[_to_validation_error(e)], success=False)

    element = parse_element(inp.params[0])
    return HandleDirectiveOutput(
        element=element,
        style=manager.get_style(element),
        errors=[],
        success=True,
    )


def run_dump(
    inp: DumpConfigInput,
    *,
    manager: ColorManager,
) -> DumpConfigOutput:
    """Serialize stored styles back to directive lines."""
    return DumpConfigOutput(lines=manager.dump_config())


def run_apply(
    inp: ApplyColorsInput,
    *,
    manager: ColorManager,
    set_value: StyleSetterPort | None = None,
) -> ApplyColorsOutput:
    """
    Export stored styles.

    Args:
        inp: Input (empty for apply operation).
        manager: Color manager holding the store.
        set_value: Optional sink, called once per exported pair.

    Returns:
        ApplyColorsOutput with the exported pairs in emission order.
    """
    values = manager.export_styles()
    if set_value is not None:
        for key, value in values:
            set_value(key, value)
    return ApplyColorsOutput(values=values)


def run(
    inp: HandleDirectiveInput | DumpConfigInput | ApplyColorsInput,
    *,
    manager: ColorManager,
    set_value: StyleSetterPort | None = None,
) -> HandleDirectiveOutput | DumpConfigOutput | ApplyColorsOutput:
    """
    Main entry point for the colors component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, HandleDirectiveInput):
        return run_handle(inp, manager=manager)
    elif isinstance(inp, DumpConfigInput):
        return run_dump(inp, manager=manager)
    elif isinstance(inp, ApplyColorsInput):
        return run_apply(inp, manager=manager, set_value=set_value)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
