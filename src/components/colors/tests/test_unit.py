"""
Colors component unit tests.

Tests the run_* entry points and their error reporting.
"""

from __future__ import annotations

import pytest

from src.components.colors import (
    ApplyColorsInput,
    ColorManager,
    DumpConfigInput,
    ElementName,
    HandleDirectiveInput,
    TextStyle,
    create_color_manager,
    run,
    run_apply,
    run_dump,
    run_handle,
)


@pytest.fixture
def manager() -> ColorManager:
    return create_color_manager()


# --- Handle Tests ---


class TestRunHandle:
    """Test directive handling through the component."""

    def test_handle_success(self, manager: ColorManager) -> None:
        """Returns the stored element and style."""
        inp = HandleDirectiveInput(
            action="color",
            params=("listnormal_unread", "red", "default", "bold"),
        )
        result = run_handle(inp, manager=manager)

        assert result.success is True
        assert result.element is ElementName.LISTNORMAL_UNREAD
        assert result.style == TextStyle("red", "default", ("bold",))
        assert result.errors == []

    def test_handle_invalid_color(self, manager: ColorManager) -> None:
        """Invalid color is reported as a validation error."""
        inp = HandleDirectiveInput(action="color", params=("info", "orange", "default"))
        result = run_handle(inp, manager=manager)

        assert result.success is False
        assert result.element is None
        assert result.style is None
        assert len(result.errors) == 1
        assert result.errors[0].code == "invalid_color"
        assert result.errors[0].field == "orange"
        assert result.errors[0].message == "`orange' is not a valid color"

    def test_handle_invalid_attribute(self, manager: ColorManager) -> None:
        inp = HandleDirectiveInput(action="color", params=("info", "red", "default", "shiny"))
        result = run_handle(inp, manager=manager)

        assert result.success is False
        assert result.errors[0].code == "invalid_attribute"
        assert result.errors[0].field == "shiny"

    def test_handle_unsupported_element(self, manager: ColorManager) -> None:
        inp = HandleDirectiveInput(action="color", params=("sidebar", "red", "default"))
        result = run_handle(inp, manager=manager)

        assert result.success is False
        assert result.errors[0].code == "unsupported_element"
        assert result.errors[0].field == "sidebar"

    def test_handle_too_few_params(self, manager: ColorManager) -> None:
        """Error without a token uses the directive placeholder field."""
        inp = HandleDirectiveInput(action="color", params=("info", "red"))
        result = run_handle(inp, manager=manager)

        assert result.success is False
        assert result.errors[0].code == "too_few_params"
        assert result.errors[0].field == "_directive"

    def test_handle_unknown_command(self, manager: ColorManager) -> None:
        inp = HandleDirectiveInput(action="highlight", params=("all", "red", "default"))
        result = run_handle(inp, manager=manager)

        assert result.success is False
        assert result.errors[0].code == "unknown_command"

    def test_failed_handle_does_not_store(self, manager: ColorManager) -> None:
        run_handle(
            HandleDirectiveInput(action="color", params=("info", "red", "nope")),
            manager=manager,
        )
        assert run_dump(DumpConfigInput(), manager=manager).lines == []


# --- Dump / Apply Tests ---


class TestRunDumpAndApply:
    """Test serialization and export entry points."""

    def test_dump(self, manager: ColorManager) -> None:
        run_handle(
            HandleDirectiveInput(action="color", params=("title", "red", "default", "bold")),
            manager=manager,
        )
        result = run_dump(DumpConfigInput(), manager=manager)

        assert result.lines == ["color title red default bold"]

    def test_apply_returns_values(self, manager: ColorManager) -> None:
        """Apply without a sink returns the pairs."""
        run_handle(
            HandleDirectiveInput(action="color", params=("info", "green", "default")),
            manager=manager,
        )
        result = run_apply(ApplyColorsInput(), manager=manager)

        assert result.values == [("info", "fg=green"), ("title", "fg=green")]

    def test_apply_pushes_to_sink(self, manager: ColorManager) -> None:
        """Sink receives the same pairs that are returned."""
        run_handle(
            HandleDirectiveInput(action="color", params=("article", "white", "black")),
            manager=manager,
        )
        received: list[tuple[str, str]] = []

        result = run_apply(
            ApplyColorsInput(),
            manager=manager,
            set_value=lambda key, value: received.append((key, value)),
        )

        assert received == result.values
        assert received == [
            ("article", "fg=white,bg=black"),
            ("color_bold", "fg=white,bg=black,attr=bold"),
            ("color_underline", "fg=white,bg=black,attr=underline"),
        ]


# --- Dispatch Tests ---


class TestRun:
    """Test the main dispatching entry point."""

    def test_dispatches_by_input_type(self, manager: ColorManager) -> None:
        handled = run(
            HandleDirectiveInput(action="color", params=("background", "default", "blue")),
            manager=manager,
        )
        dumped = run(DumpConfigInput(), manager=manager)
        applied = run(ApplyColorsInput(), manager=manager)

        assert handled.success is True  # type: ignore[union-attr]
        assert dumped.lines == ["color background default blue"]  # type: ignore[union-attr]
        assert applied.values == [("background", "bg=blue")]  # type: ignore[union-attr]

    def test_unknown_input_type(self, manager: ColorManager) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(object(), manager=manager)  # type: ignore[arg-type]
