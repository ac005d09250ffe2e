from pathlib import Path

import pytest

from src.components.colors import ColorManager, create_color_manager
from src.rules.loader import load_rules
from src.rules.models import ColorRules

PROJECT_ROOT = Path(__file__).parent.parent


class RecordingSetter:
    """Style sink that remembers every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, key: str, value: str) -> None:
        self.calls.append((key, value))

    def keys(self) -> list[str]:
        return [key for key, _ in self.calls]


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "color_rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> ColorRules:
    """Rules loaded from the real project file."""
    return load_rules(rules_path)


@pytest.fixture
def manager(rules: ColorRules) -> ColorManager:
    return create_color_manager(rules)


@pytest.fixture
def setter() -> RecordingSetter:
    return RecordingSetter()
