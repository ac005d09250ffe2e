import logging
import os
from dataclasses import dataclass
from pathlib import Path

from src.rules.loader import load_rules_or_default
from src.rules.models import ColorRules

LOG_LEVEL_ENV = "COLORS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ShellConfig:
    """Settings for the command-line shell."""

    rules: ColorRules
    log_level: int


def parse_log_level(name: str | None) -> int:
    """
    Map a level name such as "debug" to its logging constant.
    Raises ValueError for unknown names.
    """
    level_name = (name or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def load_shell_config(
    rules_path: Path | str | None = None,
    log_level: str | None = None,
) -> ShellConfig:
    """
    Build shell settings from arguments, falling back to the environment.
    """
    level = parse_log_level(log_level or os.environ.get(LOG_LEVEL_ENV))
    rules = load_rules_or_default(rules_path)
    return ShellConfig(rules=rules, log_level=level)
