import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import ColorRules

# Default rules file name (relative to project root)
DEFAULT_RULES_PATH = "color_rules.yaml"
RULES_PATH_ENV = "COLORS_RULES_PATH"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(rules_path: Path | str | None = None) -> Path:
    """
    Pick the rules file: explicit path, then $COLORS_RULES_PATH,
    then color_rules.yaml at the project root.
    """
    if rules_path is not None:
        return Path(rules_path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def _extract_yaml_block(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole text if there is none."""
    lines = content.splitlines()
    start = next(
        (i for i, line in enumerate(lines) if line.strip().startswith("```yaml")),
        None,
    )
    if start is None:
        return content

    block: list[str] = []
    for line in lines[start + 1 :]:
        if line.strip().startswith("```"):
            break
        block.append(line)
    return "\n".join(block)


def load_rules(path: Path) -> ColorRules:
    """
    Load and validate the palette rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml_block(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return ColorRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(rules_path: Path | str | None = None) -> ColorRules:
    """
    Load rules from the resolved path.

    An explicitly requested file must exist; the default location may be
    absent, in which case the built-in rules are used.
    """
    explicit = rules_path is not None or bool(os.environ.get(RULES_PATH_ENV))
    path = resolve_rules_path(rules_path)
    if not explicit and not path.exists():
        return ColorRules()
    return load_rules(path)
