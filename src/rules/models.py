from pydantic import BaseModel, ConfigDict, Field, field_validator

SCHEMA_VERSION = 1

NAMED_COLORS = [
    "default",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
]

ATTRIBUTES = [
    "standout",
    "underline",
    "reverse",
    "blink",
    "dim",
    "bold",
    "protect",
    "invis",
    "default",
]


class ExtendedPaletteRules(BaseModel):
    enabled: bool = True
    prefix: str = Field(default="color", min_length=1)
    max_index: int = Field(default=255, ge=0, le=255)


class PaletteRules(BaseModel):
    named_colors: list[str] = Field(default_factory=lambda: list(NAMED_COLORS))
    extended: ExtendedPaletteRules = Field(default_factory=ExtendedPaletteRules)

    @field_validator("named_colors")
    @classmethod
    def _require_default(cls, v: list[str]) -> list[str]:
        # "default" is how a directive leaves a side of the style unset
        if "default" not in v:
            raise ValueError("named_colors must include 'default'")
        return v


class ColorRules(BaseModel):
    schema_version: int = SCHEMA_VERSION
    palette: PaletteRules = Field(default_factory=PaletteRules)
    attributes: list[str] = Field(default_factory=lambda: list(ATTRIBUTES))

    model_config = ConfigDict(extra="forbid")

    @field_validator("schema_version")
    @classmethod
    def _check_version(cls, v: int) -> int:
        if v != SCHEMA_VERSION:
            raise ValueError(f"expected schema_version {SCHEMA_VERSION}, got {v}")
        return v
