"""Loader configuration."""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .identifier import DEFAULT_NAMESPACE, Identifier

# Tier names in the order villagers unlock them.
TIER_LEVELS: Final[dict[str, int]] = {
    "novice": 1,
    "apprentice": 2,
    "journeyman": 3,
    "expert": 4,
    "master": 5,
}


class LoaderSettings(BaseModel):
    """Tunable knobs shared by the loader, the document source and the CLI."""

    default_namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace assumed for identifiers written without one.",
    )
    wandering_profession: str = Field(
        default="wandering_trader",
        description="Profession path that selects the non-leveled wandering trader.",
    )
    encoding: str = Field(default="utf-8", description="Catalog file encoding.")
    extensions: tuple[str, ...] = Field(
        default=(".json", ".yaml", ".yml"),
        description="File suffixes picked up by the directory source.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("default_namespace")
    @classmethod
    def _valid_namespace(cls, v: str) -> str:
        # Reuse identifier validation on a throwaway path.
        Identifier.parse(f"{v}:probe")
        return v

    @field_validator("extensions")
    @classmethod
    def _dotted_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("At least one extension is required")
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in v)
