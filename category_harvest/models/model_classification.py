"""Classification rule and result models."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# === Enums ===


class FieldSelector(str, Enum):
    """Which package field a rule inspects."""

    NAME = "pkgname"
    SHORT_DESC = "short_desc"
    HOMEPAGE = "homepage"
    MAINTAINER = "maintainer"
    DEPENDS = "dependencies"
    PATH = "template path"
    TEMPLATE_CATEGORY = "template category"

    @property
    def label(self) -> str:
        """Human-readable field name used in reason strings."""
        return self.value


# === Taxonomy Dataclasses ===


@dataclass(frozen=True)
class Rule:
    """A weighted substring heuristic on one package field."""

    field: FieldSelector
    pattern: str
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"Rule weight must be positive: {self.pattern!r} ({self.weight})")
        if not self.pattern:
            raise ValueError("Rule pattern must not be empty")

    def describe(self) -> str:
        return f"{self.field.label} contains '{self.pattern}'"


@dataclass(frozen=True)
class CategorySpec:
    """A category with its ordered rules and minimum candidate score."""

    name: str
    rules: tuple[Rule, ...]
    floor: float
    description: str = ""

    @property
    def is_fallback(self) -> bool:
        return not self.rules and self.floor == 0.0


# === Pydantic Models (for serialization/validation) ===


class RankedCategory(BaseModel):
    """A candidate category with its accumulated score."""

    category: str
    score: float = Field(ge=0.0)
    reasons: list[str] = Field(default_factory=list)


class PackageSuggestion(BaseModel):
    """Final classification for one package.

    ``score`` is ``inf`` when the category was forced by an override.
    """

    model_config = ConfigDict(frozen=True)

    pkgname: str
    category: str
    score: float = Field(ge=0.0)
    override_applied: bool = False
    reasons: list[str] = Field(default_factory=list)
    alternatives: list[RankedCategory] = Field(default_factory=list, max_length=4)
    short_desc: str | None = None
    homepage: str | None = None
    template_path: str = ""


class OverrideCategory(BaseModel):
    """One category section of the override file."""

    packages: list[str] = Field(default_factory=list)
