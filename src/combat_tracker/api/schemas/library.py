"""Pydantic schemas for template library snapshots."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from combat_tracker.models.combat.enums import InitiativeKind
from combat_tracker.models.library import Category, CreatureTemplate, LibrarySnapshot


class CategorySchema(BaseModel):
    """A library category; names may not be blank."""
    model_config = ConfigDict(strict=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)

    def to_model(self) -> Category:
        return Category(id=self.id, name=self.name)


class CreatureTemplateSchema(BaseModel):
    """A creature template.

    ``initiative_value`` has no lower bound: modifiers can be negative and the
    library does not distinguish them from fixed scores for validation.
    """
    model_config = ConfigDict(strict=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    initiative_kind: Literal["fixed", "roll"]
    initiative_value: int
    hp: int = Field(default=0, ge=0)
    category_ids: List[str] = Field(default_factory=list)

    def to_model(self) -> CreatureTemplate:
        return CreatureTemplate(
            id=self.id,
            name=self.name,
            initiative_kind=InitiativeKind(self.initiative_kind),
            initiative_value=self.initiative_value,
            hp=self.hp,
            category_ids=tuple(self.category_ids),
        )


class LibrarySnapshotSchema(BaseModel):
    """Whole-library snapshot as exported between devices."""
    model_config = ConfigDict(extra="forbid", strict=True)

    categories: List[CategorySchema] = Field(default_factory=list)
    creatures: List[CreatureTemplateSchema] = Field(default_factory=list)

    def to_model(self) -> LibrarySnapshot:
        return LibrarySnapshot(
            categories=tuple(c.to_model() for c in self.categories),
            creatures=tuple(c.to_model() for c in self.creatures),
        )
