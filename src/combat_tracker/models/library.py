"""Template library snapshot models.

The library itself lives in an external keyed record store; the tracker only
deals with snapshots of it (for export/import and for adding creatures to an
encounter).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from combat_tracker.models.combat.enums import InitiativeKind


@dataclass(frozen=True)
class Category:
    """Grouping label for creature templates."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Category':
        return cls(id=data["id"], name=data["name"])


@dataclass(frozen=True)
class CreatureTemplate:
    """Reusable blueprint that becomes a Combatant when added to combat.

    ``hp`` is the template's maximum hit points; both ``hp`` and ``max_hp``
    of the resulting combatant are seeded from it.
    """
    id: str
    name: str
    initiative_kind: InitiativeKind = InitiativeKind.FIXED
    initiative_value: int = 0
    hp: int = 0
    category_ids: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "initiative_kind": self.initiative_kind.value,
            "initiative_value": self.initiative_value,
            "hp": self.hp,
            "category_ids": list(self.category_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CreatureTemplate':
        kind = data.get("initiative_kind", InitiativeKind.FIXED)
        if not isinstance(kind, InitiativeKind):
            kind = InitiativeKind(kind)

        return cls(
            id=data["id"],
            name=data["name"],
            initiative_kind=kind,
            initiative_value=data.get("initiative_value", 0),
            hp=data.get("hp", 0),
            category_ids=tuple(data.get("category_ids", [])),
        )


@dataclass(frozen=True)
class LibrarySnapshot:
    """Point-in-time copy of the template library."""
    categories: Tuple[Category, ...] = field(default_factory=tuple)
    creatures: Tuple[CreatureTemplate, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": [category.to_dict() for category in self.categories],
            "creatures": [creature.to_dict() for creature in self.creatures],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LibrarySnapshot':
        return cls(
            categories=tuple(Category.from_dict(c) for c in data.get("categories", [])),
            creatures=tuple(CreatureTemplate.from_dict(c) for c in data.get("creatures", [])),
        )


# Standard SRD creature types seeded into a brand-new library. Ids are fixed
# so the seed is identical across installs.
DEFAULT_CATEGORIES: List[Category] = [
    Category(id="hL6Lx5RYOj_ViMtZD2oI3", name="Aberration"),
    Category(id="5Bp7ldzDgpP_OafAMj9pL", name="Beast"),
    Category(id="aWqvZp9oborYGfWKSl8Uq", name="Celestial"),
    Category(id="TcaCDBtOMx2az4FN6XCZI", name="Construct"),
    Category(id="fNTPf83CpbJUfOslXv9Dx", name="Dragon"),
    Category(id="oCoBXBAKnh3CqHQQ1P0i5", name="Elemental"),
    Category(id="2GxyUQ21MGpzXIb50xxko", name="Fey"),
    Category(id="21mAUDVaww1z9i0TK1Oz6", name="Fiend"),
    Category(id="XBzczZgZAjHXVCP3QjJ0m", name="Giant"),
    Category(id="EXWRd4hOvn7xM-yKnRQ6g", name="Humanoid"),
    Category(id="aCeiGzo6saeHjJjWe01U5", name="Monstrosity"),
    Category(id="TmUkOJWKL53ZHQRchxI90", name="Ooze"),
    Category(id="CCPdjktUPMbqrwM6x7Z1B", name="Plant"),
    Category(id="tZbowWTtyW9OA7jObqNru", name="Undead"),
]


def default_library() -> LibrarySnapshot:
    """Return the snapshot a freshly created library starts from."""
    return LibrarySnapshot(categories=tuple(DEFAULT_CATEGORIES))
