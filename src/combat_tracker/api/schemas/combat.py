"""
Pydantic schemas for combat session data crossing the import boundary.

Unknown keys are rejected so malformed imports fail loudly instead of
carrying stray fields into the tracker.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from combat_tracker.models.combat.enums import InitiativeKind
from combat_tracker.models.combat.persistence.combat_session import CombatSession
from combat_tracker.models.combat.persistence.combatant import Combatant


class _CombatantSchemaBase(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    hp: int = Field(default=0, ge=0)
    max_hp: int = Field(default=0, ge=0)

    def to_model(self) -> Combatant:
        return Combatant(
            id=self.id,
            name=self.name,
            initiative_kind=InitiativeKind(self.initiative_kind),
            initiative_value=self.initiative_value,
            hp=self.hp,
            max_hp=self.max_hp,
        )


class FixedCombatantSchema(_CombatantSchemaBase):
    """Combatant whose initiative is already a final, non-negative score."""
    initiative_kind: Literal["fixed"]
    initiative_value: int = Field(default=0, ge=0)


class RollCombatantSchema(_CombatantSchemaBase):
    """Combatant whose initiative is a signed modifier awaiting a d20."""
    initiative_kind: Literal["roll"]
    initiative_value: int = 0


CombatantSchema = Annotated[
    Union[FixedCombatantSchema, RollCombatantSchema],
    Field(discriminator="initiative_kind"),
]


class CombatSessionSchema(BaseModel):
    """Complete combat session snapshot."""
    model_config = ConfigDict(extra="forbid", strict=True)

    active: bool
    round: int = Field(default=0, ge=0)
    turn_index: int = Field(default=0, ge=0)
    combatants: List[CombatantSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_turn_pointers(self) -> "CombatSessionSchema":
        if self.active:
            if self.round < 1:
                raise ValueError("an active session must be in round 1 or later")
            if not 1 <= self.turn_index <= len(self.combatants):
                raise ValueError("turn_index must point at a combatant while combat is active")
            if any(c.initiative_kind == "roll" for c in self.combatants):
                raise ValueError("all initiative must be resolved while combat is active")
        elif self.round != 0 or self.turn_index != 0:
            raise ValueError("round and turn_index must be 0 while combat is not active")
        return self

    def to_model(self) -> CombatSession:
        return CombatSession(
            active=self.active,
            round=self.round,
            turn_index=self.turn_index,
            combatants=tuple(c.to_model() for c in self.combatants),
        )
