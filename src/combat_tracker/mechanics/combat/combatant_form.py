"""Validation of raw add/edit combatant form input."""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pydantic import ValidationError

from combat_tracker.api.schemas.combat import FixedCombatantSchema, RollCombatantSchema
from combat_tracker.models.combat.enums import InitiativeKind
from combat_tracker.models.combat.persistence import Combatant

NUMERIC_FIELDS = ("initiative_value", "hp", "max_hp")


@dataclass
class CombatantForm:
    """Raw text as typed into the combatant form."""
    name: str = ""
    initiative_kind: str = InitiativeKind.FIXED.value
    initiative_value: str = "0"
    hp: str = "0"
    max_hp: str = "0"

    @classmethod
    def from_combatant(cls, combatant: Combatant) -> 'CombatantForm':
        """Pre-fill the form for editing an existing combatant."""
        return cls(
            name=combatant.name,
            initiative_kind=combatant.initiative_kind.value,
            initiative_value=str(combatant.initiative_value),
            hp=str(combatant.hp),
            max_hp=str(combatant.max_hp),
        )


def _parse_int(text: str) -> int:
    stripped = text.strip()
    if not stripped:
        return 0
    return int(stripped)


def validate_combatant_form(
    form: CombatantForm,
    combatant_id: str,
) -> Tuple[Optional[Combatant], Dict[str, str]]:
    """Validate ``form`` and build a combatant with ``combatant_id``.

    Returns ``(combatant, {})`` on success or ``(None, errors)`` where
    ``errors`` maps each offending field to its first message.
    """
    errors: Dict[str, str] = {}
    values = {"id": combatant_id, "name": form.name.strip()}

    for field_name in NUMERIC_FIELDS:
        try:
            values[field_name] = _parse_int(getattr(form, field_name))
        except ValueError:
            errors[field_name] = "Must be a whole number"

    if form.initiative_kind == InitiativeKind.ROLL.value:
        schema = RollCombatantSchema
    elif form.initiative_kind == InitiativeKind.FIXED.value:
        schema = FixedCombatantSchema
    else:
        errors["initiative_kind"] = "Must be 'fixed' or 'roll'"
        return None, errors

    values["initiative_kind"] = form.initiative_kind

    try:
        validated = schema.model_validate(values)
    except ValidationError as e:
        for item in e.errors():
            field_name = str(item["loc"][0]) if item["loc"] else "form"
            # numeric parse errors take precedence over schema messages
            errors.setdefault(field_name, item["msg"])
        return None, errors

    if errors:
        return None, errors
    return validated.to_model(), errors
