"""
Pydantic schemas for roster units.

A roster entry on disk carries the unit's name, its points costs and a
number of rules fields (profile stats, weapons, abilities, keywords,
model counts and wargear).  The HTTP API currently exposes only
``name`` and ``points`` through ``SimpleUnit``; the remaining fields
are decoded into ``UnitRecord`` so the response can be widened later
without touching the data model.

The roster file is hand-maintained, so decoding is deliberately
forgiving: a missing or mistyped field falls back to its default and
never rejects the whole record.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

# JSON integers that fit a signed 64-bit value are accepted as points.
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _is_integer(value: Any) -> bool:
    # bool is a subclass of int but true/false are not points values
    return isinstance(value, int) and not isinstance(value, bool) and I64_MIN <= value <= I64_MAX


class Stats(BaseModel):
    """Unit profile characteristics."""

    model_config = ConfigDict(strict=True)

    movement: int
    toughness: int
    save: int
    invulnerable: int
    wounds: int
    leadership: int
    objective_control: int


class Weapon(BaseModel):
    """A single weapon profile."""

    model_config = ConfigDict(strict=True)

    name: str
    range: int
    attacks: int
    attack_dice: str
    hit: int
    strength: int
    armour_pen: int
    damage: int
    tags: Optional[List[str]] = None
    ranged: bool


class SimpleUnit(BaseModel):
    """Public view of a unit: its name and available points costs."""

    name: str = Field("", description="Unit name as stored in the roster")
    points: List[int] = Field(default_factory=list, description="Points costs, in roster order")


class UnitRecord(BaseModel):
    """Full decoded roster entry."""

    name: str = ""
    points: List[int] = Field(default_factory=list)
    stats: Optional[Stats] = None
    weapons: List[Weapon] = Field(default_factory=list)
    abilities: Dict[str, Any] = Field(default_factory=dict)
    tags: Optional[List[str]] = None
    models: Dict[str, List[StrictInt]] = Field(default_factory=dict)
    equipment: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, v):
        return v if isinstance(v, str) else ""

    @field_validator("points", mode="before")
    @classmethod
    def _integer_points(cls, v):
        if not isinstance(v, list):
            return []
        return [p for p in v if _is_integer(p)]

    @field_validator("weapons", mode="before")
    @classmethod
    def _valid_weapons(cls, v):
        if not isinstance(v, list):
            return []
        weapons = []
        for item in v:
            try:
                weapons.append(Weapon.model_validate(item))
            except ValidationError:
                continue
        return weapons

    @field_validator("abilities", mode="before")
    @classmethod
    def _abilities_mapping(cls, v):
        return v if isinstance(v, dict) else {}

    @field_validator("stats", "tags", "models", "equipment", mode="wrap")
    @classmethod
    def _default_on_error(cls, v, handler, info):
        try:
            return handler(v)
        except ValidationError:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @classmethod
    def from_raw(cls, raw: Any) -> "UnitRecord":
        """Decode one element of the roster array.

        Anything that is not a JSON object decodes to an all-default
        record.
        """
        if not isinstance(raw, dict):
            raw = {}
        return cls.model_validate(raw)

    def to_simple(self) -> SimpleUnit:
        return SimpleUnit(name=self.name, points=list(self.points))


def project_unit(raw: Any) -> SimpleUnit:
    """Decode a raw roster element straight to its public view."""
    return UnitRecord.from_raw(raw).to_simple()
