#!/usr/bin/env python3
"""
Module: models
Created: 2026-10-18T10:12:40+01:00
Project: strain_api
Template: schemas

Value records for The Strain API payloads.

Every record is a frozen pydantic model built fresh from one response.
Field aliases follow the wire names (``desc``, ``effect``) so the models
can be validated straight from the API's JSON.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class EffectType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MEDICAL = "medical"


class Race(str, Enum):
    INDICA = "indica"
    SATIVA = "sativa"
    HYBRID = "hybrid"


# A flavor is just its name on the wire ("Earthy", "Citrus", ...)
Flavor = str


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Effect(_Record):
    """A named effect and the type it belongs to"""
    name: str = Field(..., alias="effect")
    type: EffectType


class Strain(_Record):
    """
    A full strain record from the catalog.

    The catalog endpoint keys strains by name and leaves ``name`` out of
    the value, so it defaults to an empty string until the client fills it.
    """
    name: str = ""
    id: int
    description: str = Field("", alias="desc")
    race: Race
    flavors: List[Flavor] = Field(default_factory=list)
    effects: Dict[EffectType, List[str]] = Field(default_factory=dict)

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value):
        return "" if value is None else value

    @field_validator("flavors", mode="before")
    @classmethod
    def _null_flavors(cls, value):
        return [] if value is None else value

    @field_validator("effects", mode="before")
    @classmethod
    def _null_effects(cls, value):
        return {} if value is None else value


class StrainNameResult(_Record):
    name: str
    id: int
    description: str = Field("", alias="desc")
    race: Race

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value):
        return "" if value is None else value


class StrainRaceResult(_Record):
    name: str
    id: int
    race: Race


class StrainEffectResult(_Record):
    name: str
    id: int
    race: Race
    effect_name: str = Field(..., alias="effect")


class StrainFlavorResult(_Record):
    name: str
    id: int
    race: Race
    flavor: Flavor


EffectsByType = Dict[EffectType, List[Effect]]

_effects_wire_adapter = TypeAdapter(Dict[EffectType, List[str]])


def effects_from_wire(wire: Mapping[Union[EffectType, str], List[str]]) -> EffectsByType:
    """
    Expand ``{"positive": ["Happy", ...]}`` into Effect records.

    Each name is paired with the type of the key it was listed under;
    key order and per-key name order are kept.
    """
    effects: EffectsByType = {}
    for effect_type, names in wire.items():
        effect_type = EffectType(effect_type)
        effects[effect_type] = [Effect(name=name, type=effect_type) for name in names]
    return effects


def effects_to_wire(effects: Mapping[EffectType, List[Effect]]) -> Dict[str, List[str]]:
    """Flatten Effect records back to bare names under their type's key"""
    return {
        EffectType(effect_type).value: [effect.name for effect in items]
        for effect_type, items in effects.items()
    }


def decode_effects(data: Union[str, bytes]) -> EffectsByType:
    """Parse the wire JSON for a strain's effects (raises ValidationError)"""
    return effects_from_wire(_effects_wire_adapter.validate_json(data))


def encode_effects(effects: Mapping[EffectType, List[Effect]]) -> str:
    return json.dumps(effects_to_wire(effects))


_catalog_wire_adapter = TypeAdapter(Dict[str, Dict[str, Any]])


def decode_strain_catalog(data: Union[str, bytes]) -> Dict[str, Strain]:
    """
    Parse the ``/strains/search/all`` payload, keyed by strain name.

    The key is written into each value before validation, so whatever the
    value carried under ``name`` (nothing, null, a number) is ignored.
    """
    catalog: Dict[str, Strain] = {}
    for name, fields in _catalog_wire_adapter.validate_json(data).items():
        catalog[name] = Strain.model_validate({**fields, "name": name})
    return catalog
