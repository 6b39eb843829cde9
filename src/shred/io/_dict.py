"""Serialization from and to a `dict`."""

import json
from os.path import join
from typing import Any

import attr
import jsonschema

from shred.nuclide import (
    DecayModeTable,
    Element,
    ElementCollection,
    HalfLifeTable,
    Isotope,
)
from shred.settings import SCHEMA_PATH


def from_element_collection(elements: ElementCollection) -> dict:
    return {"elements": [from_element(e) for e in elements.values()]}


def from_element(element: Element) -> dict:
    return attr.asdict(
        element,
        recurse=True,
        value_serializer=__value_serializer,
        filter=lambda attr, value: attr.default != value,
    )


def from_isotope(isotope: Isotope) -> dict:
    return attr.asdict(isotope, value_serializer=__value_serializer)


def from_half_life_table(table: HalfLifeTable) -> dict:
    return {
        "half_lives": [
            {
                "protons": nuclide.protons,
                "neutrons": nuclide.neutrons,
                "half_life": half_life,
            }
            for nuclide, half_life in table.items()
        ]
    }


def from_decay_mode_table(table: DecayModeTable) -> dict:
    return {
        "decay_modes": [
            {
                "protons": nuclide.protons,
                "neutrons": nuclide.neutrons,
                "modes": [mode.value for mode in modes],
            }
            for nuclide, modes in table.items()
        ]
    }


def __value_serializer(  # pylint: disable=unused-argument
    inst: type, field: attr.Attribute, value: Any
) -> Any:
    if isinstance(value, frozenset):
        return sorted(value)
    if isinstance(inst, Isotope) and field.name == "abundance":
        if inst.is_trace:
            return "trace"
    return value


def build_element_collection(
    definition: dict, do_validate: bool = True
) -> ElementCollection:
    if do_validate:
        validate_element_collection(definition)
    return ElementCollection(
        build_element(e) for e in definition["elements"]
    )


def build_element(definition: dict) -> Element:
    definition = dict(definition)
    definition["isotopes"] = [
        build_isotope(i) for i in definition.get("isotopes", [])
    ]
    return Element(**definition)


def build_isotope(definition: dict) -> Isotope:
    return Isotope(**definition)


def build_half_life_table(
    definition: dict, do_validate: bool = True
) -> HalfLifeTable:
    if do_validate:
        validate_half_life_table(definition)
    return HalfLifeTable(
        ((item["protons"], item["neutrons"]), item["half_life"])
        for item in definition["half_lives"]
    )


def build_decay_mode_table(
    definition: dict, do_validate: bool = True
) -> DecayModeTable:
    if do_validate:
        validate_decay_mode_table(definition)
    return DecayModeTable(
        ((item["protons"], item["neutrons"]), item["modes"])
        for item in definition["decay_modes"]
    )


def validate_element_collection(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_ELEMENTS)


def validate_half_life_table(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_HALF_LIVES)


def validate_decay_mode_table(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_DECAY_MODES)


def __load_schema(filename: str) -> dict:
    with open(join(SCHEMA_PATH, filename)) as stream:
        return json.load(stream)


__SCHEMA_ELEMENTS = __load_schema("elements.json")
__SCHEMA_HALF_LIVES = __load_schema("half_lives.json")
__SCHEMA_DECAY_MODES = __load_schema("decay_modes.json")
