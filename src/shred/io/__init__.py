"""Serialization module for `shred`.

The `.io` module reads and writes the reference tables of :mod:`.nuclide`,
so that an `.AtomIdentifier` can be built from custom data files, or so that
modified tables can be stored on disk. All collection definitions are
validated against the JSON schemas that are shipped with the package.
"""

import json
from pathlib import Path

import attr
import yaml

from shred.nuclide import (
    DecayModeTable,
    Element,
    ElementCollection,
    HalfLifeTable,
    Isotope,
)

from . import _dict


def asdict(instance: object) -> dict:
    if isinstance(instance, Isotope):
        return _dict.from_isotope(instance)
    if isinstance(instance, Element):
        return _dict.from_element(instance)
    if isinstance(instance, ElementCollection):
        return _dict.from_element_collection(instance)
    if isinstance(instance, HalfLifeTable):
        return _dict.from_half_life_table(instance)
    if isinstance(instance, DecayModeTable):
        return _dict.from_decay_mode_table(instance)
    raise NotImplementedError(
        f"No conversion for dict available for class {instance.__class__.__name__}"
    )


def fromdict(definition: dict) -> object:
    keys = set(definition.keys())
    if __REQUIRED_ELEMENT_FIELDS <= keys:
        return _dict.build_element(definition)
    if keys == __ISOTOPE_FIELDS:
        return _dict.build_isotope(definition)
    if keys == {"elements"}:
        return _dict.build_element_collection(definition)
    if keys == {"half_lives"}:
        return _dict.build_half_life_table(definition)
    if keys == {"decay_modes"}:
        return _dict.build_decay_mode_table(definition)
    raise NotImplementedError(f"Could not determine type from keys {keys}")


__REQUIRED_ELEMENT_FIELDS = {
    field.name
    for field in attr.fields(Element)
    if field.default == attr.NOTHING
}
__ISOTOPE_FIELDS = {field.name for field in attr.fields(Isotope)}


def load(filename: str) -> object:
    with open(filename) as stream:
        file_extension = _get_file_extension(filename)
        if file_extension == "json":
            definition = json.load(stream)
            return fromdict(definition)
        if file_extension in ["yaml", "yml"]:
            definition = yaml.load(stream, Loader=yaml.SafeLoader)
            return fromdict(definition)
    raise NotImplementedError(
        f'No loader defined for file type "{file_extension}"'
    )


class _IncreasedIndent(yaml.Dumper):
    # pylint: disable=too-many-ancestors
    def increase_indent(self, flow=False, indentless=False):  # type: ignore
        return super().increase_indent(flow, False)


def write(instance: object, filename: str) -> None:
    file_extension = _get_file_extension(filename)
    if file_extension not in ["json", "yaml", "yml"]:
        raise NotImplementedError(
            f'No writer defined for file type "{file_extension}"'
        )
    definition = asdict(instance)
    with open(filename, "w") as stream:
        if file_extension == "json":
            json.dump(definition, stream, indent=2)
        else:
            yaml.dump(
                definition,
                stream,
                sort_keys=False,
                Dumper=_IncreasedIndent,
                default_flow_style=False,
            )


def _get_file_extension(filename: str) -> str:
    path = Path(filename)
    extension = path.suffix.lower()
    if not extension:
        raise ValueError(f"No file extension in file {filename}")
    extension = extension[1:]
    return extension
