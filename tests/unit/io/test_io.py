import json

import pytest
import yaml
from jsonschema import ValidationError

from shred import io
from shred.identifier import AtomIdentifier
from shred.nuclide import (
    DecayModeTable,
    Element,
    ElementCollection,
    HalfLifeTable,
    Isotope,
)


def through_dict(instance):
    asdict = io.asdict(instance)
    asdict = json.loads(json.dumps(asdict))  # check JSON serialization
    return io.fromdict(asdict)


def test_asdict_fromdict(atom_identifier: AtomIdentifier):
    # ElementCollection
    elements = atom_identifier.elements
    fromdict = through_dict(elements)
    assert isinstance(fromdict, ElementCollection)
    assert fromdict == elements
    # Element
    for element in elements.values():
        fromdict = through_dict(element)
        assert isinstance(fromdict, Element)
        assert fromdict == element
    # Isotope
    for isotope in elements[6].isotopes:
        fromdict = through_dict(isotope)
        assert isinstance(fromdict, Isotope)
        assert fromdict == isotope
    # HalfLifeTable
    fromdict = through_dict(atom_identifier.half_lives)
    assert isinstance(fromdict, HalfLifeTable)
    assert fromdict == atom_identifier.half_lives
    # DecayModeTable
    fromdict = through_dict(atom_identifier.decay_modes)
    assert isinstance(fromdict, DecayModeTable)
    assert fromdict == atom_identifier.decay_modes


def test_asdict(atom_identifier: AtomIdentifier):
    hydrogen = io.asdict(atom_identifier[1])
    assert hydrogen["symbol"] == "H"
    assert hydrogen["stable_neutrons"] == [0, 1]
    assert hydrogen["isotopes"][2] == {
        "mass_number": 3,
        "atomic_mass": 3.0160492777,
        "abundance": "trace",
    }
    oganesson = io.asdict(atom_identifier[118])
    assert "standard_atomic_mass" not in oganesson
    assert oganesson["isotopes"] == []
    half_lives = io.asdict(atom_identifier.half_lives)["half_lives"]
    assert half_lives[0] == {"protons": 0, "neutrons": 1, "half_life": 613.9}
    decay_modes = io.asdict(atom_identifier.decay_modes)["decay_modes"]
    assert decay_modes[0] == {"protons": 0, "neutrons": 1, "modes": ["b-"]}


def test_fromdict_exceptions():
    with pytest.raises(NotImplementedError):
        io.fromdict({"non-sense": 1})
    with pytest.raises(NotImplementedError):
        io.asdict(666)


@pytest.mark.parametrize(
    "definition",
    [
        {"elements": [{"atomic_number": 1, "symbol": "H"}]},
        {"half_lives": [{"protons": 0, "neutrons": 1, "half_life": -1}]},
        {"half_lives": [{"protons": 0, "neutrons": 1}]},
        {"decay_modes": [{"protons": 0, "neutrons": 1, "modes": ["x"]}]},
        {"decay_modes": [{"protons": 0, "neutrons": 1, "modes": []}]},
    ],
)
def test_validation(definition: dict):
    with pytest.raises(ValidationError):
        io.fromdict(definition)


def test_not_implemented_errors(
    output_dir: str, atom_identifier: AtomIdentifier
):
    elements = atom_identifier.elements
    with pytest.raises(NotImplementedError):
        io.load(__file__)
    with pytest.raises(NotImplementedError):
        io.write(elements, output_dir + "test.py")
    with pytest.raises(ValueError):
        io.write(elements, output_dir + "no_file_extension")
    with pytest.raises(NotImplementedError):
        io.write(666, output_dir + "wont_work_anyway.yml")


@pytest.mark.parametrize("file_extension", ["json", "yml", "yaml"])
def test_write_load(
    output_dir: str, atom_identifier: AtomIdentifier, file_extension: str
):
    for name, instance in [
        ("elements", atom_identifier.elements),
        ("half_lives", atom_identifier.half_lives),
        ("decay_modes", atom_identifier.decay_modes),
    ]:
        filename = f"{output_dir}{name}.{file_extension}"
        io.write(instance, filename)
        imported = io.load(filename)
        assert isinstance(imported, type(instance))
        assert imported == instance


def test_yaml_layout(output_dir: str, atom_identifier: AtomIdentifier):
    filename = output_dir + "carbon.yml"
    io.write(atom_identifier.elements[6], filename)
    with open(filename) as stream:
        content = stream.read()
    assert content.startswith("atomic_number: 6\nsymbol: C\n")
    assert "isotopes:\n  - mass_number: 12\n" in content
    definition = yaml.load(content, Loader=yaml.SafeLoader)
    assert io.fromdict(definition) == atom_identifier.elements[6]
