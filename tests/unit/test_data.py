"""Consistency checks of the reference data that comes with `shred`."""

from collections import defaultdict
from typing import Dict, Set

import pytest

from shred.identifier import AtomIdentifier
from shred.nuclide import DecayMode
from shred.settings import MAX_ATOMIC_NUMBER_WITH_STANDARD_MASS


def test_atomic_numbers(atom_identifier: AtomIdentifier):
    assert list(atom_identifier) == list(range(1, 119))
    for atomic_number, element in atom_identifier.items():
        assert element.atomic_number == atomic_number


def test_symbols_and_names(atom_identifier: AtomIdentifier):
    symbols = atom_identifier.elements.symbols
    names = atom_identifier.elements.names
    assert len(set(symbols)) == len(symbols)
    assert len(set(names)) == len(names)
    assert all(isinstance(symbol, str) for symbol in symbols)
    assert atom_identifier.get_symbol(102) == "No"
    for element in atom_identifier.values():
        assert element.english_name == element.name.lower()


def test_standard_atomic_masses(atom_identifier: AtomIdentifier):
    for atomic_number, element in atom_identifier.items():
        if atomic_number <= MAX_ATOMIC_NUMBER_WITH_STANDARD_MASS:
            assert element.standard_atomic_mass is not None
            assert element.standard_atomic_mass > atomic_number
        else:
            assert element.standard_atomic_mass is None


def test_isotopes(atom_identifier: AtomIdentifier):
    for element in atom_identifier.values():
        for isotope in element.isotopes:
            assert 0 <= isotope.abundance <= 1
            assert isotope.atomic_mass == pytest.approx(
                isotope.mass_number, abs=1
            )


def test_stable_isotopes_are_catalogued(atom_identifier: AtomIdentifier):
    for atomic_number, element in atom_identifier.items():
        if atomic_number > 82:
            assert not element.stable_neutrons
            continue
        assert element.stable_neutrons or atomic_number in {43, 61}
        for neutrons in element.stable_neutrons:
            assert element.get_isotope(atomic_number + neutrons) is not None


def test_unstable_isotopes_have_half_lives(atom_identifier: AtomIdentifier):
    for atomic_number, element in atom_identifier.items():
        for counts in atom_identifier.get_all_isotopes_of_element(
            atomic_number
        ):
            if atom_identifier.is_stable(counts.protons, counts.neutrons):
                assert (counts.protons, counts.neutrons) not in (
                    atom_identifier.half_lives
                )
            else:
                assert (
                    counts.protons,
                    counts.neutrons,
                ) in atom_identifier.half_lives, element.symbol


def test_heavy_elements_exist(atom_identifier: AtomIdentifier):
    for atomic_number in range(84, 119):
        neutrons = atom_identifier.get_num_neutrons_in_most_common_isotope(
            atomic_number
        )
        assert atom_identifier.does_exist(atomic_number, neutrons)


def test_isotope_chains_are_complete(atom_identifier: AtomIdentifier):
    neutrons_per_element: Dict[int, Set[int]] = defaultdict(set)
    for nuclide in atom_identifier.half_lives:
        neutrons_per_element[nuclide.protons].add(nuclide.neutrons)
    for atomic_number, element in atom_identifier.items():
        radioactive = neutrons_per_element[atomic_number]
        assert radioactive, element.symbol
        neutron_numbers = radioactive | element.stable_neutrons
        for isotope in element.isotopes:
            assert isotope.mass_number - atomic_number in neutron_numbers
        if 10 < atomic_number <= 101:
            assert len(neutron_numbers) >= 15, element.symbol
            assert neutron_numbers == set(
                range(min(neutron_numbers), max(neutron_numbers) + 1)
            ), element.symbol


@pytest.mark.parametrize(
    ("protons", "neutrons"),
    [
        (11, 11),  # Na-22
        (15, 17),  # P-32
        (21, 25),  # Sc-46
        (26, 33),  # Fe-59
        (27, 33),  # Co-60
        (38, 51),  # Sr-89
        (43, 56),  # Tc-99
        (53, 78),  # I-131
        (55, 79),  # Cs-134
        (94, 145),  # Pu-239
    ],
)
def test_common_radioisotopes(
    atom_identifier: AtomIdentifier, protons: int, neutrons: int
):
    assert atom_identifier.does_exist(protons, neutrons)
    assert not atom_identifier.is_stable(protons, neutrons)
    assert atom_identifier.get_nuclide_half_life(protons, neutrons) > 0


def test_half_lives(atom_identifier: AtomIdentifier):
    for half_life in atom_identifier.half_lives.values():
        assert half_life is None or half_life > 0


def test_decay_modes(atom_identifier: AtomIdentifier):
    for nuclide, modes in atom_identifier.decay_modes.items():
        if DecayMode.STABLE in modes:
            assert modes == (DecayMode.STABLE,)
            assert atom_identifier.is_stable(
                nuclide.protons, nuclide.neutrons
            )
        else:
            assert nuclide in atom_identifier.half_lives
            assert not atom_identifier.is_stable(
                nuclide.protons, nuclide.neutrons
            )
