# pylint: disable=no-self-use
import attr
import pytest

from shred import identifier
from shred.errors import NotFoundError, OutOfRangeError
from shred.identifier import AtomIdentifier, load_identifier
from shred.model import NumberAtom
from shred.nuclide import DecayMode, Nuclide, ParticleCounts


class TestAtomIdentifier:
    @staticmethod
    def test_mapping(atom_identifier: AtomIdentifier):
        assert len(atom_identifier) == 118
        assert list(atom_identifier)[:3] == [1, 2, 3]
        assert atom_identifier[6].symbol == "C"
        assert "AtomIdentifier(118 elements" in repr(atom_identifier)

    @staticmethod
    def test_load_identifier():
        loaded = load_identifier()
        assert len(loaded) == 118
        default = identifier.get_default_identifier()
        assert loaded.half_lives == default.half_lives
        assert loaded.elements == default.elements

    @staticmethod
    def test_default_identifier_is_cached():
        assert (
            identifier.get_default_identifier()
            is identifier.get_default_identifier()
        )

    @staticmethod
    def test_find(atom_identifier: AtomIdentifier):
        assert atom_identifier.find(26).symbol == "Fe"
        assert atom_identifier.find("Fe").atomic_number == 26
        assert atom_identifier.find("iron").atomic_number == 26
        assert atom_identifier.find("Iron").atomic_number == 26
        with pytest.raises(NotFoundError, match="Did you mean"):
            atom_identifier.find("Irn")

    @pytest.mark.parametrize(
        "protons, symbol, name",
        [
            (0, "", ""),
            (1, "H", "Hydrogen"),
            (6, "C", "Carbon"),
            (26, "Fe", "Iron"),
            (92, "U", "Uranium"),
            (118, "Og", "Oganesson"),
        ],
    )
    def test_symbol_and_name(
        self, atom_identifier: AtomIdentifier, protons, symbol, name
    ):
        assert atom_identifier.get_symbol(protons) == symbol
        assert atom_identifier.get_name(protons) == name
        assert atom_identifier.get_english_name(protons) == name.lower()

    @pytest.mark.parametrize("protons", [-1, 119, 1000])
    def test_out_of_range(self, atom_identifier: AtomIdentifier, protons):
        with pytest.raises(OutOfRangeError):
            atom_identifier.get_symbol(protons)
        with pytest.raises(OutOfRangeError):
            atom_identifier.get_name(protons)
        with pytest.raises(OutOfRangeError):
            atom_identifier.get_num_neutrons_in_most_common_isotope(protons)
        with pytest.raises(OutOfRangeError):
            atom_identifier.get_standard_atomic_mass(protons)

    @pytest.mark.parametrize(
        "protons, neutrons, is_stable",
        [
            (0, 0, False),
            (0, 1, False),
            (1, 0, True),
            (1, 1, True),
            (1, 2, False),
            (2, 1, True),
            (6, 6, True),
            (6, 7, True),
            (6, 8, False),
            (43, 55, False),
            (82, 126, True),
            (83, 126, False),
            (200, 300, False),
        ],
    )
    def test_is_stable(
        self, atom_identifier: AtomIdentifier, protons, neutrons, is_stable
    ):
        assert atom_identifier.is_stable(protons, neutrons) is is_stable

    @pytest.mark.parametrize(
        "protons, neutrons",
        [(0, 0), (1, 0), (2, 2), (6, 6), (7, 8), (28, 31), (31, 39)],
    )
    def test_most_common_isotope(
        self, atom_identifier: AtomIdentifier, protons, neutrons
    ):
        assert (
            atom_identifier.get_num_neutrons_in_most_common_isotope(protons)
            == neutrons
        )

    @staticmethod
    def test_standard_atomic_mass(atom_identifier: AtomIdentifier):
        assert atom_identifier.get_standard_atomic_mass(0) == 0
        assert atom_identifier.get_standard_atomic_mass(1) == 1.00794
        assert atom_identifier.get_standard_atomic_mass(6) == 12.0107
        with pytest.raises(NotFoundError, match="Polonium"):
            atom_identifier.get_standard_atomic_mass(84)

    @staticmethod
    def test_isotope_atomic_mass(atom_identifier: AtomIdentifier):
        assert atom_identifier.get_isotope_atomic_mass(
            1, 0
        ) == pytest.approx(1.00782503207)
        assert atom_identifier.get_isotope_atomic_mass(6, 6) == 12
        assert atom_identifier.get_isotope_atomic_mass(1, 5) == -1
        assert atom_identifier.get_isotope_atomic_mass(0, 1) == -1

    @staticmethod
    def test_natural_abundance(atom_identifier: AtomIdentifier):
        hydrogen = NumberAtom(1, 0, 1, identifier=atom_identifier)
        assert atom_identifier.get_natural_abundance(
            hydrogen, 6
        ) == pytest.approx(0.999885)
        assert atom_identifier.get_natural_abundance(
            Nuclide(6, 7), 4
        ) == pytest.approx(0.0107)
        assert atom_identifier.get_natural_abundance((6, 7), 1) == 0.0
        assert atom_identifier.get_natural_abundance((6, 8), 6) == 0.0
        assert atom_identifier.get_natural_abundance((6, 8)) > 0
        assert atom_identifier.get_natural_abundance((6, 20)) == 0
        with pytest.raises(TypeError):
            atom_identifier.get_natural_abundance("C-14")

    @staticmethod
    def test_exists_in_trace_amounts(atom_identifier: AtomIdentifier):
        assert atom_identifier.exists_in_trace_amounts((6, 8))
        assert atom_identifier.exists_in_trace_amounts((1, 2))
        assert not atom_identifier.exists_in_trace_amounts((6, 6))
        assert not atom_identifier.exists_in_trace_amounts((6, 20))

    @staticmethod
    def test_all_isotopes_of_element(atom_identifier: AtomIdentifier):
        isotopes = atom_identifier.get_all_isotopes_of_element(1)
        assert isotopes == [(1, 0, 1), (1, 1, 1), (1, 2, 1)]
        assert all(isinstance(i, ParticleCounts) for i in isotopes)
        assert isotopes[2].neutrons == 2
        tritium = isotopes[2]
        assert tritium in atom_identifier.half_lives
        assert atom_identifier.half_lives[tritium] == pytest.approx(3.888e8)
        assert atom_identifier.get_natural_abundance(tritium) > 0
        assert atom_identifier.get_all_isotopes_of_element(0) == []
        assert atom_identifier.get_all_isotopes_of_element(118) == []
        stable = atom_identifier.get_stable_isotopes_of_element(1)
        assert stable == [(1, 0, 1), (1, 1, 1)]
        assert atom_identifier.get_stable_isotopes_of_element(43) == []

    @staticmethod
    def test_half_life(atom_identifier: AtomIdentifier):
        assert atom_identifier.get_nuclide_half_life(0, 1) == 613.9
        assert atom_identifier.get_nuclide_half_life(
            6, 8
        ) == pytest.approx(1.7987e11)
        assert atom_identifier.get_nuclide_half_life(3, 9) is None
        with pytest.raises(NotFoundError):
            atom_identifier.get_nuclide_half_life(6, 6)
        with pytest.raises(NotFoundError):
            atom_identifier.get_nuclide_half_life(0, 100)

    @pytest.mark.parametrize(
        "protons, neutrons, exists",
        [
            (0, 1, True),
            (1, 0, True),
            (1, 1, True),
            (1, 4, True),
            (3, 9, True),
            (1, -1, False),
            (-1, 1, False),
            (0, 0, False),
            (0, 100, False),
            (6, 15, False),
        ],
    )
    def test_does_exist(
        self, atom_identifier: AtomIdentifier, protons, neutrons, exists
    ):
        assert atom_identifier.does_exist(protons, neutrons) is exists

    @staticmethod
    def test_neighbours(atom_identifier: AtomIdentifier):
        assert atom_identifier.does_next_isotope_exist(1, 0)
        assert not atom_identifier.does_previous_isotope_exist(1, 0)
        assert atom_identifier.does_next_isotone_exist(0, 1)
        assert atom_identifier.does_previous_isotone_exist(1, 1)
        assert not atom_identifier.does_next_isotope_exist(6, 14)

    @staticmethod
    def test_next_existing(atom_identifier: AtomIdentifier):
        assert atom_identifier.get_next_existing_isotope(1, 1) == Nuclide(1, 2)
        assert atom_identifier.get_next_existing_isotope(6, 14) == Nuclide(
            6, 16
        )
        assert atom_identifier.get_next_existing_isotope(6, 16) is None
        assert atom_identifier.get_next_existing_isotope(26, 32) == Nuclide(
            26, 33
        )
        assert atom_identifier.get_next_existing_isotone(20, 25) == Nuclide(
            21, 25
        )
        assert atom_identifier.get_next_existing_isotone(0, 1) == Nuclide(
            1, 1
        )
        assert atom_identifier.get_next_existing_isotone(0, 200) is None

    @staticmethod
    def test_decay_modes(atom_identifier: AtomIdentifier):
        assert atom_identifier.get_decay_modes(0, 1) == (
            DecayMode.BETA_MINUS,
        )
        assert atom_identifier.get_decay_modes(1, 0) == (DecayMode.STABLE,)
        assert atom_identifier.get_decay_modes(2, 6) == (
            DecayMode.BETA_MINUS,
            DecayMode.BETA_MINUS_NEUTRON,
        )
        with pytest.raises(NotFoundError):
            atom_identifier.get_decay_modes(50, 70)

    @staticmethod
    def test_out_of_range_elements(atom_identifier: AtomIdentifier):
        element = attr.evolve(
            atom_identifier[1], atomic_number=119, isotopes=[]
        )
        with pytest.raises(OutOfRangeError):
            AtomIdentifier([element])
        custom = AtomIdentifier([atom_identifier[1]])
        assert len(custom.half_lives) == 0
        assert custom.is_stable(1, 0)
        assert not custom.does_exist(1, 2)


class TestModuleFunctions:
    @staticmethod
    def test_shortcuts(atom_identifier: AtomIdentifier):
        assert identifier.find("C") is atom_identifier[6]
        assert identifier.get_symbol(8) == "O"
        assert identifier.get_name(8) == "Oxygen"
        assert identifier.get_english_name(8) == "oxygen"
        assert identifier.is_stable(8, 8)
        assert identifier.get_num_neutrons_in_most_common_isotope(8) == 8
        assert identifier.get_standard_atomic_mass(8) == pytest.approx(
            15.9994
        )
        assert identifier.get_isotope_atomic_mass(8, 8) == pytest.approx(
            atom_identifier.get_isotope_atomic_mass(8, 8)
        )
        assert identifier.get_natural_abundance((8, 8)) > 0.99
        assert not identifier.exists_in_trace_amounts((8, 8))
        assert len(identifier.get_all_isotopes_of_element(8)) == 3
        assert len(identifier.get_stable_isotopes_of_element(8)) == 3
        assert identifier.get_nuclide_half_life(0, 1) == 613.9
        assert identifier.does_exist(8, 8)
        assert identifier.does_next_isotope_exist(8, 8)
        assert identifier.does_previous_isotope_exist(8, 8)
        assert identifier.does_next_isotone_exist(8, 8)
        assert identifier.does_previous_isotone_exist(8, 8)
        assert identifier.get_next_existing_isotope(8, 8) == Nuclide(8, 9)
        assert identifier.get_next_existing_isotone(8, 8) == Nuclide(9, 8)
        assert identifier.get_decay_modes(8, 8) == (DecayMode.STABLE,)
