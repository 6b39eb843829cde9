"""Look up element and nuclide properties by proton and neutron count.

The `AtomIdentifier` answers questions like "which element has 6 protons",
"is a nucleus with 6 protons and 8 neutrons stable" or "how abundant is
carbon-13". It is a read-only mapping from atomic number to `.Element`
together with a `.HalfLifeTable` and a `.DecayModeTable`.

The reference data that comes with `shred` is loaded once by
`get_default_identifier`. The module-level functions in this module are
shortcuts to the methods of that default instance:

>>> from shred import identifier
>>> identifier.get_symbol(6)
'C'
>>> identifier.is_stable(6, 8)
False
>>> identifier.does_exist(6, 8)
True
"""

import logging
from collections import abc
from functools import lru_cache
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from shred import io
from shred.errors import NotFoundError, OutOfRangeError
from shred.nuclide import (
    DecayMode,
    DecayModeTable,
    Element,
    ElementCollection,
    HalfLifeTable,
    Isotope,
    Nuclide,
    ParticleCounts,
    as_nuclide,
)
from shred.settings import (
    DECAY_MODES_DEFINITION_PATH,
    ELEMENTS_DEFINITION_PATH,
    HALF_LIVES_DEFINITION_PATH,
    MAX_ATOMIC_NUMBER,
)


class AtomIdentifier(abc.Mapping):
    """Query interface to the element and nuclide reference tables.

    Functions that take an :code:`isotope` argument accept a `.Nuclide`, a
    :code:`(protons, neutrons)` tuple, or any atom with a
    :code:`proton_count` and a :code:`neutron_count` (see `.as_nuclide`).
    """

    def __init__(
        self,
        elements: Union[ElementCollection, Iterable[Element]],
        half_lives: Optional[HalfLifeTable] = None,
        decay_modes: Optional[DecayModeTable] = None,
    ) -> None:
        if not isinstance(elements, ElementCollection):
            elements = ElementCollection(elements)
        if half_lives is None:
            half_lives = HalfLifeTable()
        if decay_modes is None:
            decay_modes = DecayModeTable()
        self.__elements = elements
        self.__half_lives = half_lives
        self.__decay_modes = decay_modes
        for atomic_number in self.__elements:
            if not 1 <= atomic_number <= MAX_ATOMIC_NUMBER:
                raise OutOfRangeError(
                    f"Element with atomic number {atomic_number} does not "
                    "fit in the periodic table"
                )

    def __getitem__(self, atomic_number: int) -> Element:
        return self.__elements[atomic_number]

    def __iter__(self) -> Iterator[int]:
        return iter(self.__elements)

    def __len__(self) -> int:
        return len(self.__elements)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"{len(self.__elements)} elements, "
            f"{len(self.__half_lives)} half-lives, "
            f"{len(self.__decay_modes)} decay modes)"
        )

    @property
    def elements(self) -> ElementCollection:
        return self.__elements

    @property
    def half_lives(self) -> HalfLifeTable:
        return self.__half_lives

    @property
    def decay_modes(self) -> DecayModeTable:
        return self.__decay_modes

    def find(self, search_term: Union[int, str]) -> Element:
        """Search for an element by atomic number, symbol or name."""
        return self.__elements.find(search_term)

    def get_symbol(self, protons: int) -> str:
        """Chemical symbol, or an empty string for zero protons."""
        element = self.__get_element(protons)
        if element is None:
            return ""
        return element.symbol

    def get_name(self, protons: int) -> str:
        """Display name, or an empty string for zero protons."""
        element = self.__get_element(protons)
        if element is None:
            return ""
        return element.name

    def get_english_name(self, protons: int) -> str:
        """Lower case English name that can be used as an identifier."""
        element = self.__get_element(protons)
        if element is None:
            return ""
        return element.english_name

    def is_stable(self, protons: int, neutrons: int) -> bool:
        if protons not in self.__elements:
            return False
        return neutrons in self.__elements[protons].stable_neutrons

    def get_num_neutrons_in_most_common_isotope(self, protons: int) -> int:
        element = self.__get_element(protons)
        if element is None:
            return 0
        return element.most_common_neutrons

    def get_standard_atomic_mass(self, protons: int) -> float:
        """Average atomic weight of an element in atomic mass units.

        Elements that have no stable or long-lived isotope have no standard
        atomic mass. For those, a `.NotFoundError` is raised.
        """
        element = self.__get_element(protons)
        if element is None:
            return 0.0
        if element.standard_atomic_mass is None:
            raise NotFoundError(
                f"{element.name} has no standard atomic mass"
            )
        return element.standard_atomic_mass

    def get_isotope_atomic_mass(self, protons: int, neutrons: int) -> float:
        """Atomic mass of an isotope in atomic mass units.

        Returns :code:`-1` if the isotope is not catalogued.
        """
        element = self.__elements.get(protons)
        if element is None:
            return -1
        isotope = element.get_isotope(protons + neutrons)
        if isotope is None:
            return -1
        return isotope.atomic_mass

    def get_natural_abundance(
        self, isotope: object, decimal_places: Optional[int] = None
    ) -> float:
        """Natural abundance of an isotope as a fraction.

        Returns :code:`0` for isotopes that are not catalogued. If
        :code:`decimal_places` is given, the abundance is rounded.
        """
        catalogued = self.__get_isotope(isotope)
        if catalogued is None:
            return 0
        if decimal_places is None:
            return catalogued.abundance
        return round(catalogued.abundance, decimal_places)

    def exists_in_trace_amounts(self, isotope: object) -> bool:
        catalogued = self.__get_isotope(isotope)
        if catalogued is None:
            return False
        return catalogued.is_trace

    def get_all_isotopes_of_element(
        self, atomic_number: int
    ) -> List[ParticleCounts]:
        """Particle counts of the neutral atoms of all catalogued isotopes.

        The isotopes are ordered by ascending mass number.
        """
        element = self.__get_element(atomic_number)
        if element is None:
            return []
        return [
            ParticleCounts(
                protons=atomic_number,
                neutrons=mass_number - atomic_number,
                electrons=atomic_number,
            )
            for mass_number in element.mass_numbers
        ]

    def get_stable_isotopes_of_element(
        self, atomic_number: int
    ) -> List[ParticleCounts]:
        return [
            counts
            for counts in self.get_all_isotopes_of_element(atomic_number)
            if self.is_stable(counts.protons, counts.neutrons)
        ]

    def get_nuclide_half_life(
        self, protons: int, neutrons: int
    ) -> Optional[float]:
        """Half-life in seconds of an unstable nuclide.

        Returns `None` if the nuclide has been observed, but its half-life
        has not been measured. Raises a `.NotFoundError` if the nuclide is
        not listed, which is also the case for stable nuclides.
        """
        return self.__half_lives[(protons, neutrons)]

    def does_exist(self, protons: int, neutrons: int) -> bool:
        """Check whether a nuclide is stable or has a known half-life entry."""
        if protons < 0 or neutrons < 0:
            return False
        if self.is_stable(protons, neutrons):
            return True
        return (protons, neutrons) in self.__half_lives

    def does_next_isotope_exist(self, protons: int, neutrons: int) -> bool:
        return self.does_exist(protons, neutrons + 1)

    def does_previous_isotope_exist(self, protons: int, neutrons: int) -> bool:
        return self.does_exist(protons, neutrons - 1)

    def does_next_isotone_exist(self, protons: int, neutrons: int) -> bool:
        return self.does_exist(protons + 1, neutrons)

    def does_previous_isotone_exist(self, protons: int, neutrons: int) -> bool:
        return self.does_exist(protons - 1, neutrons)

    def get_next_existing_isotope(
        self, protons: int, neutrons: int
    ) -> Optional[Nuclide]:
        """Next heavier isotope, looking at most two neutrons ahead."""
        for candidate in (neutrons + 1, neutrons + 2):
            if self.does_exist(protons, candidate):
                return Nuclide(protons, candidate)
        return None

    def get_next_existing_isotone(
        self, protons: int, neutrons: int
    ) -> Optional[Nuclide]:
        """Next heavier isotone, looking at most two protons ahead."""
        for candidate in (protons + 1, protons + 2):
            if self.does_exist(candidate, neutrons):
                return Nuclide(candidate, neutrons)
        return None

    def get_decay_modes(
        self, protons: int, neutrons: int
    ) -> Tuple[DecayMode, ...]:
        return self.__decay_modes[(protons, neutrons)]

    def __get_element(self, atomic_number: int) -> Optional[Element]:
        if not 0 <= atomic_number <= MAX_ATOMIC_NUMBER:
            raise OutOfRangeError(
                f"Atomic number {atomic_number} is outside the periodic "
                f"table (0 to {MAX_ATOMIC_NUMBER})"
            )
        if atomic_number == 0:
            return None
        return self.__elements[atomic_number]

    def __get_isotope(self, isotope: object) -> Optional[Isotope]:
        nuclide = as_nuclide(isotope)
        element = self.__elements.get(nuclide.protons)
        if element is None:
            return None
        return element.get_isotope(nuclide.mass_number)


def load_identifier(
    elements_file: str = ELEMENTS_DEFINITION_PATH,
    half_lives_file: str = HALF_LIVES_DEFINITION_PATH,
    decay_modes_file: str = DECAY_MODES_DEFINITION_PATH,
) -> AtomIdentifier:
    """Create an `AtomIdentifier` from element, half-life and decay files."""
    elements = io.load(elements_file)
    half_lives = io.load(half_lives_file)
    decay_modes = io.load(decay_modes_file)
    if not isinstance(elements, ElementCollection):
        raise TypeError(f"{elements_file} does not define elements")
    if not isinstance(half_lives, HalfLifeTable):
        raise TypeError(f"{half_lives_file} does not define half-lives")
    if not isinstance(decay_modes, DecayModeTable):
        raise TypeError(f"{decay_modes_file} does not define decay modes")
    logging.info(
        f"Loaded {len(elements)} elements, {len(half_lives)} half-lives and "
        f"{len(decay_modes)} decay modes"
    )
    return AtomIdentifier(elements, half_lives, decay_modes)


@lru_cache(maxsize=1)
def get_default_identifier() -> AtomIdentifier:
    """The `AtomIdentifier` for the reference data that comes with `shred`."""
    return load_identifier()


def find(search_term: Union[int, str]) -> Element:
    return get_default_identifier().find(search_term)


def get_symbol(protons: int) -> str:
    return get_default_identifier().get_symbol(protons)


def get_name(protons: int) -> str:
    return get_default_identifier().get_name(protons)


def get_english_name(protons: int) -> str:
    return get_default_identifier().get_english_name(protons)


def is_stable(protons: int, neutrons: int) -> bool:
    return get_default_identifier().is_stable(protons, neutrons)


def get_num_neutrons_in_most_common_isotope(protons: int) -> int:
    return get_default_identifier().get_num_neutrons_in_most_common_isotope(
        protons
    )


def get_standard_atomic_mass(protons: int) -> float:
    return get_default_identifier().get_standard_atomic_mass(protons)


def get_isotope_atomic_mass(protons: int, neutrons: int) -> float:
    return get_default_identifier().get_isotope_atomic_mass(protons, neutrons)


def get_natural_abundance(
    isotope: object, decimal_places: Optional[int] = None
) -> float:
    return get_default_identifier().get_natural_abundance(
        isotope, decimal_places
    )


def exists_in_trace_amounts(isotope: object) -> bool:
    return get_default_identifier().exists_in_trace_amounts(isotope)


def get_all_isotopes_of_element(atomic_number: int) -> List[ParticleCounts]:
    return get_default_identifier().get_all_isotopes_of_element(atomic_number)


def get_stable_isotopes_of_element(
    atomic_number: int,
) -> List[ParticleCounts]:
    return get_default_identifier().get_stable_isotopes_of_element(
        atomic_number
    )


def get_nuclide_half_life(protons: int, neutrons: int) -> Optional[float]:
    return get_default_identifier().get_nuclide_half_life(protons, neutrons)


def does_exist(protons: int, neutrons: int) -> bool:
    return get_default_identifier().does_exist(protons, neutrons)


def does_next_isotope_exist(protons: int, neutrons: int) -> bool:
    return get_default_identifier().does_next_isotope_exist(protons, neutrons)


def does_previous_isotope_exist(protons: int, neutrons: int) -> bool:
    return get_default_identifier().does_previous_isotope_exist(
        protons, neutrons
    )


def does_next_isotone_exist(protons: int, neutrons: int) -> bool:
    return get_default_identifier().does_next_isotone_exist(protons, neutrons)


def does_previous_isotone_exist(protons: int, neutrons: int) -> bool:
    return get_default_identifier().does_previous_isotone_exist(
        protons, neutrons
    )


def get_next_existing_isotope(
    protons: int, neutrons: int
) -> Optional[Nuclide]:
    return get_default_identifier().get_next_existing_isotope(
        protons, neutrons
    )


def get_next_existing_isotone(
    protons: int, neutrons: int
) -> Optional[Nuclide]:
    return get_default_identifier().get_next_existing_isotone(
        protons, neutrons
    )


def get_decay_modes(protons: int, neutrons: int) -> Tuple[DecayMode, ...]:
    return get_default_identifier().get_decay_modes(protons, neutrons)
