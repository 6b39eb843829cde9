"""Immutable data containers for elements, isotopes and nuclides.

The containers in this module are the building blocks of the reference
tables that the `.AtomIdentifier` queries. They are plain `attr.s` classes
that are frozen after construction, so that tables loaded from disk can be
shared safely.
"""

import logging
from collections import abc
from difflib import get_close_matches
from enum import Enum
from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

import attr
from attr.validators import instance_of
from particle import PDGID

from shred.errors import NotFoundError
from shred.settings import TRACE_ABUNDANCE


class ParticleCounts(NamedTuple):
    """Numbers of protons, neutrons and electrons of a neutral atom."""

    protons: int
    neutrons: int
    electrons: int


class DecayMode(Enum):
    """Decay mode labels of the nuclide chart."""

    STABLE = "stable"
    ALPHA = "a"
    BETA_MINUS = "b-"
    BETA_PLUS = "b+"
    ELECTRON_CAPTURE = "ec"
    NEUTRON_EMISSION = "n"
    PROTON_EMISSION = "p"
    BETA_MINUS_NEUTRON = "b- n"
    BETA_MINUS_TWO_NEUTRONS = "b- 2n"
    BETA_MINUS_THREE_NEUTRONS = "b- 3n"
    BETA_MINUS_FOUR_NEUTRONS = "b- 4n"
    BETA_MINUS_ALPHA = "b- a"
    BETA_PLUS_PROTON = "b+ p"
    BETA_PLUS_ALPHA = "b+ a"
    ELECTRON_CAPTURE_BETA_PLUS = "ec b+"
    ELECTRON_CAPTURE_PROTON = "ec p"
    ELECTRON_CAPTURE_ALPHA = "ec a"


def _to_abundance(value: Union[float, str]) -> float:
    if isinstance(value, str):
        if value != "trace":
            raise ValueError(f'Unknown abundance label "{value}"')
        return TRACE_ABUNDANCE
    return float(value)


def _check_non_negative(  # pylint: disable=unused-argument
    instance: object, attribute: attr.Attribute, value: int
) -> None:
    if value < 0:
        raise ValueError(
            f"{attribute.name} has to be zero or positive, not {value}"
        )


@attr.s(frozen=True, kw_only=True)
class Isotope:
    """Catalogued isotope of an element.

    The `abundance` is the natural abundance as a fraction. The label
    :code:`"trace"` is converted to `.TRACE_ABUNDANCE`.
    """

    mass_number: int = attr.ib(validator=instance_of(int))
    atomic_mass: float = attr.ib(converter=float)
    abundance: float = attr.ib(converter=_to_abundance)

    @property
    def is_trace(self) -> bool:
        return self.abundance == TRACE_ABUNDANCE


def _to_isotopes(isotopes: Iterable[Isotope]) -> Tuple[Isotope, ...]:
    return tuple(sorted(isotopes, key=lambda i: i.mass_number))


@attr.s(frozen=True, kw_only=True)
class Element:  # pylint: disable=too-many-instance-attributes
    """Reference data of one element of the periodic table."""

    atomic_number: int = attr.ib(validator=instance_of(int))
    symbol: str = attr.ib(validator=instance_of(str))
    name: str = attr.ib(validator=instance_of(str))
    english_name: str = attr.ib(validator=instance_of(str))
    most_common_neutrons: int = attr.ib(validator=instance_of(int))
    stable_neutrons: FrozenSet[int] = attr.ib(
        converter=frozenset, factory=frozenset
    )
    isotopes: Tuple[Isotope, ...] = attr.ib(
        converter=_to_isotopes, factory=tuple
    )
    standard_atomic_mass: Optional[float] = attr.ib(
        converter=attr.converters.optional(float), default=None
    )

    @isotopes.validator
    def __check_mass_numbers(  # type: ignore  # pylint: disable=unused-argument
        self, _: attr.Attribute, value: Tuple[Isotope, ...]
    ) -> None:
        mass_numbers = [isotope.mass_number for isotope in value]
        if len(set(mass_numbers)) != len(mass_numbers):
            raise ValueError(
                f"Element {self.symbol} has duplicate isotopes: {mass_numbers}"
            )
        for mass_number in mass_numbers:
            if mass_number < self.atomic_number:
                raise ValueError(
                    f"Isotope {self.symbol}-{mass_number} has fewer nucleons "
                    f"than protons"
                )

    def get_isotope(self, mass_number: int) -> Optional[Isotope]:
        for isotope in self.isotopes:
            if isotope.mass_number == mass_number:
                return isotope
        return None

    @property
    def mass_numbers(self) -> Tuple[int, ...]:
        return tuple(isotope.mass_number for isotope in self.isotopes)


@attr.s(frozen=True, order=True)
class Nuclide:
    """A nucleus species, defined by its numbers of protons and neutrons."""

    protons: int = attr.ib(
        validator=[instance_of(int), _check_non_negative]
    )
    neutrons: int = attr.ib(
        validator=[instance_of(int), _check_non_negative]
    )

    @classmethod
    def from_mass_number(cls, protons: int, mass_number: int) -> "Nuclide":
        return cls(protons, mass_number - protons)

    @property
    def mass_number(self) -> int:
        return self.protons + self.neutrons

    @property
    def pdgid(self) -> PDGID:
        """Monte Carlo particle code of this nuclide.

        Nuclei are coded as :code:`10LZZZAAAI` (see the `PDG review
        <https://pdg.lbl.gov/2020/reviews/rpp2020-rev-monte-carlo-numbering.pdf>`_),
        except for the free neutron and the hydrogen-1 nucleus, which are
        identified by their particle codes.
        """
        if (self.protons, self.neutrons) == (0, 1):
            return PDGID(2112)
        if (self.protons, self.neutrons) == (1, 0):
            return PDGID(2212)
        return PDGID(1000000000 + 10000 * self.protons + 10 * self.mass_number)


def as_nuclide(instance: object) -> Nuclide:
    """Convert a `Nuclide`, a :code:`(protons, neutrons)` pair or an atom.

    `ParticleCounts` are converted by dropping the electrons. Atoms are any
    other objects with a :code:`proton_count` and a :code:`neutron_count`,
    such as a `.NumberAtom` or a `.ParticleAtom`.
    """
    if isinstance(instance, Nuclide):
        return instance
    if isinstance(instance, ParticleCounts):
        return Nuclide(instance.protons, instance.neutrons)
    if isinstance(instance, tuple) and len(instance) == 2:
        return Nuclide(*instance)
    if hasattr(instance, "proton_count") and hasattr(
        instance, "neutron_count"
    ):
        return Nuclide(
            int(instance.proton_count),  # type: ignore
            int(instance.neutron_count),  # type: ignore
        )
    raise TypeError(
        f"Cannot interpret a {instance.__class__.__name__} as a nuclide"
    )


class ElementCollection(abc.Mapping):
    """Searchable, read-only collection of `Element` instances.

    Elements are keyed by their atomic number and iterated in ascending order.
    """

    def __init__(self, elements: Optional[Iterable[Element]] = None) -> None:
        self.__elements: Dict[int, Element] = dict()
        if elements is not None:
            for element in elements:
                self.__add(element)
            self.__elements = dict(sorted(self.__elements.items()))

    def __add(self, element: Element) -> None:
        if not isinstance(element, Element):
            raise TypeError(
                f"Cannot add a {element.__class__.__name__} to an "
                f"{self.__class__.__name__}"
            )
        if element.atomic_number in self.__elements:
            logging.warning(
                f"Overwriting element with atomic number {element.atomic_number}"
                f' ("{self.__elements[element.atomic_number].name}")'
            )
        self.__elements[element.atomic_number] = element

    def __getitem__(self, atomic_number: int) -> Element:
        if atomic_number not in self.__elements:
            raise NotFoundError(
                f"No element with atomic number {atomic_number}"
            )
        return self.__elements[atomic_number]

    def __iter__(self) -> Iterator[int]:
        return iter(self.__elements)

    def __len__(self) -> int:
        return len(self.__elements)

    def __repr__(self) -> str:
        symbols = ", ".join(e.symbol for e in self.values())
        return f"{self.__class__.__name__}({symbols})"

    def find(self, search_term: Union[int, str]) -> Element:
        """Search for an element by atomic number, symbol or name."""
        if isinstance(search_term, bool):
            raise TypeError("Cannot search for a boolean")
        if isinstance(search_term, int):
            return self[search_term]
        if isinstance(search_term, str):
            for element in self.values():
                if search_term == element.symbol:
                    return element
            for element in self.values():
                if search_term.lower() in (
                    element.name.lower(),
                    element.english_name,
                ):
                    return element
            error_message = f'No element with symbol or name "{search_term}"'
            candidates = get_close_matches(
                search_term, self.symbols + self.names, n=5
            )
            if len(candidates) == 1:
                error_message += f". Did you mean '{candidates[0]}'?"
            elif len(candidates) > 1:
                error_message += f". Did you mean one of these? {candidates}"
            raise NotFoundError(error_message)
        raise NotImplementedError(
            f"Cannot search for a search term of type {type(search_term)}"
        )

    @property
    def names(self) -> List[str]:
        return [element.name for element in self.values()]

    @property
    def symbols(self) -> List[str]:
        return [element.symbol for element in self.values()]


class NuclideTable(abc.Mapping):
    """Read-only mapping of `Nuclide` instances to reference values.

    Keys can be given as anything that `as_nuclide` understands. Iteration
    runs over the nuclides sorted by proton and then by neutron number.
    """

    def __init__(
        self,
        entries: Optional[
            Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]
        ] = None,
    ) -> None:
        self.__entries: Dict[Nuclide, Any] = dict()
        if entries is None:
            return
        if isinstance(entries, abc.Mapping):
            entries = entries.items()
        for key, value in entries:
            nuclide = as_nuclide(key)
            if nuclide in self.__entries:
                logging.warning(
                    f"{self.__class__.__name__} has multiple entries for "
                    f"{nuclide}, keeping the last one"
                )
            self.__entries[nuclide] = self._convert(value)
        self.__entries = dict(sorted(self.__entries.items()))

    @staticmethod
    def _convert(value: Any) -> Any:
        return value

    def __getitem__(self, nuclide: object) -> Any:
        key = as_nuclide(nuclide)
        if key not in self.__entries:
            raise NotFoundError(
                f"{self.__class__.__name__} has no entry for "
                f"{key.protons} protons and {key.neutrons} neutrons"
            )
        return self.__entries[key]

    def __iter__(self) -> Iterator[Nuclide]:
        return iter(self.__entries)

    def __len__(self) -> int:
        return len(self.__entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} nuclides)"

    @property
    def proton_numbers(self) -> FrozenSet[int]:
        return frozenset(nuclide.protons for nuclide in self.__entries)


class HalfLifeTable(NuclideTable):
    """Half-lives in seconds, `None` for unmeasured half-lives."""

    @staticmethod
    def _convert(value: Any) -> Optional[float]:
        if value is None:
            return None
        half_life = float(value)
        if half_life <= 0.0:
            raise ValueError(f"Half-life has to be positive, not {half_life}")
        return half_life


class DecayModeTable(NuclideTable):
    """Decay modes of the nuclides of the nuclide chart."""

    @staticmethod
    def _convert(value: Any) -> Tuple[DecayMode, ...]:
        modes = tuple(DecayMode(mode) for mode in value)
        if not modes:
            raise ValueError("A nuclide needs at least one decay mode")
        return modes
