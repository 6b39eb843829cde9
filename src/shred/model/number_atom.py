"""Atom that is described only by its particle counts."""

from typing import Optional

from shred.identifier import AtomIdentifier, get_default_identifier
from shred.nuclide import Nuclide
from shred.settings import MAX_ATOMIC_NUMBER

from .observable import DerivedProperty, Emitter, Property


def _is_count(value: int) -> bool:
    return isinstance(value, int) and value >= 0


def _is_atomic_number(value: int) -> bool:
    return _is_count(value) and value <= MAX_ATOMIC_NUMBER


class NumberAtom:
    """An atom as a set of observable proton, neutron and electron counts.

    The derived properties (charge, mass number, particle count, element name
    and nucleus stability) are updated as soon as one of the counts changes.
    Element names and stability are looked up with an `.AtomIdentifier`,
    which is the default one if not specified. The proton count cannot exceed
    `.MAX_ATOMIC_NUMBER`.
    """

    def __init__(
        self,
        proton_count: int = 0,
        neutron_count: int = 0,
        electron_count: int = 0,
        identifier: Optional[AtomIdentifier] = None,
    ) -> None:
        if identifier is None:
            identifier = get_default_identifier()
        self.__identifier = identifier
        self.proton_count_property = Property(
            proton_count, _is_atomic_number
        )
        self.neutron_count_property = Property(neutron_count, _is_count)
        self.electron_count_property = Property(electron_count, _is_count)
        self.charge_property = DerivedProperty(
            [self.proton_count_property, self.electron_count_property],
            lambda protons, electrons: protons - electrons,
        )
        self.mass_number_property = DerivedProperty(
            [self.proton_count_property, self.neutron_count_property],
            lambda protons, neutrons: protons + neutrons,
        )
        self.particle_count_property = DerivedProperty(
            [
                self.proton_count_property,
                self.neutron_count_property,
                self.electron_count_property,
            ],
            lambda *counts: sum(counts),
        )
        self.element_name_property = DerivedProperty(
            [self.proton_count_property], identifier.get_name
        )
        self.nucleus_stable_property = DerivedProperty(
            [self.proton_count_property, self.neutron_count_property],
            self.__is_nucleus_stable,
        )
        self.atom_updated_emitter = Emitter()

    def __is_nucleus_stable(self, protons: int, neutrons: int) -> bool:
        if protons + neutrons == 0:
            return True
        return self.__identifier.is_stable(protons, neutrons)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"proton_count={self.proton_count}, "
            f"neutron_count={self.neutron_count}, "
            f"electron_count={self.electron_count})"
        )

    def __eq__(self, other: object) -> bool:
        try:
            return (
                self.proton_count == other.proton_count  # type: ignore
                and self.neutron_count == other.neutron_count  # type: ignore
                and self.electron_count == other.electron_count  # type: ignore
            )
        except AttributeError:
            return NotImplemented

    __hash__ = None  # type: ignore

    @property
    def identifier(self) -> AtomIdentifier:
        return self.__identifier

    @property
    def proton_count(self) -> int:
        return self.proton_count_property.value

    @property
    def neutron_count(self) -> int:
        return self.neutron_count_property.value

    @property
    def electron_count(self) -> int:
        return self.electron_count_property.value

    @property
    def charge(self) -> int:
        return self.charge_property.value

    @property
    def mass_number(self) -> int:
        return self.mass_number_property.value

    @property
    def particle_count(self) -> int:
        return self.particle_count_property.value

    @property
    def element_name(self) -> str:
        return self.element_name_property.value

    @property
    def nucleus_stable(self) -> bool:
        return self.nucleus_stable_property.value

    @property
    def nuclide(self) -> Nuclide:
        return Nuclide(self.proton_count, self.neutron_count)

    def set(self, other: "NumberAtom") -> None:
        """Copy the particle counts of another atom."""
        self.proton_count_property.set(other.proton_count)
        self.neutron_count_property.set(other.neutron_count)
        self.electron_count_property.set(other.electron_count)

    def get_isotope_atomic_mass(self) -> float:
        return self.__identifier.get_isotope_atomic_mass(
            self.proton_count, self.neutron_count
        )

    def set_sub_atomic_particle_count(
        self, protons: int, neutrons: int, electrons: int
    ) -> None:
        """Set all counts at once and fire the `atom_updated_emitter`."""
        self.proton_count_property.set(protons)
        self.electron_count_property.set(electrons)
        self.neutron_count_property.set(neutrons)
        self.atom_updated_emitter.emit()

    def dispose(self) -> None:
        """Detach the derived properties from the particle counts."""
        for derived in (
            self.charge_property,
            self.mass_number_property,
            self.particle_count_property,
            self.element_name_property,
            self.nucleus_stable_property,
        ):
            derived.dispose()
        self.atom_updated_emitter.remove_all_listeners()
