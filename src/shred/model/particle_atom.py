"""Atom that tracks and arranges the particles of which it consists.

Electrons are put in one of ten electron shell slots, two in the inner shell
and eight in the outer shell. The nucleons are packed around the center of
the nucleus by `ParticleAtom.reconfigure_nucleus` each time the nucleus
changes.
"""

import logging
import math
from typing import Callable, Dict, List, Optional

import numpy as np

from shred.identifier import AtomIdentifier
from shred.settings import (
    INNER_ELECTRON_SHELL_RADIUS,
    NUCLEON_RADIUS,
    NUCLEUS_SCALE_FACTOR_RANGE,
    NUCLEUS_SCALE_RADIUS_RANGE,
    NUM_INNER_ELECTRON_SLOTS,
    NUM_OUTER_ELECTRON_SLOTS,
    OUTER_ELECTRON_SHELL_RADIUS,
)

from ._container import ParticleContainer
from .observable import DerivedProperty, ObservableList
from .particle import Particle
from .vector import Vector2


def _create_electron_shell_positions(
    inner_radius: float, outer_radius: float
) -> List[Vector2]:
    positions = [Vector2(inner_radius, 0), Vector2(-inner_radius, 0)]
    angle = math.pi / NUM_OUTER_ELECTRON_SLOTS * 1.2
    for _ in range(NUM_OUTER_ELECTRON_SLOTS):
        positions.append(Vector2.from_polar(outer_radius, angle))
        angle += 2 * math.pi / NUM_OUTER_ELECTRON_SLOTS
    return positions


def _translate(particle: Particle, translation: Vector2) -> None:
    if particle.position == particle.destination:
        particle.set_position_and_destination(particle.position + translation)
    else:
        particle.destination_property.set(particle.destination + translation)


class ParticleAtom(ParticleContainer):
    """An atom made up of `.Particle` instances.

    The proton, neutron and electron counts are the lengths of the `protons`,
    `neutrons` and `electrons` lists. Moving the `position_property` moves
    all particles along. Moving the `nucleus_offset_property` only moves the
    nucleons.

    Args:
        inner_electron_shell_radius: Distance of the two inner electron slots
            to the center of the atom.
        outer_electron_shell_radius: Distance of the eight outer electron
            slots to the center of the atom.
        nucleon_radius: Radius that is used to pack the nucleons.
        electron_add_mode: Set to :code:`"proximal"` to give precedence to
            the slot that is closest to an incoming electron, or to
            :code:`"random"` to pick any open slot. In both cases, open inner
            shell slots are filled first.
        identifier: `.AtomIdentifier` for looking up atomic masses.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        inner_electron_shell_radius: float = INNER_ELECTRON_SHELL_RADIUS,
        outer_electron_shell_radius: float = OUTER_ELECTRON_SHELL_RADIUS,
        nucleon_radius: float = NUCLEON_RADIUS,
        electron_add_mode: str = "proximal",
        identifier: Optional[AtomIdentifier] = None,
    ) -> None:
        super().__init__(identifier)
        if electron_add_mode not in ("proximal", "random"):
            raise ValueError(
                f'Unknown electron add mode "{electron_add_mode}"'
            )
        self.__nucleon_radius = nucleon_radius
        self.__electron_add_mode = electron_add_mode
        self.__inner_radius = inner_electron_shell_radius
        self.__outer_radius = outer_electron_shell_radius
        self.__shell_positions = _create_electron_shell_positions(
            inner_electron_shell_radius, outer_electron_shell_radius
        )
        self.__shell_occupants: List[Optional[Particle]] = [None] * len(
            self.__shell_positions
        )
        self.electrons: ObservableList[Particle] = ObservableList()
        self.electron_count_property = self.electrons.length_property
        self.charge_property = DerivedProperty(
            [self.proton_count_property, self.electron_count_property],
            lambda protons, electrons: protons - electrons,
        )
        self.particle_count_property = DerivedProperty(
            [
                self.proton_count_property,
                self.neutron_count_property,
                self.electron_count_property,
            ],
            lambda *counts: sum(counts),
        )
        self.electrons.item_removed_emitter.add_listener(
            self.__on_electron_removed
        )
        self.position_property.lazy_link(self.__on_position_changed)
        self.nucleus_offset_property.lazy_link(
            self.__on_nucleus_offset_changed
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"protons={self.proton_count}, "
            f"neutrons={self.neutron_count}, "
            f"electrons={self.electron_count})"
        )

    @property
    def nucleon_radius(self) -> float:
        return self.__nucleon_radius

    @property
    def inner_electron_shell_radius(self) -> float:
        return self.__inner_radius

    @property
    def outer_electron_shell_radius(self) -> float:
        return self.__outer_radius

    @property
    def electron_count(self) -> int:
        return len(self.electrons)

    @property
    def charge(self) -> int:
        return self.charge_property.value

    @property
    def particle_count(self) -> int:
        return self.particle_count_property.value

    @property
    def electron_shell_positions(self) -> List[Vector2]:
        """Positions of the electron shell slots, relative to the atom."""
        return list(self.__shell_positions)

    @property
    def electron_shell_occupants(self) -> List[Optional[Particle]]:
        """The electron in each electron shell slot, `None` if it is open."""
        return list(self.__shell_occupants)

    def _particle_lists(self) -> Dict[str, ObservableList[Particle]]:
        return {
            "proton": self.protons,
            "neutron": self.neutrons,
            "electron": self.electrons,
        }

    def _place(self, particle: Particle) -> None:
        if particle.type == "electron":
            self.__place_electron(particle)
        else:
            self.reconfigure_nucleus()

    def _has_room_for(self, particle: Particle) -> bool:
        if particle.type == "electron":
            return None in self.__shell_occupants
        return True

    def _on_dragged_out(self, particle: Particle) -> None:
        if particle.type != "electron":
            self.reconfigure_nucleus()

    def __place_electron(self, electron: Particle) -> None:
        open_slots = [
            i for i, occupant in enumerate(self.__shell_occupants)
            if occupant is None
        ]
        sorted_slots = self._sort_open_slots(
            open_slots,
            self.__shell_positions,
            electron,
            self.position,
            self.__electron_add_mode,
        )
        sorted_slots.sort(key=lambda i: not self.__is_inner_slot(i))
        slot = sorted_slots[0]
        self.__shell_occupants[slot] = electron
        electron.destination_property.set(
            self.position + self.__shell_positions[slot]
        )

    def __is_inner_slot(self, slot: int) -> bool:
        return slot < NUM_INNER_ELECTRON_SLOTS

    def __on_electron_removed(self, electron: Particle) -> None:
        if electron not in self.__shell_occupants:
            return
        slot = self.__shell_occupants.index(electron)
        self.__shell_occupants[slot] = None
        if not self.__is_inner_slot(slot):
            return
        occupied_outer_slots = [
            i
            for i, occupant in enumerate(self.__shell_occupants)
            if occupant is not None and not self.__is_inner_slot(i)
        ]
        if not occupied_outer_slots:
            return
        position = self.__shell_positions[slot]
        closest = min(
            occupied_outer_slots,
            key=lambda i: self.__shell_positions[i].distance(position),
        )
        moved_electron = self.__shell_occupants[closest]
        self.__shell_occupants[slot] = moved_electron
        self.__shell_occupants[closest] = None
        moved_electron.destination_property.set(  # type: ignore
            self.position + position
        )

    def __on_position_changed(self, position: Vector2, old: Vector2) -> None:
        translation = position - old
        # electrons move along with the nucleons
        for particle in self:
            _translate(particle, translation)

    def __on_nucleus_offset_changed(
        self, offset: Vector2, old: Vector2
    ) -> None:
        translation = offset - old
        for particle in [*self.protons, *self.neutrons]:
            _translate(particle, translation)

    def dispose(self) -> None:
        super().dispose()
        self.charge_property.dispose()
        self.particle_count_property.dispose()
        if self.electrons.item_removed_emitter.has_listener(
            self.__on_electron_removed
        ):
            self.electrons.item_removed_emitter.remove_listener(
                self.__on_electron_removed
            )
        if self.position_property.has_listener(self.__on_position_changed):
            self.position_property.unlink(self.__on_position_changed)
        if self.nucleus_offset_property.has_listener(
            self.__on_nucleus_offset_changed
        ):
            self.nucleus_offset_property.unlink(
                self.__on_nucleus_offset_changed
            )

    def get_charge(self) -> int:
        return self.proton_count - self.electron_count

    def reconfigure_nucleus(self) -> None:
        """Set the destinations and z-layers of all nucleons.

        Protons and neutrons are interleaved according to their ratio, so
        that both are spread evenly over the nucleus. Up to four nucleons are
        arranged in fixed patterns, larger nuclei are packed in a spiral.
        """
        nucleons = self.__interleave_nucleons()
        logging.debug(f"Reconfiguring nucleus with {len(nucleons)} nucleons")
        center = self.nucleus_center
        radius = self.__nucleon_radius
        if len(nucleons) == 1:
            self.__set_nucleon(nucleons[0], center, 0)
        elif len(nucleons) == 2:
            offset = Vector2.from_polar(radius, 0.2 * 2 * math.pi)
            self.__set_nucleon(nucleons[0], center + offset, 0)
            self.__set_nucleon(nucleons[1], center - offset, 0)
        elif len(nucleons) == 3:
            angle = 0.7 * 2 * math.pi
            distance = radius * 1.155
            for i, nucleon in enumerate(nucleons):
                offset = Vector2.from_polar(
                    distance, angle + i * 2 * math.pi / 3
                )
                self.__set_nucleon(nucleon, center + offset, 0)
        elif len(nucleons) == 4:
            angle = 1.4 * 2 * math.pi
            offset = Vector2.from_polar(radius, angle)
            self.__set_nucleon(nucleons[0], center + offset, 0)
            self.__set_nucleon(nucleons[2], center - offset, 0)
            distance = radius * 2 * math.cos(math.pi / 3)
            offset = Vector2.from_polar(distance, angle + math.pi / 2)
            self.__set_nucleon(nucleons[1], center + offset, 1)
            self.__set_nucleon(nucleons[3], center - offset, 1)
        elif len(nucleons) >= 5:
            self.__place_in_spiral(nucleons, center)

    def __interleave_nucleons(self) -> List[Particle]:
        num_protons = len(self.protons)
        num_neutrons = len(self.neutrons)
        if num_protons == 0:
            return list(self.neutrons)
        neutrons_per_proton = num_neutrons / num_protons
        nucleons: List[Particle] = list()
        proton_index = 0
        neutron_index = 0
        neutrons_to_add = 0.0
        while len(nucleons) < num_protons + num_neutrons:
            neutrons_to_add += neutrons_per_proton
            while neutrons_to_add >= 1 and neutron_index < num_neutrons:
                nucleons.append(self.neutrons[neutron_index])
                neutron_index += 1
                neutrons_to_add -= 1
            if proton_index < num_protons:
                nucleons.append(self.protons[proton_index])
                proton_index += 1
            elif neutron_index < num_neutrons:
                nucleons.append(self.neutrons[neutron_index])
                neutron_index += 1
        return nucleons

    def __place_in_spiral(
        self, nucleons: List[Particle], center: Vector2
    ) -> None:
        radius = self.__nucleon_radius
        scale_factor = float(
            np.interp(
                radius,
                NUCLEUS_SCALE_RADIUS_RANGE,
                NUCLEUS_SCALE_FACTOR_RANGE,
            )
        )
        placement_radius = 0.0
        placement_angle = 0.0
        placement_angle_delta = 0.0
        num_at_this_radius = 1
        level = 0
        for nucleon in nucleons:
            offset = Vector2.from_polar(placement_radius, placement_angle)
            self.__set_nucleon(nucleon, center + offset, level)
            num_at_this_radius -= 1
            if num_at_this_radius > 0:
                placement_angle += placement_angle_delta
            else:
                level += 1
                placement_radius += radius * scale_factor / level
                placement_angle += 2 * math.pi * 0.2 + level * math.pi
                num_at_this_radius = max(
                    int(placement_radius * math.pi / radius), 1
                )
                placement_angle_delta = 2 * math.pi / num_at_this_radius

    @staticmethod
    def __set_nucleon(
        nucleon: Particle, destination: Vector2, z_layer: int
    ) -> None:
        nucleon.destination_property.set(destination)
        nucleon.z_layer_property.set(z_layer)

    def change_nucleon_type(
        self,
        particle: Particle,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        """Turn a proton into a neutron or the other way around.

        The mass number does not change, so its listeners are not notified.
        The :code:`on_complete` callback is called once the particle has
        been moved to its new list.
        """
        if particle not in self:
            raise ValueError(f"{particle} is not part of this atom")
        if particle.type == "proton":
            old_list, new_list = self.protons, self.neutrons
            new_type = "neutron"
        elif particle.type == "neutron":
            old_list, new_list = self.neutrons, self.protons
            new_type = "proton"
        else:
            raise ValueError(
                f"Only protons and neutrons can change type, not {particle}"
            )
        particle.input_enabled_property.set(False)
        particle.type_property.set(new_type)
        was_deferred = self.mass_number_property.is_deferred
        self.mass_number_property.set_deferred(True)
        new_list.append(particle)
        old_list.remove(particle)
        if not was_deferred:
            self.mass_number_property.set_deferred(False)
        particle.input_enabled_property.set(True)
        if on_complete is not None:
            on_complete()

    def set_sub_atomic_particle_count(
        self, protons: int, neutrons: int, electrons: int
    ) -> None:
        """Replace all particles by new ones at the center of the atom."""
        self.clear()
        for _ in range(protons):
            self.add_particle(Particle("proton"))
        for _ in range(neutrons):
            self.add_particle(Particle("neutron"))
        for _ in range(electrons):
            self.add_particle(Particle("electron"))
