"""Shared bookkeeping of models that hold `.Particle` instances."""

import logging
import random
from abc import ABC, abstractmethod
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
)

from shred.identifier import AtomIdentifier, get_default_identifier

from .observable import DerivedProperty, ObservableList, Property
from .particle import Particle
from .vector import ZERO, Vector2

RemovalListener = Callable[[bool, bool], None]


class ParticleContainer(ABC):
    """Tracks which particles belong to an atom or a nucleus.

    A particle that becomes user-controlled is considered to be dragged out
    of the container and is removed automatically.
    """

    def __init__(self, identifier: Optional[AtomIdentifier] = None) -> None:
        if identifier is None:
            identifier = get_default_identifier()
        self.__identifier = identifier
        self.__removal_listeners: Dict[int, RemovalListener] = dict()
        self.position_property: Property[Vector2] = Property(ZERO)
        self.nucleus_offset_property: Property[Vector2] = Property(ZERO)
        self.protons: ObservableList[Particle] = ObservableList()
        self.neutrons: ObservableList[Particle] = ObservableList()
        self.proton_count_property = self.protons.length_property
        self.neutron_count_property = self.neutrons.length_property
        self.mass_number_property = DerivedProperty(
            [self.proton_count_property, self.neutron_count_property],
            lambda protons, neutrons: protons + neutrons,
        )

    @property
    def identifier(self) -> AtomIdentifier:
        return self.__identifier

    @property
    def position(self) -> Vector2:
        return self.position_property.value

    @property
    def nucleus_offset(self) -> Vector2:
        return self.nucleus_offset_property.value

    @property
    def nucleus_center(self) -> Vector2:
        return self.position + self.nucleus_offset

    @property
    def proton_count(self) -> int:
        return len(self.protons)

    @property
    def neutron_count(self) -> int:
        return len(self.neutrons)

    @property
    def mass_number(self) -> int:
        return self.mass_number_property.value

    def _get_particle_list(
        self, particle_type: str
    ) -> ObservableList[Particle]:
        particle_lists = self._particle_lists()
        if particle_type not in particle_lists:
            raise ValueError(
                f"{self.__class__.__name__} cannot hold particles of type"
                f' "{particle_type}"'
            )
        return particle_lists[particle_type]

    @abstractmethod
    def _particle_lists(self) -> Dict[str, ObservableList[Particle]]:
        """Particle lists of this container by particle type."""

    @abstractmethod
    def _place(self, particle: Particle) -> None:
        """Set the destination of a particle that was just added."""

    def _has_room_for(  # pylint: disable=no-self-use,unused-argument
        self, particle: Particle
    ) -> bool:
        return True

    def _on_dragged_out(self, particle: Particle) -> None:
        """Hook for a particle that was removed by the user."""

    def __iter__(self) -> Iterator[Particle]:
        for particle_list in self._particle_lists().values():
            yield from particle_list

    def __len__(self) -> int:
        return sum(map(len, self._particle_lists().values()))

    def __contains__(self, particle: object) -> bool:
        return any(
            particle in particle_list
            for particle_list in self._particle_lists().values()
        )

    def contains_particle(self, particle: Particle) -> bool:
        return particle in self

    def add_particle(self, particle: Particle) -> None:
        """Add a particle and move it to its place in the container."""
        if particle in self:
            logging.warning(
                f"{particle} is already part of this {self.__class__.__name__}"
            )
            return
        particle_list = self._get_particle_list(particle.type)
        if not self._has_room_for(particle):
            raise ValueError(
                f"There is no room for another {particle.type} in this"
                f" {self.__class__.__name__}"
            )

        def remove_if_dragged(  # pylint: disable=unused-argument
            user_controlled: bool, old_value: bool
        ) -> None:
            # the particle may have changed type, so its list is looked up
            if user_controlled and particle in self:
                self.remove_particle(particle)
                self._on_dragged_out(particle)
                particle.z_layer_property.set(0)

        particle.user_controlled_property.lazy_link(remove_if_dragged)
        self.__removal_listeners[particle.id] = remove_if_dragged
        particle_list.append(particle)
        self._place(particle)

    def remove_particle(self, particle: Particle) -> None:
        for particle_list in self._particle_lists().values():
            if particle in particle_list:
                particle_list.remove(particle)
                self.__unregister(particle)
                return
        raise ValueError(
            f"{particle} is not part of this {self.__class__.__name__}"
        )

    def __unregister(self, particle: Particle) -> None:
        listener = self.__removal_listeners.pop(particle.id, None)
        if listener is not None:
            particle.user_controlled_property.unlink(listener)

    def dispose(self) -> None:
        """Detach the container from its particles and derived properties.

        The particles keep their place, but dragging them no longer removes
        them from the container.
        """
        for particle in self:
            self.__unregister(particle)
        self.mass_number_property.dispose()

    def extract_particle(self, particle_type: str) -> Optional[Particle]:
        """Remove and return the most recently added particle of a type.

        Returns `None` if there is no particle of that type.
        """
        particle_list = self._get_particle_list(particle_type)
        if not particle_list:
            return None
        particle = particle_list[-1]
        self.remove_particle(particle)
        return particle

    def extract_particle_closest_to_center(
        self, particle_type: str
    ) -> Optional[Particle]:
        particle_list = self._get_particle_list(particle_type)
        if not particle_list:
            return None
        particle = min(
            particle_list,
            key=lambda p: p.position.distance(self.position),
        )
        self.remove_particle(particle)
        return particle

    def clear(self) -> None:
        """Remove all particles."""
        for particle in list(self):
            self.remove_particle(particle)

    def move_all_particles_to_destination(self) -> None:
        for particle in self:
            particle.move_immediately_to_destination()

    def get_weight(self) -> int:
        return self.proton_count + self.neutron_count

    def get_isotope_atomic_mass(self) -> float:
        return self.__identifier.get_isotope_atomic_mass(
            self.proton_count, self.neutron_count
        )

    @staticmethod
    def _sort_open_slots(
        open_slots: Iterable[int],
        slot_positions: Sequence[Vector2],
        particle: Particle,
        center: Vector2,
        add_mode: str,
    ) -> List[int]:
        """Order open slots by how suitable they are for a new particle.

        In :code:`"proximal"` mode, slots that are closest to the particle
        come first, in :code:`"random"` mode the order is shuffled.
        """
        slots = list(open_slots)
        if add_mode == "proximal":
            slots.sort(
                key=lambda i: particle.position.distance(
                    center + slot_positions[i]
                )
            )
        elif add_mode == "random":
            random.shuffle(slots)
        else:
            raise ValueError(f'Unknown add mode "{add_mode}"')
        return slots
