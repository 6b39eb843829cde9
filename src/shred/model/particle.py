"""Subatomic particles that can be moved around in the model plane."""

import itertools
import math
from typing import Optional

import particle
from particle import PDGID

from shred.settings import (
    DEFAULT_PARTICLE_VELOCITY,
    ELECTRON_RADIUS,
    NUCLEON_RADIUS,
)

from .observable import Emitter, Property
from .vector import ZERO, Vector2

PARTICLE_TYPES = ("proton", "neutron", "electron", "positron")
"""Names of the supported particle types."""

__PDG_CODES = {
    "proton": 2212,
    "neutron": 2112,
    "electron": 11,
    "positron": -11,
}

__ID_COUNTER = itertools.count(1)


def _get_pdg_code(particle_type: str) -> int:
    return __PDG_CODES[particle_type]


def _next_id() -> int:
    return next(__ID_COUNTER)


class Particle:
    """A proton, neutron, electron or positron.

    Each particle has a unique :code:`id` and animates from its `position`
    toward its `destination` when `step` is called. While a particle is
    user-controlled, it does not move by itself.

    Args:
        particle_type: One of `PARTICLE_TYPES`.
        max_z_layer: Highest allowed value of the `z_layer_property`. There
            is no upper limit if not specified.
    """

    def __init__(
        self, particle_type: str, max_z_layer: Optional[int] = None
    ) -> None:
        if particle_type not in PARTICLE_TYPES:
            raise ValueError(
                f'Unknown particle type "{particle_type}". Should be one of'
                f" {', '.join(PARTICLE_TYPES)}"
            )
        self.__id = _next_id()
        self.__max_z_layer = max_z_layer
        if particle_type in ("electron", "positron"):
            radius = ELECTRON_RADIUS
        else:
            radius = NUCLEON_RADIUS
        self.type_property: Property[str] = Property(
            particle_type, validator=lambda t: t in PARTICLE_TYPES
        )
        self.position_property: Property[Vector2] = Property(ZERO)
        self.destination_property: Property[Vector2] = Property(ZERO)
        self.radius_property: Property[float] = Property(radius)
        self.animation_velocity_property: Property[float] = Property(
            DEFAULT_PARTICLE_VELOCITY, validator=lambda v: v >= 0
        )
        self.user_controlled_property: Property[bool] = Property(False)
        self.input_enabled_property: Property[bool] = Property(True)
        self.z_layer_property: Property[int] = Property(
            0, validator=self.__is_valid_z_layer
        )
        self.animation_ended_emitter = Emitter()
        self.drag_ended_emitter = Emitter()

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}("{self.type}", id={self.__id},'
            f" position={self.position!r})"
        )

    def __is_valid_z_layer(self, value: int) -> bool:
        if not isinstance(value, int) or value < 0:
            return False
        if self.__max_z_layer is None:
            return True
        return value <= self.__max_z_layer

    @property
    def id(self) -> int:  # pylint: disable=invalid-name
        return self.__id

    @property
    def type(self) -> str:
        return self.type_property.value

    @property
    def max_z_layer(self) -> Optional[int]:
        return self.__max_z_layer

    @property
    def position(self) -> Vector2:
        return self.position_property.value

    @property
    def destination(self) -> Vector2:
        return self.destination_property.value

    @property
    def radius(self) -> float:
        return self.radius_property.value

    @property
    def user_controlled(self) -> bool:
        return self.user_controlled_property.value

    @property
    def z_layer(self) -> int:
        return self.z_layer_property.value

    @property
    def pdgid(self) -> PDGID:
        return PDGID(_get_pdg_code(self.type))

    @property
    def rest_mass(self) -> float:
        """Rest mass in MeV, as listed by the Particle Data Group."""
        return particle.Particle.from_pdgid(self.pdgid).mass

    def step(self, dt: float) -> None:
        """Move toward the destination for a time step of :code:`dt` seconds.

        The `animation_ended_emitter` fires once the particle has arrived.
        """
        if self.user_controlled:
            return
        position = self.position
        destination = self.destination
        velocity = self.animation_velocity_property.value
        distance = position.distance(destination)
        if distance > dt * velocity:
            step_angle = math.atan2(
                destination.y - position.y, destination.x - position.x
            )
            step = Vector2.from_polar(velocity * dt, step_angle)
            self.position_property.set(position + step)
        elif distance > 0:
            self.move_immediately_to_destination()
            self.animation_ended_emitter.emit()

    def move_immediately_to_destination(self) -> None:
        self.position_property.set(self.destination)

    def set_position_and_destination(self, position: Vector2) -> None:
        self.destination_property.set(position)
        self.move_immediately_to_destination()
