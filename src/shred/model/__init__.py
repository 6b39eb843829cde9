"""Observable model objects of atoms and their particles.

`NumberAtom` describes an atom by its particle counts only. `ParticleAtom`
and `ParticleNucleus` hold actual `Particle` instances and arrange them in
the model plane, so that they can be rendered and dragged around by a user
interface. All state changes are announced through the observer primitives
of :mod:`.observable`.
"""

__all__ = [
    "DerivedProperty",
    "Emitter",
    "NumberAtom",
    "ObservableList",
    "Particle",
    "ParticleAtom",
    "ParticleNucleus",
    "Property",
    "Vector2",
]

from .number_atom import NumberAtom
from .observable import DerivedProperty, Emitter, ObservableList, Property
from .particle import Particle
from .particle_atom import ParticleAtom
from .particle_nucleus import ParticleNucleus
from .vector import Vector2
