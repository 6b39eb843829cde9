"""Default configuration for `shred`.

Model dimensions are in arbitrary screen units, times are in seconds.
"""

from os.path import dirname, join, realpath

__SHRED_PATH = dirname(realpath(__file__))
DATA_PATH = join(__SHRED_PATH, "data")
SCHEMA_PATH = join(DATA_PATH, "schemas")

ELEMENTS_DEFINITION_PATH = join(DATA_PATH, "elements.yml")
HALF_LIVES_DEFINITION_PATH = join(DATA_PATH, "half_lives.yml")
DECAY_MODES_DEFINITION_PATH = join(DATA_PATH, "decay_modes.yml")

MAX_ATOMIC_NUMBER = 118
MAX_ATOMIC_NUMBER_WITH_STANDARD_MASS = 83

# Natural abundance of isotopes that only exist in immeasurably small amounts
TRACE_ABUNDANCE = 1e-12

# Particle geometry and animation
NUCLEON_RADIUS = 10.0
ELECTRON_RADIUS = NUCLEON_RADIUS * 0.8
DEFAULT_PARTICLE_VELOCITY = 200.0  # units per second

# ParticleAtom layout
INNER_ELECTRON_SHELL_RADIUS = 85.0
OUTER_ELECTRON_SHELL_RADIUS = 130.0
NUM_INNER_ELECTRON_SLOTS = 2
NUM_OUTER_ELECTRON_SLOTS = 8

# Nucleus layout, scale factor of the spiral versus the nucleon radius
NUCLEUS_SCALE_RADIUS_RANGE = (3.0, 10.0)
NUCLEUS_SCALE_FACTOR_RANGE = (2.4, 1.35)
