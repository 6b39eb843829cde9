"""Reference data and model objects for atoms and nuclides.

The `shred` package consists of three parts:

  `shred.identifier`
    ― query functions for element names and symbols, isotope masses and
    abundances, nuclide stability, half-lives and decay modes. The data is
    defined by the `.nuclide` module and read by the `.io` module from the
    YAML files that come with the package.

  `shred.model`
    ― observable atom models: `.NumberAtom` for particle counts and
    `.ParticleAtom` and `.ParticleNucleus` for particles that are arranged
    in electron shells and nuclei.

  `shred.chart`
    ― helpers that turn the reference data into grids for nuclide charts and
    periodic tables.
"""

__all__ = [
    # Main modules
    "chart",
    "identifier",
    "io",
    "model",
    # Facade
    "AtomIdentifier",
    "NotFoundError",
    "OutOfRangeError",
    "get_default_identifier",
    "load_default_identifier",
]

from . import chart, identifier, io, model
from .errors import NotFoundError, OutOfRangeError
from .identifier import AtomIdentifier, get_default_identifier

load_default_identifier = get_default_identifier
"""An alias to `.identifier.get_default_identifier`."""
