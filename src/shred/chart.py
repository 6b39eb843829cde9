"""Helpers for drawing nuclide charts and periodic tables.

A nuclide chart shows one cell per nuclide, with the number of protons on
the vertical axis and the number of neutrons on the horizontal axis. The
functions in this module turn the reference tables of an `.AtomIdentifier`
into `numpy.ndarray` grids that are indexed as :code:`grid[protons,
neutrons]`, so that they can be plotted directly, for instance with
:func:`matplotlib.pyplot.imshow`.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from shred.errors import OutOfRangeError
from shred.identifier import AtomIdentifier, get_default_identifier
from shred.settings import MAX_ATOMIC_NUMBER

MAGIC_NUMBERS = (2, 8, 20, 28, 50, 82, 126)
"""Nucleon numbers that form complete shells within the nucleus."""

# Occupied columns of each row of the compact periodic table, which leaves out
# the lanthanide and actinide rows
PERIODIC_TABLE_COLUMNS: Tuple[Tuple[int, ...], ...] = (
    (0, 17),
    (0, 1, 12, 13, 14, 15, 16, 17),
    (0, 1, 12, 13, 14, 15, 16, 17),
    tuple(range(18)),
    tuple(range(18)),
    tuple(range(18)),
    tuple(range(18)),
)

# Elements that come after a skipped lanthanide or actinide block
__SKIPPED_BLOCKS = {58: 72, 90: 104}


def __create_periodic_table_cells() -> Dict[int, Tuple[int, int]]:
    cells: Dict[int, Tuple[int, int]] = dict()
    atomic_number = 1
    for row, columns in enumerate(PERIODIC_TABLE_COLUMNS):
        for column in columns:
            cells[atomic_number] = (row, column)
            atomic_number += 1
            atomic_number = __SKIPPED_BLOCKS.get(atomic_number, atomic_number)
    return cells


__PERIODIC_TABLE_CELLS = __create_periodic_table_cells()


def get_periodic_table_cell(atomic_number: int) -> Optional[Tuple[int, int]]:
    """Row and column of an element in the compact periodic table.

    Returns `None` for the lanthanides 58 to 71 and the actinides 90 to 103,
    which have no cell in the compact table.
    """
    if not 1 <= atomic_number <= MAX_ATOMIC_NUMBER:
        raise OutOfRangeError(
            f"Atomic number {atomic_number} is outside the periodic table"
        )
    return __PERIODIC_TABLE_CELLS.get(atomic_number)


def is_magic(nucleons: int) -> bool:
    return nucleons in MAGIC_NUMBERS


def create_half_life_grid(
    identifier: Optional[AtomIdentifier] = None,
    max_protons: int = 10,
    max_neutrons: int = 12,
) -> np.ndarray:
    """Half-lives in seconds on a :code:`[protons, neutrons]` grid.

    Stable nuclides get a half-life of :code:`inf`. Nuclides that do not
    exist or of which the half-life has not been measured are :code:`nan`.
    """
    if identifier is None:
        identifier = get_default_identifier()
    grid = np.full((max_protons + 1, max_neutrons + 1), np.nan)
    for protons in range(max_protons + 1):
        for neutrons in range(max_neutrons + 1):
            if identifier.is_stable(protons, neutrons):
                grid[protons, neutrons] = np.inf
            elif (protons, neutrons) in identifier.half_lives:
                half_life = identifier.half_lives[(protons, neutrons)]
                if half_life is not None:
                    grid[protons, neutrons] = half_life
    return grid


def create_existence_grid(
    identifier: Optional[AtomIdentifier] = None,
    max_protons: int = 10,
    max_neutrons: int = 12,
) -> np.ndarray:
    """Boolean :code:`[protons, neutrons]` grid of nuclides that exist."""
    if identifier is None:
        identifier = get_default_identifier()
    grid = np.zeros((max_protons + 1, max_neutrons + 1), dtype=bool)
    for protons in range(max_protons + 1):
        for neutrons in range(max_neutrons + 1):
            grid[protons, neutrons] = identifier.does_exist(protons, neutrons)
    return grid
