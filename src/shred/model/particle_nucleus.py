"""Nucleus in which protons and neutrons are stacked in fixed rows.

Each nucleon type has its own slot table. A new nucleon goes to the lowest
row that still has an open slot, and when a nucleon leaves a lower row, the
gap is filled with a nucleon from a row above it.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from shred.identifier import AtomIdentifier

from ._container import ParticleContainer
from .observable import DerivedProperty, ObservableList
from .particle import Particle
from .vector import Vector2

SlotRow = Tuple[float, float, int]
"""Row of slots defined by its height, the first x position and a size."""

SLOT_SPACING = 20.0
PROTON_SLOT_ROWS: Tuple[SlotRow, ...] = (
    (-110.0, -95.0, 2),
    (-30.0, -135.5, 6),
    (50.0, -135.5, 2),
)
NEUTRON_SLOT_ROWS: Tuple[SlotRow, ...] = (
    (-110.0, 75.0, 2),
    (-30.0, 34.5, 6),
    (50.0, 34.5, 4),
)


def create_slot_positions(rows: Sequence[SlotRow]) -> List[Vector2]:
    positions = list()
    for y, x_start, size in rows:
        for i in range(size):
            positions.append(Vector2(x_start + i * SLOT_SPACING, y))
    return positions


class _SlotTable:
    """Fixed positions that can each hold one nucleon."""

    def __init__(self, rows: Sequence[SlotRow]) -> None:
        self.positions = create_slot_positions(rows)
        self.occupants: List[Optional[Particle]] = [None] * len(
            self.positions
        )
        self.__row_heights = sorted({y for y, _, _ in rows})

    @property
    def top_row_height(self) -> float:
        return self.__row_heights[-1]

    def open_slots(self) -> List[int]:
        return [i for i, p in enumerate(self.occupants) if p is None]

    def occupied_slots_above(self, height: float) -> List[int]:
        return [
            i
            for i, particle in enumerate(self.occupants)
            if particle is not None and self.positions[i].y > height
        ]

    def closest(self, slots: List[int], position: Vector2) -> int:
        return min(slots, key=lambda i: self.positions[i].distance(position))


class ParticleNucleus(ParticleContainer):
    """A nucleus with ten proton slots and twelve neutron slots.

    Slot positions are relative to the center of the nucleus, which is the
    `position` plus the `nucleus_offset`.

    Args:
        nucleon_add_mode: Set to :code:`"proximal"` to prefer the slot
            closest to an incoming nucleon within the lowest open row, or to
            :code:`"random"` to pick any open slot in that row.
        identifier: `.AtomIdentifier` for looking up atomic masses.
    """

    def __init__(
        self,
        nucleon_add_mode: str = "proximal",
        identifier: Optional[AtomIdentifier] = None,
    ) -> None:
        super().__init__(identifier)
        if nucleon_add_mode not in ("proximal", "random"):
            raise ValueError(
                f'Unknown nucleon add mode "{nucleon_add_mode}"'
            )
        self.__nucleon_add_mode = nucleon_add_mode
        self.__slots = {
            "proton": _SlotTable(PROTON_SLOT_ROWS),
            "neutron": _SlotTable(NEUTRON_SLOT_ROWS),
        }
        self.particle_count_property = DerivedProperty(
            [self.proton_count_property, self.neutron_count_property],
            lambda protons, neutrons: protons + neutrons,
        )
        self.protons.item_removed_emitter.add_listener(
            lambda proton: self.__fill_gap(proton, self.__slots["proton"])
        )
        self.neutrons.item_removed_emitter.add_listener(
            lambda neutron: self.__fill_gap(neutron, self.__slots["neutron"])
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"protons={self.proton_count}, "
            f"neutrons={self.neutron_count})"
        )

    @property
    def particle_count(self) -> int:
        return self.particle_count_property.value

    def dispose(self) -> None:
        super().dispose()
        self.particle_count_property.dispose()
        self.protons.item_removed_emitter.remove_all_listeners()
        self.neutrons.item_removed_emitter.remove_all_listeners()

    @property
    def proton_slot_occupants(self) -> List[Optional[Particle]]:
        return list(self.__slots["proton"].occupants)

    @property
    def neutron_slot_occupants(self) -> List[Optional[Particle]]:
        return list(self.__slots["neutron"].occupants)

    def _particle_lists(self) -> Dict[str, ObservableList[Particle]]:
        return {"proton": self.protons, "neutron": self.neutrons}

    def _has_room_for(self, particle: Particle) -> bool:
        return bool(self.__slots[particle.type].open_slots())

    def _place(self, particle: Particle) -> None:
        table = self.__slots[particle.type]
        sorted_slots = self._sort_open_slots(
            table.open_slots(),
            table.positions,
            particle,
            self.nucleus_center,
            self.__nucleon_add_mode,
        )
        sorted_slots.sort(key=lambda i: table.positions[i].y)
        slot = sorted_slots[0]
        table.occupants[slot] = particle
        self.__move_to_slot(table, slot)

    def __move_to_slot(self, table: _SlotTable, slot: int) -> None:
        particle = table.occupants[slot]
        particle.destination_property.set(  # type: ignore
            self.nucleus_center + table.positions[slot]
        )

    def __fill_gap(self, nucleon: Particle, table: _SlotTable) -> None:
        if nucleon not in table.occupants:
            return
        gap = table.occupants.index(nucleon)
        table.occupants[gap] = None
        height = table.positions[gap].y
        if height >= table.top_row_height:
            return
        candidates = table.occupied_slots_above(height)
        if not candidates:
            return
        source = table.closest(candidates, table.positions[gap])
        self.__move(table, source, gap)
        source_height = table.positions[source].y
        if source_height >= table.top_row_height:
            return
        candidates = table.occupied_slots_above(source_height)
        if candidates:
            second_source = table.closest(candidates, table.positions[source])
            self.__move(table, second_source, source)

    def __move(self, table: _SlotTable, source: int, target: int) -> None:
        table.occupants[target] = table.occupants[source]
        table.occupants[source] = None
        self.__move_to_slot(table, target)
