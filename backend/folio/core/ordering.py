"""Ordering Engine (pure half): plans adjacent swaps over the project display order.

Invariants:
    - Input is the FULL project sequence sorted ascending by order
    - A swap exchanges the two order VALUES; ids never move
    - Moving the first item up or the last item down yields ReorderBoundary, not an error
    - Unknown ids raise ResourceNotFoundError

Design Decisions:
    - Adjacent swap over global renumbering: 2 writes per move, untouched rows keep their values
    - Colliding order values (a racing create, or an admin edit of `order`) are repaired
      lazily: reorder renumbers the sequence to 0..n-1 before swapping, since swapping two
      equal values would change nothing
    - Pure planning, IO in services/project_service.py (functional core, imperative shell)
"""

from dataclasses import dataclass
from typing import Hashable, Sequence

from folio.core.domain_types import ReorderDirection
from folio.core.errors import ResourceNotFoundError


@dataclass(frozen=True)
class OrderSlot:
    """One row of the sorted sequence: identity plus its current order value."""
    id: Hashable
    order: int


@dataclass(frozen=True)
class SwapPlan:
    """Two rows whose order values must be exchanged as one unit."""
    source: OrderSlot
    target: OrderSlot

    @property
    def new_source_order(self) -> int:
        return self.target.order

    @property
    def new_target_order(self) -> int:
        return self.source.order


@dataclass(frozen=True)
class ReorderBoundary:
    """The move cannot happen: the item already sits at the edge."""
    direction: ReorderDirection

    @property
    def reason(self) -> str:
        edge = "top" if self.direction == ReorderDirection.UP else "bottom"
        return f"Cannot move {self.direction.value}. Project is already at the {edge}."


def plan_reorder(
    slots: Sequence[OrderSlot], item_id: Hashable, direction: ReorderDirection,
) -> SwapPlan | ReorderBoundary:
    """Plan an adjacent swap for `item_id` relative to the current sorted sequence."""
    index = next((i for i, s in enumerate(slots) if s.id == item_id), None)
    if index is None:
        raise ResourceNotFoundError("Project", str(item_id))

    target_index = index - 1 if direction == ReorderDirection.UP else index + 1
    if target_index < 0 or target_index >= len(slots):
        return ReorderBoundary(direction)
    return SwapPlan(source=slots[index], target=slots[target_index])


def next_order(max_order: int | None) -> int:
    """Order value for a newly created project: appended after the current maximum."""
    return 0 if max_order is None else max_order + 1


def compact_orders(slots: Sequence[OrderSlot]) -> dict[Hashable, int]:
    """Map each id to its position, for rows whose stored value differs from it."""
    return {s.id: i for i, s in enumerate(slots) if s.order != i}


def has_order_collisions(slots: Sequence[OrderSlot]) -> bool:
    """True if two rows share an order value."""
    return len({s.order for s in slots}) != len(slots)
