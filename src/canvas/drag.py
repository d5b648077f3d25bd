"""
Drag-and-drop state machine.

States and transitions are plain values and pure functions, independent of
any pointer-event model:

    Idle --begin_from_palette--> DraggingFromPalette
    Idle --begin_node----------> DraggingExistingNode
    Dragging* --drop(target)---> Dropped --(engine applies plan)--> Idle
    Dragging* --drop(None)-----> Idle        (cancelled, no mutation)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class DraggingFromPalette:
    kind_id: str


@dataclass(frozen=True)
class DraggingExistingNode:
    node_id: str


Dragging = DraggingFromPalette | DraggingExistingNode


@dataclass(frozen=True)
class CanvasTarget:
    """The canvas background (root drop zone)."""


@dataclass(frozen=True)
class NodeTarget:
    """An existing node under the pointer.

    ``inside`` is set when the pointer is over a container's inner drop zone
    rather than over the node itself.
    """

    node_id: str
    inside: bool = False


DropTarget = CanvasTarget | NodeTarget


@dataclass(frozen=True)
class Dropped:
    source: Dragging
    target: DropTarget


DragState = Idle | DraggingFromPalette | DraggingExistingNode | Dropped


# Mutation plans produced by a drop


@dataclass(frozen=True)
class InsertPlan:
    kind_id: str
    parent_id: str | None = None


@dataclass(frozen=True)
class MovePlan:
    source_id: str
    target_id: str


@dataclass(frozen=True)
class MoveIntoPlan:
    source_id: str
    parent_id: str | None = None


@dataclass(frozen=True)
class NoPlan:
    pass


DropPlan = InsertPlan | MovePlan | MoveIntoPlan | NoPlan

IDLE = Idle()


def begin_from_palette(state: DragState, kind_id: str) -> DraggingFromPalette:
    """Start dragging a palette entry; any gesture in flight is abandoned."""
    return DraggingFromPalette(kind_id)


def begin_node(state: DragState, node_id: str) -> DraggingExistingNode:
    """Start dragging a placed node; any gesture in flight is abandoned."""
    return DraggingExistingNode(node_id)


def drop(state: DragState, target: DropTarget | None) -> Dropped | Idle:
    """
    Release the pointer.

    Dropping outside any target, or dropping while not dragging, returns to
    Idle without a mutation.
    """
    if target is None or not isinstance(state, (DraggingFromPalette, DraggingExistingNode)):
        return IDLE
    return Dropped(state, target)


def cancel(state: DragState) -> Idle:
    return IDLE


def plan_drop(dropped: Dropped) -> DropPlan:
    """
    Mutation implied by a drop.

    Palette onto the canvas or onto a node appends to the root; palette
    inside a container nests it there. An existing node onto another node
    takes that node's place (reorder); inside a container it is appended to
    the container; onto the canvas it moves to the end of the root.
    """
    source, target = dropped.source, dropped.target
    match source, target:
        case DraggingFromPalette(kind_id), NodeTarget(node_id, True):
            return InsertPlan(kind_id, parent_id=node_id)
        case DraggingFromPalette(kind_id), _:
            return InsertPlan(kind_id)
        case DraggingExistingNode(node_id), NodeTarget(target_id, _) if node_id == target_id:
            return NoPlan()
        case DraggingExistingNode(node_id), NodeTarget(target_id, True):
            return MoveIntoPlan(node_id, parent_id=target_id)
        case DraggingExistingNode(node_id), NodeTarget(target_id, False):
            return MovePlan(node_id, target_id)
        case DraggingExistingNode(node_id), CanvasTarget():
            return MoveIntoPlan(node_id)
    return NoPlan()
