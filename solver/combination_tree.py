from __future__ import annotations

from dataclasses import dataclass

from game.colors import Color
from game.possibility import ALL_SLOTS, popcount
from solver.code_list import NIL


@dataclass
class TreeNode:
    """
    One way to place all occurrences of one color.

    Attributes:
        color: The color placed, None for the root.
        next_color: First color index the children may use.
        claim: Slots this node gives to its color.
        residual: Slots left for the descendants.
        first_child: Arena index of the first placement of the next color.
        next_sibling: Arena index of the next placement of the same color.
    """

    color: Color | None
    next_color: int
    claim: int
    residual: int
    first_child: int = NIL
    next_sibling: int = NIL


def compute_combination(last: int, mask: int, count: int) -> int | None:
    """
    Return the smallest value above last that fits inside mask and has
    exactly count bits set, or None once mask is overrun.
    """
    combination = last + 1
    while combination <= mask:
        if combination & mask == combination and popcount(combination) == count:
            return combination
        combination += 1
    return None


def combinations_of(mask: int, count: int):
    """Yield every count-bit subset of mask in increasing numeric order."""
    if count <= 0 or popcount(mask) < count:
        return
    combination = (1 << count) - 2
    while True:
        combination = compute_combination(combination, mask, count)
        if combination is None:
            return
        yield combination


class CombinationTree:
    """
    All placements of the colors in play that respect every color's count
    and slot mask.

    Colors are handled in ascending order, skipping colors with a count of
    0. The children of a node are the placements of the next color within
    the node's residual slots, siblings are the alternative placements of
    the same color. A color that does not fit contributes no node.

    Attributes:
        possible: The Possibility records, indexed by color.
        nodes: The arena; index 0 is the root.
    """

    def __init__(self, possible):
        self.possible = possible
        self.nodes: list[TreeNode] = []
        self.root = self._new_node(None, 0, 0, ALL_SLOTS)
        self._build(self.root)

    def _new_node(self, color, next_color, claim, residual) -> int:
        self.nodes.append(TreeNode(color, next_color, claim, residual))
        return len(self.nodes) - 1

    def _next_color(self, start: int) -> int | None:
        for color in range(start, len(self.possible)):
            if self.possible[color].count:
                return color
        return None

    def _build(self, parent: int):
        color = self._next_color(self.nodes[parent].next_color)
        if color is None:
            return

        record = self.possible[color]
        residual = self.nodes[parent].residual
        last = NIL
        for claim in combinations_of(record.mask & residual, record.count):
            node = self._new_node(
                Color.from_bits(color), color + 1, claim, residual & ~claim
            )
            if last == NIL:
                self.nodes[parent].first_child = node
            else:
                self.nodes[last].next_sibling = node
            last = node
            self._build(node)

    def __len__(self):
        return len(self.nodes)

    def clear(self):
        self.nodes = []
        self.root = NIL
