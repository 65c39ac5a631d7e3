from __future__ import annotations

from game.ruleset import DEFAULT_RULES
from game.secret_code import Code
from solver.code_list import NIL, CodeList
from solver.combination_tree import CombinationTree

SLOTS = DEFAULT_RULES["code_length"]


def flatten(tree: CombinationTree, candidates: CodeList) -> CodeList:
    """
    Append every complete code of the tree to candidates, depth first.

    A root-to-leaf path only counts if its claims fill all slots; a branch
    cut short by a color that did not fit yields nothing.
    """
    if tree.root != NIL:
        _walk(tree, tree.nodes[tree.root].first_child, [None] * SLOTS, 0, candidates)
    return candidates


def _walk(tree, index, slots, filled, candidates):
    while index != NIL:
        node = tree.nodes[index]
        code = list(slots)
        claimed = 0
        for slot in range(SLOTS):
            if node.claim >> slot & 0x1:
                code[slot] = node.color
                claimed += 1

        if node.first_child != NIL:
            _walk(tree, node.first_child, code, filled + claimed, candidates)
        elif filled + claimed == SLOTS:
            candidates.append(Code(code))

        index = node.next_sibling
