from __future__ import annotations

from dataclasses import dataclass

from game.secret_code import Code

NIL = -1


@dataclass
class CodeEntry:
    code: Code
    red: int | None = None
    prev: int = NIL
    next: int = NIL


class CodeList:
    """
    Doubly linked list of codes kept in an arena.

    Entries are addressed by their arena index; prev/next hold indices
    (NIL at either end). Removed entries stay in the arena until clear(),
    which drops everything in one pass.

    Attributes:
        entries: The arena.
        head: Index of the first live entry.
        tail: Index of the last live entry.
    """

    def __init__(self):
        self.entries: list[CodeEntry] = []
        self.head = NIL
        self.tail = NIL
        self._size = 0

    def append(self, code: Code, red: int | None = None) -> int:
        index = len(self.entries)
        self.entries.append(CodeEntry(code=code, red=red, prev=self.tail))
        if self.tail == NIL:
            self.head = index
        else:
            self.entries[self.tail].next = index
        self.tail = index
        self._size += 1
        return index

    def remove(self, index: int) -> CodeEntry:
        """Unlink an entry and return it."""
        entry = self.entries[index]
        if entry.prev == NIL:
            self.head = entry.next
        else:
            self.entries[entry.prev].next = entry.next
        if entry.next == NIL:
            self.tail = entry.prev
        else:
            self.entries[entry.next].prev = entry.prev
        entry.prev = entry.next = NIL
        self._size -= 1
        return entry

    def indices(self):
        """Iterate over live entry indices in list order."""
        index = self.head
        while index != NIL:
            # next is read first so the current entry may be removed
            following = self.entries[index].next
            yield index
            index = following

    def __iter__(self):
        for index in self.indices():
            yield self.entries[index]

    def codes(self) -> list[Code]:
        return [entry.code for entry in self]

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def clear(self):
        self.entries = []
        self.head = self.tail = NIL
        self._size = 0
