"""
Segment chain for the snake body.

Segments live in an arena and are addressed by stable integer indices.
Each index stores a grid coordinate plus the indices of its previous and
next neighbours, so relinking never touches object references.
"""

NIL = -1


class SegmentChain:
    """Doubly linked list of body segments stored in flat arrays"""

    def __init__(self):
        self._x = []
        self._y = []
        self._prev = []
        self._next = []

    def __len__(self):
        return len(self._x)

    def allocate(self, x=0, y=0):
        """Create a new unlinked segment and return its index"""
        self._x.append(x)
        self._y.append(y)
        self._prev.append(NIL)
        self._next.append(NIL)
        return len(self._x) - 1

    def clear(self):
        """Drop every segment (full reset only)"""
        for index in range(len(self._x)):
            self.unlink(index)
        self._x.clear()
        self._y.clear()
        self._prev.clear()
        self._next.clear()

    def position(self, index):
        return self._x[index], self._y[index]

    def set_position(self, index, x, y):
        self._x[index] = x
        self._y[index] = y

    def next_of(self, index):
        return self._next[index]

    def prev_of(self, index):
        return self._prev[index]

    def unlink(self, index):
        """Remove a segment from the chain, joining its neighbours together"""
        prev_index = self._prev[index]
        next_index = self._next[index]
        if prev_index != NIL:
            self._next[prev_index] = next_index
        if next_index != NIL:
            self._prev[next_index] = prev_index
        self._prev[index] = NIL
        self._next[index] = NIL

    def insert_after(self, index, anchor):
        """Splice a segment in right after anchor

        The segment is unlinked first, so this also moves a segment that is
        already part of the chain. Anchor's old successor follows the
        inserted segment.
        """
        if index == anchor:
            raise ValueError(f"Cannot insert segment {index} after itself")

        self.unlink(index)

        successor = self._next[anchor]
        self._next[index] = successor
        if successor != NIL:
            self._prev[successor] = index
        self._prev[index] = anchor
        self._next[anchor] = index

    def walk(self, start):
        """Yield indices from start following next links"""
        seen = set()
        index = start
        while index != NIL:
            if index in seen:
                raise RuntimeError(f"Segment chain has a cycle at index {index}")
            seen.add(index)
            yield index
            index = self._next[index]
