class Obstacle:
    """One oncoming car. Only ``row`` changes after creation."""

    __slots__ = ("lane", "row")

    def __init__(self, lane, row=0):
        self.lane = lane
        self.row = row

    @property
    def position(self):
        return (self.lane, self.row)

    def __repr__(self):
        return f"Obstacle(lane={self.lane}, row={self.row})"


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data):
        self.data = data
        self.prev = None
        self.next = None


class ObstacleSet:
    """
    Obstacles in spawn order, kept in a doubly linked list so the current
    obstacle can be unlinked in O(1) while the set is being walked.
    """

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def append(self, lane, row=0):
        node = _Node(Obstacle(lane, row))
        if self._head is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1
        return node.data

    def _unlink(self, node):
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def for_each_removable(self, visitor):
        """
        Call ``visitor(obstacle)`` for every obstacle in order. A truthy
        return value removes that obstacle; the walk carries on with the
        one that followed it.
        """
        node = self._head
        while node is not None:
            following = node.next
            if visitor(node.data):
                self._unlink(node)
            node = following

    def is_empty(self):
        return self._head is None

    def clear(self):
        self._head = self._tail = None
        self._size = 0

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"ObstacleSet({list(self)!r})"
