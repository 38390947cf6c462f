from collections import OrderedDict


class OrderedKeySet:
    """
    Keys in first-insertion order, with O(1) append and removal.

    Unlike a "touch" structure, adding a key that is already present does not
    move it to the end.
    """

    def __init__(self):
        self.inner: OrderedDict = OrderedDict()

    def add(self, item):
        if item not in self.inner:
            self.inner[item] = None

    def discard(self, item):
        self.inner.pop(item, None)

    def to_list(self) -> list:
        return list(self.inner.keys())

    def __iter__(self):
        return iter(self.inner.keys())
