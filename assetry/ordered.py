def _same(item):
    return item


class OrderedAssetList:
    """
    An ordered collection without duplicates. Adding an item whose identity is already present moves
    the existing item to the requested end instead of adding it again.
    """

    def __init__(self, identity=None):
        self.identity = identity if identity is not None else _same
        # dicts keep insertion order, so the keys double as the ordering
        self._items = {}

    def __repr__(self):
        return f'{type(self).__name__}({list(self._items.values())!r})'

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self):
        return iter(self.to_sequence())

    def __contains__(self, item):
        return self.identity(item) in self._items

    def append_back(self, item):
        key = self.identity(item)
        self._items.pop(key, None)
        self._items[key] = item

    def push_front(self, item):
        self.import_list([item], at_front=True)

    def import_list(self, items, at_front):
        batch = {}
        for item in items:
            key = self.identity(item)
            batch.pop(key, None)
            batch[key] = item

        if not at_front:
            for key, item in batch.items():
                self._items.pop(key, None)
                self._items[key] = item
            return

        rest = {key: item for key, item in self._items.items() if key not in batch}
        self._items = {**batch, **rest}

    def to_sequence(self):
        return tuple(self._items.values())
