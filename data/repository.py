# Data repository
import logging

from config import SEED_ITEMS
from data.models import Item

logger = logging.getLogger(__name__)


class NotFound(LookupError):
    """Raised when no stored item has the requested id."""
    def __init__(self, item_id):
        super().__init__(f"Item with ID {item_id} not found.")
        self.item_id = item_id


class ItemStore:
    """
    In-memory item storage backing the mock API.

    Items keep insertion order. Ids are assigned by the store, never by the
    caller, and only increase until the next reset.
    """
    def __init__(self, seed=SEED_ITEMS):
        self.seed = tuple(seed)
        self._items = []
        self._last_id = 0
        self.reset()

    def reset(self):
        """
        Replaces the collection with fresh copies of the seed items.
        """
        self._items = [
            Item(index, name, category)
            for index, (name, category) in enumerate(self.seed, start=1)
        ]
        self._last_id = len(self._items)
        logger.debug("Store reset to %d seed items", len(self._items))

    def list(self):
        return list(self._items)

    def get(self, item_id):
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFound(item_id)

    def add(self, name, category):
        """
        Creates an item with a fresh id and appends it.
        """
        if name is None or category is None:
            raise ValueError("Item name and category are required.")
        item = Item(self._next_id(), name, category)
        self._items.append(item)
        logger.debug("Added %r", item)
        return item

    def toggle_cart(self, item_id):
        item = self.get(item_id)
        item.is_in_cart = not item.is_in_cart
        return item

    def set_cart(self, item_id, is_in_cart):
        item = self.get(item_id)
        item.is_in_cart = bool(is_in_cart)
        return item

    def remove(self, item_id):
        """
        Removes an item by its ID and returns it.
        """
        item = self.get(item_id)
        self._items = [stored for stored in self._items if stored is not item]
        logger.debug("Removed %r", item)
        return item

    def __len__(self):
        return len(self._items)

    def _next_id(self):
        self._last_id += 1
        return self._last_id


if __name__ == "__main__":
    # Example usage
    store = ItemStore()
    store.add("Ice Cream", "Dessert")
    store.toggle_cart(1)
    store.remove(2)
    for item in store.list():
        print(item)
