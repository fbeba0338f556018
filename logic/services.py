# Business services
import logging

import requests

from config import API_BASE_URL, DEFAULT_CATEGORY_FILTER, ITEMS_PATH
from data.models import Item

logger = logging.getLogger(__name__)


class ShoppingList:
    """
    Client-side shopping list backed by the item API.

    The session decides the transport: a plain requests.Session talks to a
    real backend, one with a MockServer listening talks to the mock store.
    """
    def __init__(self, session=None, base_url=API_BASE_URL):
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url.rstrip("/")
        self.items = []

    def _url(self, item_id=None):
        url = self.base_url + ITEMS_PATH
        if item_id is not None:
            url = f"{url}/{item_id}"
        return url

    def load(self):
        """
        Fetches all items from the backend, replacing the local copy.
        """
        response = self.session.get(self._url())
        response.raise_for_status()
        self.items = [Item.from_dict(data) for data in response.json()]
        logger.debug("Loaded %d items", len(self.items))
        return self.items

    def add_item(self, name, category):
        response = self.session.post(self._url(), json={"name": name, "category": category})
        response.raise_for_status()
        item = Item.from_dict(response.json())
        self.items.append(item)
        return item

    def toggle_cart(self, item_id):
        """
        Flips the cart flag of an item and stores the server's version of it.
        """
        current = self.find(item_id)
        response = self.session.patch(self._url(item_id), json={"isInCart": not current.is_in_cart})
        response.raise_for_status()
        updated = Item.from_dict(response.json())
        self.items = [updated if item.id == item_id else item for item in self.items]
        return updated

    def delete_item(self, item_id):
        response = self.session.delete(self._url(item_id))
        response.raise_for_status()
        self.items = [item for item in self.items if item.id != item_id]

    def find(self, item_id):
        for item in self.items:
            if item.id == item_id:
                return item
        raise ValueError(f"Item with ID {item_id} is not in the list.")

    def visible_items(self, category=DEFAULT_CATEGORY_FILTER):
        if category == DEFAULT_CATEGORY_FILTER:
            return list(self.items)
        return [item for item in self.items if item.category == category]


if __name__ == "__main__":
    from mocks.server import MockServer

    # Example usage
    with MockServer() as server:
        shopping_list = ShoppingList(session=server.session, base_url=server.base_url)
        shopping_list.load()
        shopping_list.add_item("Ice Cream", "Dessert")
        shopping_list.toggle_cart(1)
        for item in shopping_list.visible_items():
            print(item)
