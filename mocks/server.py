# Mock server lifecycle
import logging

import requests

from config import API_BASE_URL
from data.repository import ItemStore
from mocks.handlers import MockRequestHandler

logger = logging.getLogger(__name__)


class MockServer:
    """
    Serves the item API for one base URL from an owned ItemStore.

    listen() before the suite, close() after it, and reset_handlers() plus
    reset_data() between tests. Only one server may listen at a time.
    """
    def __init__(self, store=None, base_url=API_BASE_URL, session=None):
        self.store = store if store is not None else ItemStore()
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.handler = MockRequestHandler(self.store, base_url=self.base_url)
        self.listening = False

    def listen(self):
        if self.listening:
            return
        self.handler.start()
        self.listening = True
        logger.info("Mock server listening on %s", self.base_url)

    def close(self):
        if not self.listening:
            return
        self.handler.stop()
        self.listening = False
        logger.info("Mock server on %s closed", self.base_url)

    def use(self, method, path, callback):
        self.handler.use(method, path, callback)

    def reset_handlers(self):
        self.handler.reset_overrides()

    def reset_data(self):
        self.store.reset()

    def __enter__(self):
        self.listen()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


if __name__ == "__main__":
    # Example usage
    with MockServer() as server:
        response = server.session.get(f"{server.base_url}/items")
        print(response.status_code, response.json())
