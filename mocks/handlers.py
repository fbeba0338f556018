# Mock request handlers
import logging
import re

import responses

from config import API_BASE_URL, ITEMS_PATH
from data.repository import ItemStore, NotFound
from utils.helpers import error_response, format_response, parse_json_object

logger = logging.getLogger(__name__)


def item_id_from_url(url):
    raw_id = url.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    return int(raw_id) if raw_id.isdigit() else raw_id


class MockRequestHandler:
    """
    Answers item API requests from an ItemStore through responses callbacks.

    While started, every requests call to the base URL is served in-process
    instead of over a socket. Calls that match no route raise
    requests.ConnectionError.
    """
    def __init__(self, store=None, base_url=API_BASE_URL):
        self.store = store if store is not None else ItemStore()
        self.base_url = base_url.rstrip("/")
        self.mock = responses.RequestsMock(assert_all_requests_are_fired=False)
        self._register_routes()

    def route_url(self, path):
        """
        Turns a route path such as "/items/:id" into the URL responses matches.
        """
        if ":" not in path:
            return self.base_url + path
        pattern = re.sub(r":\w+", "[^/]+", re.escape(path))
        return re.compile("^" + re.escape(self.base_url) + pattern + "/?$")

    def _register_routes(self):
        item_url = self.route_url(ITEMS_PATH + "/:id")
        self.mock.add_callback(responses.GET, self.route_url(ITEMS_PATH), callback=self.list_items,
                               content_type="application/json")
        self.mock.add_callback(responses.POST, self.route_url(ITEMS_PATH), callback=self.create_item,
                               content_type="application/json")
        self.mock.add_callback(responses.PATCH, item_url, callback=self.update_item,
                               content_type="application/json")
        self.mock.add_callback(responses.DELETE, item_url, callback=self.delete_item,
                               content_type="application/json")

    def use(self, method, path, callback):
        """
        Replaces the route for method and path, or adds it when there is none.

        The callback receives the request and returns (status, headers, body).
        """
        self.mock.upsert(responses.CallbackResponse(method.upper(), self.route_url(path), callback,
                                                    content_type="application/json"))

    def reset_overrides(self):
        self.mock.reset()
        self._register_routes()

    def start(self):
        self.mock.start()

    def stop(self):
        self.mock.stop()
        self.mock.reset()
        self._register_routes()

    def list_items(self, request):
        logger.debug("GET %s", request.url)
        return format_response([item.to_dict() for item in self.store.list()])

    def create_item(self, request):
        logger.debug("POST %s", request.url)
        try:
            body = parse_json_object(request)
            item = self.store.add(body.get("name"), body.get("category"))
        except ValueError as e:
            return error_response(str(e), 400)
        return format_response(item.to_dict(), 201)

    def update_item(self, request):
        logger.debug("PATCH %s", request.url)
        item_id = item_id_from_url(request.url)
        try:
            body = parse_json_object(request)
        except ValueError as e:
            return error_response(str(e), 400)
        try:
            if isinstance(body.get("isInCart"), bool):
                item = self.store.set_cart(item_id, body["isInCart"])
            else:
                item = self.store.toggle_cart(item_id)
        except NotFound as e:
            return error_response(str(e), 404)
        return format_response(item.to_dict())

    def delete_item(self, request):
        logger.debug("DELETE %s", request.url)
        try:
            self.store.remove(item_id_from_url(request.url))
        except NotFound as e:
            return error_response(str(e), 404)
        return format_response(status_code=204)
