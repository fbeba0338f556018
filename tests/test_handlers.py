import unittest

import requests

from mocks.server import MockServer
from utils.helpers import error_response, format_response

BASE_URL = "http://localhost:4000"

class TestMockRequestHandler(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.server = MockServer(base_url=BASE_URL)
        cls.server.listen()
        cls.session = cls.server.session

    def tearDown(self):
        self.server.reset_handlers()
        self.server.reset_data()

    @classmethod
    def tearDownClass(cls):
        cls.server.close()

    def test_list_items(self):
        response = self.session.get(f"{BASE_URL}/items")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["name"] for item in response.json()], ["Yogurt", "Pomegranate", "Lettuce"])

    def test_create_item(self):
        response = self.session.post(f"{BASE_URL}/items", json={"name": "Ice Cream", "category": "Dessert"})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"id": 4, "name": "Ice Cream", "category": "Dessert", "isInCart": False})
        self.assertEqual(len(self.server.store), 4)

    def test_create_item_missing_fields(self):
        response = self.session.post(f"{BASE_URL}/items", json={"name": "Ice Cream"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

    def test_create_item_with_non_object_body(self):
        response = self.session.post(f"{BASE_URL}/items", json=["Ice Cream"])
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())
        self.assertEqual(len(self.server.store), 3)

    def test_malformed_json_body(self):
        headers = {"Content-Type": "application/json"}
        response = self.session.post(f"{BASE_URL}/items", data="{not json", headers=headers)
        self.assertEqual(response.status_code, 400)
        response = self.session.patch(f"{BASE_URL}/items/1", data="{not json", headers=headers)
        self.assertEqual(response.status_code, 400)
        self.assertFalse(self.server.store.get(1).is_in_cart)

    def test_patch_without_body_toggles(self):
        response = self.session.patch(f"{BASE_URL}/items/1")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["isInCart"])
        response = self.session.patch(f"{BASE_URL}/items/1")
        self.assertFalse(response.json()["isInCart"])

    def test_patch_with_body_sets_flag(self):
        response = self.session.patch(f"{BASE_URL}/items/2", json={"isInCart": True})
        self.assertTrue(response.json()["isInCart"])
        self.assertTrue(self.server.store.get(2).is_in_cart)

    def test_delete_item(self):
        response = self.session.delete(f"{BASE_URL}/items/1")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.content, b"")
        self.assertNotIn(1, [item.id for item in self.server.store.list()])

    def test_delete_then_add_does_not_reuse_id(self):
        self.session.delete(f"{BASE_URL}/items/3")
        created = self.session.post(f"{BASE_URL}/items", json={"name": "Milk", "category": "Dairy"}).json()
        self.assertNotEqual(created["id"], 3)
        response = self.session.delete(f"{BASE_URL}/items/3")
        self.assertEqual(response.status_code, 404)
        self.assertIn("Milk", [item.name for item in self.server.store.list()])

    def test_missing_item_is_404(self):
        for method in ("PATCH", "DELETE"):
            response = self.session.request(method, f"{BASE_URL}/items/99")
            self.assertEqual(response.status_code, 404)
            self.assertIn("99", response.json()["error"])
            with self.assertRaises(requests.HTTPError):
                response.raise_for_status()

    def test_unhandled_request(self):
        with self.assertRaises(requests.exceptions.ConnectionError):
            self.session.get(f"{BASE_URL}/orders")

    def test_override_takes_precedence_until_reset(self):
        self.server.use("GET", "/items", lambda request: error_response("down", 500))
        self.assertEqual(self.session.get(f"{BASE_URL}/items").status_code, 500)
        self.server.reset_handlers()
        self.assertEqual(self.session.get(f"{BASE_URL}/items").status_code, 200)

    def test_override_of_item_route(self):
        seen = []

        def callback(request):
            seen.append(request.url)
            return format_response(status_code=204)

        self.server.use("DELETE", "/items/:id", callback)
        self.session.delete(f"{BASE_URL}/items/2")
        self.session.delete(f"{BASE_URL}/items/3")
        self.assertEqual(seen, [f"{BASE_URL}/items/2", f"{BASE_URL}/items/3"])
        self.assertEqual(len(self.server.store), 3)


class TestMockServerLifecycle(unittest.TestCase):
    def test_listen_and_close_are_idempotent(self):
        server = MockServer(base_url=BASE_URL)
        server.listen()
        server.listen()
        self.assertTrue(server.listening)
        self.assertEqual(server.session.get(f"{BASE_URL}/items").status_code, 200)
        server.close()
        server.close()
        self.assertFalse(server.listening)

    def test_server_can_listen_again_after_close(self):
        server = MockServer(base_url=BASE_URL)
        with server:
            server.use("GET", "/items", lambda request: error_response("down", 500))
        with server:
            self.assertEqual(server.session.get(f"{BASE_URL}/items").status_code, 200)

    def test_base_url_with_path(self):
        with MockServer(base_url="http://example.test/api") as server:
            response = server.session.get("http://example.test/api/items")
            self.assertEqual(len(response.json()), 3)
            self.assertEqual(server.session.delete("http://example.test/api/items/1").status_code, 204)

    def test_servers_do_not_share_data(self):
        with MockServer() as first:
            first.session.delete(f"{BASE_URL}/items/1")
            self.assertEqual(len(first.store), 2)
        with MockServer() as second:
            self.assertEqual(len(second.session.get(f"{BASE_URL}/items").json()), 3)

if __name__ == "__main__":
    unittest.main()
