import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from rng_coin.config import settings, COIN_PATH
from rng_coin.main import create_app
from rng_coin.routers import rng as rng_router

SIDES = {"heads", "tails"}


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        # Create a new app instance for each test to ensure a clean state
        self.app = create_app()
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def assertErrorBody(self, response, name, status):
        self.assertEqual(response.status_code, status)
        error = response.json()["error"]
        self.assertEqual(error["name"], name)
        self.assertEqual(error["status"], status)
        self.assertIsInstance(error["message"], str)


class TestIndexPage(ApiTestCase):
    def test_index_paths_render_links(self):
        for path in ("/", "/index"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertEqual(response.status_code, 200)
                self.assertTrue(response.headers["content-type"].startswith("text/html"))
                self.assertIn(f'href="{COIN_PATH}"', response.text)
                self.assertIn(
                    f'href="{COIN_PATH}/{settings.coin.example_flips}"', response.text
                )
                self.assertIn("/rng/coin/{flips}", response.text)


class TestSingleFlip(ApiTestCase):
    def test_single_flip(self):
        response = self.client.get("/rng/coin")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(list(body), ["coin-flip"])
        self.assertIn(body["coin-flip"], SIDES)

    def test_single_flip_both_sides_appear(self):
        results = [self.client.get("/rng/coin").json()["coin-flip"] for _ in range(1000)]
        heads = results.count("heads")
        # sigma is ~16, so this is a wide bound
        self.assertGreater(heads, 400)
        self.assertLess(heads, 600)

    def test_wrong_method(self):
        response = self.client.post("/rng/coin")
        self.assertErrorBody(response, "MethodNotAllowed", 405)


class TestMultiFlip(ApiTestCase):
    def test_every_valid_count(self):
        for n in range(2, 101):
            response = self.client.get(f"/rng/coin/{n}")
            self.assertEqual(response.status_code, 200, n)
            flips = response.json()["coin-flips"]
            self.assertEqual(len(flips), n)
            self.assertTrue(set(flips) <= SIDES)

    def test_out_of_range_counts(self):
        for raw in ("1", "101", "-1", "0"):
            with self.subTest(raw=raw):
                response = self.client.get(f"/rng/coin/{raw}")
                self.assertErrorBody(response, "RangeError", 422)

    def test_huge_integer_count_is_range_error(self):
        response = self.client.get("/rng/coin/" + "9" * 5000)
        self.assertErrorBody(response, "RangeError", 422)

    def test_non_integer_counts(self):
        for raw in ("abc", "3.5", "1e2"):
            with self.subTest(raw=raw):
                response = self.client.get(f"/rng/coin/{raw}")
                self.assertErrorBody(response, "InputError", 422)

    def test_invalid_count_never_flips(self):
        with patch.object(rng_router.coin, "flip_many") as mock_flip_many:
            for raw in ("abc", "1", "3.5"):
                self.client.get(f"/rng/coin/{raw}")
            mock_flip_many.assert_not_called()

    def test_configured_bounds(self):
        original = settings.coin.max_flips
        settings.coin.max_flips = 11
        try:
            self.assertEqual(self.client.get("/rng/coin/10").status_code, 200)
            response = self.client.get("/rng/coin/11")
            self.assertErrorBody(response, "RangeError", 422)
            self.assertIn("[2, 11)", response.json()["error"]["message"])
        finally:
            settings.coin.max_flips = original


class TestErrors(ApiTestCase):
    def test_unmatched_path(self):
        for path in ("/nope", "/rng", "/rng/coin/5/6"):
            with self.subTest(path=path):
                response = self.client.get(path)
                self.assertErrorBody(response, "NotFound", 404)

    def test_unexpected_failure_is_internal_error(self):
        with patch.object(rng_router.coin, "flip", side_effect=RuntimeError("secret detail")):
            response = self.client.get("/rng/coin")
        self.assertErrorBody(response, "InternalError", 500)
        self.assertNotIn("secret detail", response.text)


if __name__ == "__main__":
    unittest.main()
