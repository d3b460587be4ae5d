"""
App-level routes and store failure handling.
"""
import unittest

from support import ApiTestCase


class TestAppRoutes(ApiTestCase):
    async def test_root_banner(self):
        resp = await self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.text.startswith("LoanLink Server is running on port"))

    async def test_health(self):
        resp = await self.client.get("/health")
        self.assertEqual(resp.json(), {"status": "ok"})


class TestStoreFailure(ApiTestCase):
    create_tables = False

    async def test_store_error_is_500_with_message(self):
        resp = await self.client.get("/loans")
        self.assertEqual(resp.status_code, 500)
        self.assertIn("no such table", resp.json()["detail"])

    async def test_write_failure_is_500(self):
        resp = await self.client.post("/loan-applications", json={"applicantEmail": "a@x.com"})
        self.assertEqual(resp.status_code, 500)
        self.assertIn("loan_applications", resp.json()["detail"])


if __name__ == "__main__":
    unittest.main()
