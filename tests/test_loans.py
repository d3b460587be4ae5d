"""
Loan catalog: create, list, lookup by id.
"""
import unittest
from unittest.mock import patch

from support import ApiTestCase, T0


class TestLoanRoutes(ApiTestCase):
    async def test_create_stamps_created_at(self):
        with patch("services.loans.utcnow", return_value=T0):
            resp = await self.client.post(
                "/loans",
                json={"title": "Small Business", "interestRate": 7.5, "createdAt": "1999-01-01", "id": "x"},
            )
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["title"], "Small Business")
        self.assertEqual(data["interestRate"], 7.5)
        self.assertEqual(data["createdAt"], "2026-01-15T09:30:00+00:00")
        self.assertTrue(data["id"].startswith("loan-"))

    async def test_get_by_id(self):
        created = (await self.client.post("/loans", json={"title": "Home"})).json()
        resp = await self.client.get(f"/loans/{created['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), created)

    async def test_get_missing_is_null(self):
        resp = await self.client.get("/loans/loan-missing")
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.json())

    async def test_list_and_retry_duplicates(self):
        """Creating is not idempotent: posting the same terms twice yields two offers."""
        for _ in range(2):
            await self.client.post("/loans", json={"title": "Car"})
        loans = (await self.client.get("/loans")).json()
        self.assertEqual(len(loans), 2)
        self.assertEqual({loan["title"] for loan in loans}, {"Car"})
        self.assertEqual(len({loan["id"] for loan in loans}), 2)

    async def test_rejects_non_object_body(self):
        resp = await self.client.post("/loans", json=["not", "an", "object"])
        self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
