"""API tests for /locations."""

import unittest

from api_support import ApiTestCase


class TestLocations(ApiTestCase):
    def test_list_is_featured_then_alphabetical(self) -> None:
        names = [loc["name"] for loc in self.client.get("/api/locations").json()]
        self.assertEqual(
            names,
            ["Arabian Ranches", "Business Bay", "Downtown Dubai", "Dubai Marina", "JBR", "Palm Jumeirah"],
        )

    def test_detail_includes_active_managers(self) -> None:
        response = self.client.get("/api/locations/downtown-dubai")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["properties_count"], 9800)
        self.assertEqual(len(body["managers"]), 11)
        self.assertEqual(body["managers"][0]["slug"], "deluxe-holiday-homes")
        self.assertTrue(all(m["location_slug"] == "downtown-dubai" for m in body["managers"]))

    def test_unknown_location(self) -> None:
        response = self.client.get("/api/locations/atlantis")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Location not found"})

    def test_featured_filter(self) -> None:
        admin = self.admin_headers()
        self.client.post(
            "/api/locations", headers=admin, json={"name": "Al Barsha", "slug": "al-barsha"}
        )
        featured = self.client.get("/api/locations", params={"featured": "true"}).json()
        self.assertNotIn("al-barsha", {loc["slug"] for loc in featured})
        everything = self.client.get("/api/locations").json()
        self.assertEqual(everything[-1]["slug"], "al-barsha")

    def test_create_update_delete(self) -> None:
        admin = self.admin_headers()
        created = self.client.post(
            "/api/locations",
            headers=admin,
            json={"name": "JVC", "slug": "jvc", "avg_daily_rate": 450, "occupancy_rate": 61},
        )
        self.assertEqual(created.status_code, 201)
        location_id = created.json()["id"]

        updated = self.client.put(
            f"/api/locations/{location_id}",
            headers=admin,
            json={"description": "Jumeirah Village Circle", "is_featured": True},
        )
        self.assertEqual(updated.status_code, 200)
        detail = self.client.get("/api/locations/jvc").json()
        self.assertEqual(detail["description"], "Jumeirah Village Circle")
        self.assertEqual(detail["avg_daily_rate"], 450)
        self.assertTrue(detail["is_featured"])

        self.assertEqual(self.client.delete(f"/api/locations/{location_id}", headers=admin).status_code, 200)
        self.assertEqual(self.client.delete(f"/api/locations/{location_id}", headers=admin).status_code, 404)

    def test_empty_update_rejected(self) -> None:
        response = self.client.put(
            "/api/locations/1", headers=self.admin_headers(), json={"managers": []}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No fields to update"})

    def test_duplicate_slug_conflicts(self) -> None:
        admin = self.admin_headers()
        created = self.client.post("/api/locations", headers=admin, json={"name": "JBR 2", "slug": "jbr"})
        self.assertEqual(created.status_code, 409)
        renamed = self.client.put("/api/locations/1", headers=admin, json={"slug": "jbr"})
        self.assertEqual(renamed.status_code, 409)

    def test_location_in_use_cannot_be_deleted(self) -> None:
        location_id = self.client.get("/api/locations/jbr").json()["id"]
        response = self.client.delete(f"/api/locations/{location_id}", headers=self.admin_headers())
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Cannot delete location with existing managers"})


if __name__ == "__main__":
    unittest.main()
