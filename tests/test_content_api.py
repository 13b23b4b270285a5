"""API tests for /content (About page and contact form) and /health."""

import unittest

from api_support import ApiTestCase

CONTACT = {
    "name": "Omar",
    "email": "omar@example.com",
    "subject": "Listing question",
    "message": "How do I get featured?",
}


class TestAboutPage(ApiTestCase):
    def test_default_copy_until_saved(self) -> None:
        about = self.client.get("/api/content/about").json()
        self.assertEqual(about["title"], "About BNBinsights")
        self.assertIn("Transparency", about["values"])

    def test_admin_saves_page(self) -> None:
        admin = self.admin_headers()
        body = {
            "title": "Who we are",
            "subtitle": "Dubai's rental directory",
            "mission": "Clarity for owners",
            "story": "Founded in 2024",
            "values": "Honesty",
            "stats": {"managers": 36},
        }
        self.assertEqual(self.client.put("/api/content/about", headers=admin, json=body).status_code, 200)
        about = self.client.get("/api/content/about").json()
        self.assertEqual(about["title"], "Who we are")
        self.assertEqual(about["values"], "Honesty")
        self.assertEqual(about["stats"], {"managers": 36})

        body["title"] = "Who we are now"
        self.client.put("/api/content/about", headers=admin, json=body)
        self.assertEqual(self.client.get("/api/content/about").json()["title"], "Who we are now")


class TestContactForm(ApiTestCase):
    def test_submission_is_stored_with_default_inquiry_type(self) -> None:
        response = self.client.post("/api/content/contact", json=CONTACT)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"message": "Message sent successfully"})
        self.client.post("/api/content/contact", json={**CONTACT, "inquiryType": "partnership"})

        submissions = self.client.get(
            "/api/content/contact/submissions", headers=self.admin_headers()
        ).json()
        self.assertEqual(len(submissions), 2)
        self.assertEqual(
            {s["inquiry_type"] for s in submissions}, {"general", "partnership"}
        )

    def test_missing_fields(self) -> None:
        for field in CONTACT:
            with self.subTest(field=field):
                response = self.client.post("/api/content/contact", json={**CONTACT, field: " "})
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": "All fields are required"})


class TestHealthAndFallbacks(ApiTestCase):
    def test_health_reports_database(self) -> None:
        body = self.client.get("/api/health").json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["environment"], "dev")

    def test_unknown_api_route_uses_error_envelope(self) -> None:
        response = self.client.get("/api/nothing-here")
        self.assertEqual(response.status_code, 404)
        self.assertIn("error", response.json())


if __name__ == "__main__":
    unittest.main()
