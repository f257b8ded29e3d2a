"""End-to-end tests for events, gamification and resource engagement."""

from portal.domain.value import Role
from tests.harness import bearer

EVENT = {
    "title": "Machine learning seminar",
    "date": "2026-11-12T00:00:00Z",
    "time": "15:00",
    "location": "Room 204",
    "type": "seminar",
    "capacity": 2,
    "price": 0,
}


class TestEvents:
    def test_event_lifecycle(self, client, seed):
        # Arrange
        admin = seed(role=Role.ADMIN)
        student = seed()
        admin_headers = bearer(client, admin.email)
        student_headers = bearer(client, student.email)

        # Act
        refused = client.post("/events", json=EVENT, headers=student_headers)
        created = client.post("/events", json=EVENT, headers=admin_headers)
        event_id = created.json()["event"]["id"]
        listed = client.get("/events")
        updated = client.put(
            f"/events/{event_id}", json={"location": "Room 301"}, headers=admin_headers
        )
        deleted = client.delete(f"/events/{event_id}", headers=admin_headers)
        gone = client.get(f"/events/{event_id}")

        # Assert
        assert refused.status_code == 403
        assert created.status_code == 201
        assert [e["id"] for e in listed.json()["events"]] == [event_id]
        assert updated.json()["event"]["location"] == "Room 301"
        assert updated.json()["event"]["capacity"] == 2
        assert deleted.json()["success"] is True
        assert gone.status_code == 404

    def test_registration_is_idempotent_and_capped(self, client, seed):
        # Arrange
        admin = seed(role=Role.ADMIN)
        first = seed(email="first@example.com")
        second = seed()
        late = seed()
        admin_headers = bearer(client, admin.email)
        first_headers = bearer(client, first.email)
        event_id = client.post("/events", json=EVENT, headers=admin_headers).json()[
            "event"
        ]["id"]

        # Act
        registered = client.post(f"/events/{event_id}/register", headers=first_headers)
        again = client.post(f"/events/{event_id}/register", headers=first_headers)
        client.post(
            f"/events/{event_id}/register", headers=bearer(client, second.email)
        )
        full = client.post(f"/events/{event_id}/register", headers=bearer(client, late.email))
        event = client.get(f"/events/{event_id}")
        attendees = client.get(
            f"/events/{event_id}/registrations", headers=admin_headers
        )
        hidden = client.get(f"/events/{event_id}/registrations", headers=first_headers)
        mine = client.get("/user/event-registrations", headers=first_headers)

        # Assert
        assert registered.status_code == 201
        assert registered.json()["created"] is True
        assert again.status_code == 200
        assert again.json()["registration"]["id"] == registered.json()["registration"]["id"]
        assert full.status_code == 409
        assert full.json()["kind"] == "event_full"
        assert event.json()["event"]["registered_count"] == 2
        assert attendees.json()["total"] == 2
        assert "first@example.com" in {
            r["user"]["email"] for r in attendees.json()["registrations"]
        }
        assert hidden.status_code == 403
        assert [r["event_id"] for r in mine.json()["registrations"]] == [event_id]

    def test_anonymous_cannot_register(self, client, seed):
        admin = seed(role=Role.ADMIN)
        event_id = client.post(
            "/events", json=EVENT, headers=bearer(client, admin.email)
        ).json()["event"]["id"]

        response = client.post(f"/events/{event_id}/register")

        assert response.status_code == 401


class TestResourceEngagement:
    def test_download_and_rate(self, client, seed):
        # Arrange
        admin = seed(role=Role.ADMIN)
        student = seed()
        admin_headers = bearer(client, admin.email)
        student_headers = bearer(client, student.email)
        resource_id = client.post(
            "/resources",
            json={
                "title": "Compilers notes",
                "type": "pdf",
                "file_url": "https://files.example.edu/compilers.pdf",
            },
            headers=admin_headers,
        ).json()["resource"]["id"]

        # Act
        client.post(f"/resources/{resource_id}/download", headers=student_headers)
        downloaded = client.post(
            f"/resources/{resource_id}/download", headers=student_headers
        )
        client.post(
            f"/resources/{resource_id}/rate", json={"rating": 2}, headers=student_headers
        )
        rated = client.post(
            f"/resources/{resource_id}/rate", json={"rating": 4}, headers=student_headers
        )
        out_of_range = client.post(
            f"/resources/{resource_id}/rate", json={"rating": 6}, headers=student_headers
        )
        overview = client.get("/admin/analytics/overview", headers=admin_headers)

        # Assert
        assert downloaded.json()["downloads"] == 2
        assert rated.json()["resource"]["average_rating"] == 4.0
        assert rated.json()["resource"]["rating_count"] == 1
        assert out_of_range.status_code == 400
        assert overview.json()["total_resource_downloads"] == 2


class TestGamificationAndAnalytics:
    def test_stats_badges_and_leaderboard(self, client, seed):
        admin = seed(role=Role.ADMIN)
        student = seed()
        other = seed()
        headers = bearer(client, student.email)
        client.post("/blogs", json={"title": "Notes", "content": "Body"}, headers=headers)

        stats = client.get(f"/gamification/user-stats/{student.id}", headers=headers)
        badges = client.get(f"/gamification/badges/{student.id}", headers=headers)
        snooping = client.get(f"/gamification/user-stats/{other.id}", headers=headers)
        as_admin = client.get(
            f"/gamification/badges/{student.id}", headers=bearer(client, admin.email)
        )
        leaders = client.get("/gamification/leaderboard", headers=headers)

        assert stats.json()["xp"] == 50
        assert len(badges.json()["badges"]) == 6
        assert snooping.status_code == 403
        assert as_admin.status_code == 200
        assert leaders.json()["leaders"][0]["user_id"] == str(student.id)

    def test_top_blogs_and_recent_activity(self, client, seed):
        admin = seed(role=Role.ADMIN)
        student = seed()
        headers = bearer(client, admin.email)
        post = client.post(
            "/blogs", json={"title": "Welcome", "content": "Hello"}, headers=headers
        ).json()["post"]
        client.get(f"/blogs/{post['id']}", headers=headers)

        top = client.get("/admin/analytics/top-blogs", headers=headers)
        activity = client.get("/admin/analytics/recent-activity", headers=headers)
        refused = client.get(
            "/admin/analytics/top-blogs", headers=bearer(client, student.email)
        )

        assert top.json()["blogs"] == [
            {"id": post["id"], "title": "Welcome", "views": 1, "likes": 0}
        ]
        assert "Blog post created" in {a["action"] for a in activity.json()["activities"]}
        assert refused.status_code == 403
