"""End-to-end tests for blogs, comments, likes, polls and resources."""

from portal.domain.value import Role
from tests.harness import bearer


class TestBlogEngagement:
    """Likes and views through the API."""

    def test_like_is_unique_and_per_viewer(self, client, seed):
        # Arrange
        admin = seed(role=Role.ADMIN)
        student = seed()
        admin_headers = bearer(client, admin.email)
        student_headers = bearer(client, student.email)
        post = client.post(
            "/blogs", json={"title": "Welcome", "content": "Hello"}, headers=admin_headers
        ).json()["post"]

        # Act
        first = client.post(f"/blogs/{post['id']}/like", headers=student_headers)
        second = client.post(f"/blogs/{post['id']}/like", headers=student_headers)
        as_student = client.get(f"/blogs/{post['id']}", headers=student_headers)
        anonymous = client.get(f"/blogs/{post['id']}")
        as_admin = client.get(f"/blogs/{post['id']}", headers=admin_headers)

        # Assert
        assert post["published"] is True
        assert first.json()["likes_count"] == 1
        assert second.json()["likes_count"] == 1
        assert as_student.json()["post"]["likes_count"] == 1
        assert as_student.json()["post"]["is_liked_by_user"] is True
        assert anonymous.json()["post"]["is_liked_by_user"] is False
        assert as_admin.json()["post"]["is_liked_by_user"] is False
        assert as_admin.json()["post"]["views"] == 2

    def test_unlike(self, client, seed):
        admin = seed(role=Role.ADMIN)
        headers = bearer(client, admin.email)
        post = client.post(
            "/blogs", json={"title": "Welcome", "content": "Hello"}, headers=headers
        ).json()["post"]
        client.post(f"/blogs/{post['id']}/like", headers=headers)

        first = client.delete(f"/blogs/{post['id']}/like", headers=headers)
        second = client.delete(f"/blogs/{post['id']}/like", headers=headers)

        assert first.json()["likes_count"] == 0
        assert second.json()["likes_count"] == 0
        assert second.json()["is_liked_by_user"] is False

    def test_anonymous_cannot_like(self, client, seed):
        admin = seed(role=Role.ADMIN)
        headers = bearer(client, admin.email)
        post = client.post(
            "/blogs", json={"title": "Welcome", "content": "Hello"}, headers=headers
        ).json()["post"]

        response = client.post(f"/blogs/{post['id']}/like")

        assert response.status_code == 401

    def test_draft_hidden_until_moderated(self, client, seed):
        admin = seed(role=Role.ADMIN)
        student = seed()
        admin_headers = bearer(client, admin.email)
        student_headers = bearer(client, student.email)
        draft = client.post(
            "/blogs", json={"title": "My week", "content": "Notes"}, headers=student_headers
        ).json()["post"]

        hidden = client.get(f"/blogs/{draft['id']}")
        own = client.get(f"/blogs/{draft['id']}", headers=student_headers)
        refused = client.put(
            f"/blogs/{draft['id']}/moderation",
            json={"published": True},
            headers=student_headers,
        )
        moderated = client.put(
            f"/blogs/{draft['id']}/moderation",
            json={"published": True, "featured": True},
            headers=admin_headers,
        )
        listed = client.get("/blogs")

        assert draft["published"] is False
        assert hidden.status_code == 404
        assert hidden.json()["kind"] == "not_found"
        assert own.status_code == 200
        assert refused.status_code == 403
        assert moderated.json()["post"]["featured"] is True
        assert [p["id"] for p in listed.json()["posts"]] == [draft["id"]]

    def test_unknown_post(self, client):
        response = client.get("/blogs/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404


class TestComments:
    def test_comment_thread(self, client, seed):
        # Arrange
        admin = seed(role=Role.ADMIN)
        student = seed()
        admin_headers = bearer(client, admin.email)
        student_headers = bearer(client, student.email)
        post = client.post(
            "/blogs", json={"title": "Welcome", "content": "Hello"}, headers=admin_headers
        ).json()["post"]

        # Act
        root = client.post(
            f"/blogs/{post['id']}/comments",
            json={"content": "First!"},
            headers=student_headers,
        )
        root_id = root.json()["comment"]["id"]
        reply = client.post(
            f"/blogs/{post['id']}/comments",
            json={"content": "Welcome aboard", "parent_comment_id": root_id},
            headers=admin_headers,
        )
        liked = client.post(f"/comments/{root_id}/like", headers=admin_headers)
        listed = client.get(f"/blogs/{post['id']}/comments", headers=admin_headers)
        deleted = client.delete(f"/comments/{root_id}", headers=student_headers)
        after = client.get(f"/blogs/{post['id']}/comments")

        # Assert
        assert root.status_code == 201
        assert reply.json()["comment"]["parent_comment_id"] == root_id
        assert liked.json()["likes_count"] == 1
        flags = {c["id"]: c["is_liked_by_user"] for c in listed.json()["comments"]}
        assert flags[root_id] is True
        assert deleted.json()["deleted"] == 2
        assert after.json()["comments"] == []

    def test_stranger_cannot_delete_comment(self, client, seed):
        admin = seed(role=Role.ADMIN)
        stranger = seed(role=Role.ALUMNUS)
        admin_headers = bearer(client, admin.email)
        post = client.post(
            "/blogs", json={"title": "Welcome", "content": "Hello"}, headers=admin_headers
        ).json()["post"]
        comment = client.post(
            f"/blogs/{post['id']}/comments",
            json={"content": "Mine"},
            headers=admin_headers,
        ).json()["comment"]

        response = client.delete(
            f"/comments/{comment['id']}", headers=bearer(client, stranger.email)
        )

        assert response.status_code == 403


class TestPolls:
    def test_poll_lifecycle(self, client, seed):
        # Arrange
        admin = seed(role=Role.ADMIN)
        eligible = seed(level="300L")
        ineligible = seed(level="100L")
        admin_headers = bearer(client, admin.email)
        eligible_headers = bearer(client, eligible.email)
        ineligible_headers = bearer(client, ineligible.email)

        created = client.post(
            "/polls",
            json={
                "question": "Excursion venue?",
                "options": ["Museum", "Tech hub"],
                "target_levels": ["300"],
            },
            headers=admin_headers,
        )
        poll = created.json()["poll"]
        option_id = poll["options"][1]["id"]

        # Act
        vote = client.post(
            f"/polls/{poll['id']}/vote", json={"option_id": option_id}, headers=eligible_headers
        )
        again = client.post(
            f"/polls/{poll['id']}/vote", json={"option_id": option_id}, headers=eligible_headers
        )
        refused = client.post(
            f"/polls/{poll['id']}/vote",
            json={"option_id": option_id},
            headers=ineligible_headers,
        )
        closed = client.post(f"/polls/{poll['id']}/close", headers=admin_headers)
        late = client.post(
            f"/polls/{poll['id']}/vote",
            json={"option_id": poll["options"][0]["id"]},
            headers=admin_headers,
        )
        final = client.get(f"/polls/{poll['id']}", headers=eligible_headers)

        # Assert
        assert created.status_code == 201
        assert vote.status_code == 200
        assert vote.json()["poll"]["total_votes"] == 1
        assert again.status_code == 400
        assert again.json()["kind"] == "duplicate_vote"
        assert refused.json()["kind"] == "eligibility_error"
        assert closed.json()["poll"]["status"] == "closed"
        assert late.json()["kind"] == "poll_closed"
        assert final.json()["poll"]["user_voted_options"] == [option_id]
        assert [o["votes"] for o in final.json()["poll"]["options"]] == [0, 1]

    def test_students_cannot_create_polls(self, client, seed):
        student = seed()

        response = client.post(
            "/polls",
            json={"question": "Q?", "options": ["A", "B"]},
            headers=bearer(client, student.email),
        )

        assert response.status_code == 403

    def test_invalid_option_count(self, client, seed):
        admin = seed(role=Role.ADMIN)

        response = client.post(
            "/polls",
            json={"question": "Q?", "options": ["Only"]},
            headers=bearer(client, admin.email),
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"


class TestResources:
    def test_admin_manages_resources(self, client, seed):
        admin = seed(role=Role.ADMIN)
        student = seed()
        admin_headers = bearer(client, admin.email)
        body = {
            "title": "Operating systems slides",
            "type": "pdf",
            "category": "systems",
            "file_url": "https://files.example.edu/os.pdf",
            "difficulty": "300l",
        }

        refused = client.post("/resources", json=body, headers=bearer(client, student.email))
        created = client.post("/resources", json=body, headers=admin_headers)
        resource_id = created.json()["resource"]["id"]
        listed = client.get("/resources", params={"difficulty": "300l"})
        updated = client.put(
            f"/resources/{resource_id}", json={"title": "OS slides"}, headers=admin_headers
        )
        deleted = client.delete(f"/resources/{resource_id}", headers=admin_headers)
        gone = client.get(f"/resources/{resource_id}")

        assert refused.status_code == 403
        assert created.status_code == 201
        assert [r["id"] for r in listed.json()["resources"]] == [resource_id]
        assert updated.json()["resource"]["title"] == "OS slides"
        assert deleted.json()["success"] is True
        assert gone.status_code == 404


class TestAdminOperations:
    def test_analytics_and_reconcile(self, client, seed):
        admin = seed(role=Role.ADMIN)
        student = seed()
        headers = bearer(client, admin.email)

        overview = client.get("/admin/analytics/overview", headers=headers)
        reconcile = client.post("/admin/maintenance/reconcile", headers=headers)
        refused = client.get(
            "/admin/analytics/overview", headers=bearer(client, student.email)
        )

        assert overview.status_code == 200
        assert overview.json()["total_accounts"] == 2
        assert reconcile.json()["total_fixed"] == 0
        assert refused.status_code == 403

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
