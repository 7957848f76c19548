"""End-to-end tests of the REST API over a SQLite database."""

import pytest


def identity(user_id: int, role: str = "student") -> dict[str, str]:
    """Identity headers as set by the upstream identity provider."""
    return {"X-User-Id": str(user_id), "X-User-Role": role}


OWNER_ID, ADMIN_ID, STRANGER_ID = 42, 7, 99

OWNER = identity(OWNER_ID)
ADMIN = identity(ADMIN_ID, "admin")
STRANGER = identity(STRANGER_ID)

FORM = {"personalInfo": {"firstName": "Ada", "lastName": "Lovelace"}}


async def create_application(client, form=FORM):
    response = await client.post("/api/applications", json={"form_data": form}, headers=OWNER)
    assert response.status_code == 201
    return response.json()


class TestIdentity:
    """Test identity header handling."""

    @pytest.mark.asyncio
    async def test_missing_identity_is_unauthorized(self, client):
        response = await client.get("/api/applications")
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "headers",
        [
            {"X-User-Id": "abc"},
            {"X-User-Id": "0"},
            {"X-User-Id": "42", "X-User-Role": "superuser"},
        ],
    )
    async def test_malformed_identity_is_unauthorized(self, client, headers):
        response = await client.get("/api/applications", headers=headers)
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_health_needs_no_identity(self, client):
        response = await client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestApplicationRoutes:
    """Test the application CRUD routes."""

    @pytest.mark.asyncio
    async def test_create_returns_draft(self, client):
        body = await create_application(client)

        assert body["status"] == "draft"
        assert body["user_id"] == OWNER_ID
        assert body["form_data"] == FORM

    @pytest.mark.asyncio
    async def test_create_without_body_fields_uses_empty_form(self, client):
        response = await client.post("/api/applications", json={}, headers=OWNER)
        assert response.status_code == 201
        assert response.json()["form_data"] == {}

    @pytest.mark.asyncio
    async def test_create_with_non_object_form_is_bad_request(self, client):
        response = await client.post(
            "/api/applications", json={"form_data": ["a"]}, headers=OWNER
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"

    @pytest.mark.asyncio
    async def test_list_and_get(self, client):
        created = await create_application(client)

        own = await client.get("/api/applications", headers=OWNER)
        theirs = await client.get("/api/applications", headers=STRANGER)
        everything = await client.get("/api/applications", headers=ADMIN)
        single = await client.get(f"/api/applications/{created['id']}", headers=ADMIN)

        assert [app["id"] for app in own.json()] == [created["id"]]
        assert theirs.json() == []
        assert len(everything.json()) == 1
        assert single.json()["id"] == created["id"]

    @pytest.mark.asyncio
    async def test_get_is_forbidden_for_strangers(self, client):
        created = await create_application(client)
        response = await client.get(f"/api/applications/{created['id']}", headers=STRANGER)
        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_get_missing_application(self, client):
        response = await client.get("/api/applications/999", headers=ADMIN)
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_form_only_while_draft(self, client):
        created = await create_application(client)
        url = f"/api/applications/{created['id']}"

        edited = await client.put(url, json={"form_data": {"essay": "v2"}}, headers=OWNER)
        await client.put(f"{url}/status", json={"status": "submitted"}, headers=OWNER)
        locked = await client.put(url, json={"form_data": {"essay": "v3"}}, headers=OWNER)

        assert edited.status_code == 200
        assert edited.json()["form_data"] == {"essay": "v2"}
        assert locked.status_code == 403


class TestStatusWorkflow:
    """Test the status, notes and history routes."""

    @pytest.mark.asyncio
    async def test_full_review_cycle(self, client):
        """Test submit, note, review and accept with the trail in order."""
        created = await create_application(client)
        url = f"/api/applications/{created['id']}"

        submitted = await client.put(f"{url}/status", json={"status": "submitted"}, headers=OWNER)
        note = await client.post(f"{url}/notes", json={"notes": "Needs transcript"}, headers=ADMIN)
        review = await client.put(f"{url}/status", json={"status": "review"}, headers=ADMIN)
        accepted = await client.put(
            f"{url}/status", json={"status": "accepted", "notes": "Congrats"}, headers=ADMIN
        )
        history = await client.get(f"{url}/history", headers=OWNER)

        assert submitted.json()["status"] == "submitted"
        assert note.status_code == 201
        assert note.json()["status"] is None
        assert note.json()["created_by"] == ADMIN_ID
        assert review.json()["status"] == "review"
        assert accepted.json()["status"] == "accepted"

        entries = history.json()
        assert [entry["status"] for entry in entries] == [
            "draft", "submitted", None, "review", "accepted",
        ]
        assert entries[-1]["notes"] == "Congrats"
        assert entries[-1]["created_by"] == ADMIN_ID

    @pytest.mark.asyncio
    async def test_history_newest_first(self, client):
        created = await create_application(client)
        url = f"/api/applications/{created['id']}"
        await client.put(f"{url}/status", json={"status": "submitted"}, headers=OWNER)

        response = await client.get(f"{url}/history", params={"order": "desc"}, headers=OWNER)

        assert [entry["status"] for entry in response.json()] == ["submitted", "draft"]

    @pytest.mark.asyncio
    async def test_history_bad_order_is_bad_request(self, client):
        created = await create_application(client)
        response = await client.get(
            f"/api/applications/{created['id']}/history",
            params={"order": "sideways"},
            headers=OWNER,
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_double_submission_conflicts(self, client):
        created = await create_application(client)
        url = f"/api/applications/{created['id']}/status"

        await client.put(url, json={"status": "submitted"}, headers=OWNER)
        response = await client.put(url, json={"status": "submitted"}, headers=OWNER)

        assert response.status_code == 409
        assert response.json()["code"] == "INVALID_TRANSITION"

    @pytest.mark.asyncio
    async def test_student_cannot_accept(self, client):
        created = await create_application(client)
        response = await client.put(
            f"/api/applications/{created['id']}/status",
            json={"status": "accepted"},
            headers=OWNER,
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_stranger_cannot_submit(self, client):
        created = await create_application(client)
        response = await client.put(
            f"/api/applications/{created['id']}/status",
            json={"status": "submitted"},
            headers=STRANGER,
        )
        history = await client.get(f"/api/applications/{created['id']}/history", headers=OWNER)

        assert response.status_code == 403
        assert len(history.json()) == 1

    @pytest.mark.asyncio
    async def test_unknown_status_is_bad_request(self, client):
        created = await create_application(client)
        response = await client.put(
            f"/api/applications/{created['id']}/status",
            json={"status": "waitlisted"},
            headers=ADMIN,
        )
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_admin_reset_to_draft_conflicts(self, client):
        created = await create_application(client)
        response = await client.put(
            f"/api/applications/{created['id']}/status",
            json={"status": "draft"},
            headers=ADMIN,
        )
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_student_note_is_forbidden(self, client):
        created = await create_application(client)
        response = await client.post(
            f"/api/applications/{created['id']}/notes", json={"notes": "hi"}, headers=OWNER
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_blank_note_is_bad_request(self, client):
        created = await create_application(client)
        response = await client.post(
            f"/api/applications/{created['id']}/notes", json={"notes": "  "}, headers=ADMIN
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_status_of_missing_application(self, client):
        response = await client.put(
            "/api/applications/4040/status", json={"status": "review"}, headers=ADMIN
        )
        assert response.status_code == 404


class TestDocumentRoutes:
    """Test the document metadata routes."""

    @pytest.mark.asyncio
    async def test_register_and_list(self, client):
        created = await create_application(client)
        url = f"/api/applications/{created['id']}/documents"

        registered = await client.post(
            url,
            json={"file_name": "transcript.pdf", "storage_path": "docs/1/transcript.pdf"},
            headers=OWNER,
        )
        listed = await client.get(url, headers=ADMIN)

        assert registered.status_code == 201
        assert registered.json()["application_id"] == created["id"]
        assert [doc["file_name"] for doc in listed.json()] == ["transcript.pdf"]

    @pytest.mark.asyncio
    async def test_disallowed_type_is_bad_request(self, client):
        created = await create_application(client)
        response = await client.post(
            f"/api/applications/{created['id']}/documents",
            json={"file_name": "run.exe", "storage_path": "docs/1/run.exe"},
            headers=OWNER,
        )
        assert response.status_code == 400
        assert "Invalid file type" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_strangers_cannot_list(self, client):
        created = await create_application(client)
        response = await client.get(
            f"/api/applications/{created['id']}/documents", headers=STRANGER
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_bad_file_on_missing_application_is_not_found(self, client):
        response = await client.post(
            "/api/applications/4040/documents",
            json={"file_name": "run.exe", "storage_path": "docs/run.exe"},
            headers=ADMIN,
        )
        assert response.status_code == 404
