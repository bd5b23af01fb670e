"""
Test the HTTP layer: routing, auth, validation and error rendering.
"""
from unittest.mock import patch

import pytest
from bson import ObjectId
from fastapi import status


JOB_PAYLOAD = {
    "title": "Senior Frontend Developer",
    "company": "TechCorp Inc.",
    "location": "San Francisco, CA",
    "type": "full-time",
    "salary": "$120,000 - $150,000",
    "description": "Build and maintain our web applications with React and TypeScript.",
    "requirements": "React, TypeScript, Next.js",
    "contactEmail": "HR@TechCorp.com",
}

APPLICATION_PAYLOAD = {
    "fullName": "Alex Rodriguez",
    "email": "alex.rodriguez@email.com",
    "phone": "+1-555-0123",
    "coverLetter": "Four years of React experience.",
    "resume": "alex-rodriguez-resume.pdf",
}


@pytest.fixture
def posted_job(test_client, owner):
    _, headers = owner
    response = test_client.post("/api/jobs", json=JOB_PAYLOAD, headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["job"]


class TestAuthFlow:

    def test_register_login_me(self, test_client):
        register = test_client.post("/api/auth/register", json={
            "name": "Emily Davis", "email": "emily@innovatetech.com", "password": "secret123"
        })
        assert register.status_code == status.HTTP_201_CREATED
        assert register.json()["user"]["email"] == "emily@innovatetech.com"
        assert "passwordHash" not in register.json()["user"]

        login = test_client.post("/api/auth/login", json={
            "email": "emily@innovatetech.com", "password": "secret123"
        })
        assert login.status_code == status.HTTP_200_OK
        token = login.json()["token"]

        me = test_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["user"]["name"] == "Emily Davis"

    def test_duplicate_registration(self, test_client, owner):
        response = test_client.post("/api/auth/register", json={
            "name": "John Again", "email": "john@techcorp.com", "password": "secret123"
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "email_registered"

    def test_wrong_password(self, test_client, owner):
        response = test_client.post("/api/auth/login", json={
            "email": "john@techcorp.com", "password": "wrong-password"
        })
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["code"] == "invalid_credentials"

    def test_protected_route_requires_token(self, test_client):
        response = test_client.post("/api/jobs", json=JOB_PAYLOAD)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_garbage_token(self, test_client):
        response = test_client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestJobEndpoints:

    def test_create_job_shapes_response(self, posted_job, owner):
        user, _ = owner
        assert posted_job["contactEmail"] == "hr@techcorp.com"
        assert posted_job["postedBy"] == str(user["_id"])
        assert posted_job["skills"] == ["React", "TypeScript", "Next.js"]
        assert posted_job["logo"] == "TI"
        assert posted_job["posted"] == "Today"
        assert posted_job["remote"] is False
        assert posted_job["applicantCount"] == 0

    def test_create_job_validation(self, test_client, owner):
        _, headers = owner
        payload = dict(JOB_PAYLOAD, title="Dev", type="freelance")
        response = test_client.post("/api/jobs", json=payload, headers=headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "validation_failed"
        assert {d["field"] for d in body["details"]} >= {"title", "type"}

    def test_create_job_requires_type(self, test_client, owner):
        _, headers = owner
        payload = {key: value for key, value in JOB_PAYLOAD.items() if key != "type"}
        response = test_client.post("/api/jobs", json=payload, headers=headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "validation_failed"
        assert [d["field"] for d in body["details"]] == ["type"]

    def test_list_and_get(self, test_client, posted_job):
        response = test_client.get("/api/jobs", params={"page": 1, "limit": 5})
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [j["id"] for j in body["jobs"]] == [posted_job["id"]]
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 1,
            "totalJobs": 1,
            "hasNextPage": False,
            "hasPrevPage": False,
            "limit": 5,
        }

        response = test_client.get(f"/api/jobs/{posted_job['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["job"]["title"] == JOB_PAYLOAD["title"]

    def test_list_limit_out_of_range(self, test_client):
        response = test_client.get("/api/jobs", params={"limit": 101})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "validation_failed"

    def test_get_invalid_and_missing_ids(self, test_client):
        assert test_client.get("/api/jobs/not-an-id").json()["code"] == "invalid_id"
        response = test_client.get(f"/api/jobs/{ObjectId()}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "error": "Job not found", "code": "not_found"}

    def test_update_by_owner(self, test_client, owner, posted_job):
        _, headers = owner
        response = test_client.put(
            f"/api/jobs/{posted_job['id']}", json={"isActive": False}, headers=headers
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["job"]["isActive"] is False

        # Closed jobs disappear from public lookup
        assert test_client.get(f"/api/jobs/{posted_job['id']}").status_code == 404

    def test_update_disallowed_field(self, test_client, owner, posted_job):
        _, headers = owner
        response = test_client.put(
            f"/api/jobs/{posted_job['id']}", json={"postedBy": str(ObjectId())}, headers=headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "invalid_update"

    @pytest.mark.parametrize("field", ["title", "company", "type", "contactEmail", "isActive"])
    def test_update_rejects_null_for_required_field(self, test_client, owner, posted_job, field):
        _, headers = owner
        response = test_client.put(
            f"/api/jobs/{posted_job['id']}", json={field: None}, headers=headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "validation_failed"
        assert [d["field"] for d in body["details"]] == [field]

        # The stored job is untouched and the public listing still renders
        response = test_client.get("/api/jobs")
        assert response.status_code == status.HTTP_200_OK
        [job] = response.json()["jobs"]
        assert job["title"] == JOB_PAYLOAD["title"]
        assert job["company"] == JOB_PAYLOAD["company"]

    def test_update_and_delete_by_non_owner(self, test_client, other_user, posted_job):
        _, headers = other_user
        url = f"/api/jobs/{posted_job['id']}"

        assert test_client.put(url, json={"salary": "$1"}, headers=headers).status_code == 403
        assert test_client.delete(url, headers=headers).status_code == 403

    def test_delete_by_owner(self, test_client, owner, posted_job):
        _, headers = owner
        response = test_client.delete(f"/api/jobs/{posted_job['id']}", headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Job deleted successfully"

    def test_my_jobs(self, test_client, owner, other_user, posted_job):
        _, headers = owner
        response = test_client.get("/api/jobs/user/my-jobs", headers=headers)
        assert [j["id"] for j in response.json()["jobs"]] == [posted_job["id"]]

        _, other_headers = other_user
        response = test_client.get("/api/jobs/user/my-jobs", headers=other_headers)
        assert response.json()["jobs"] == []

    def test_my_jobs_with_applications(self, test_client, owner, posted_job):
        _, headers = owner
        test_client.post(f"/api/jobs/{posted_job['id']}/apply", json=APPLICATION_PAYLOAD)

        response = test_client.get("/api/jobs/user/my-jobs-with-applications", headers=headers)
        [job] = response.json()["jobs"]
        assert job["totalApplications"] == 1
        assert job["pendingApplications"] == 1
        assert job["hiredApplications"] == 0


class TestApplicationEndpoints:

    def test_apply_and_duplicate(self, test_client, posted_job):
        url = f"/api/jobs/{posted_job['id']}/apply"

        first = test_client.post(url, json=APPLICATION_PAYLOAD)
        assert first.status_code == status.HTTP_201_CREATED
        body = first.json()
        assert body["message"] == "Application submitted successfully"
        assert body["application"]["status"] == "pending"
        assert body["application"]["fullName"] == "Alex Rodriguez"

        second = test_client.post(url, json=APPLICATION_PAYLOAD)
        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()["code"] == "duplicate_application"

    def test_apply_to_closed_job(self, test_client, owner, posted_job):
        _, headers = owner
        test_client.put(f"/api/jobs/{posted_job['id']}", json={"isActive": False}, headers=headers)

        response = test_client.post(f"/api/jobs/{posted_job['id']}/apply", json=APPLICATION_PAYLOAD)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "job_inactive"

    def test_apply_validation(self, test_client, posted_job):
        payload = dict(APPLICATION_PAYLOAD, email="not-an-email")
        response = test_client.post(f"/api/jobs/{posted_job['id']}/apply", json=payload)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "validation_failed"

    def test_review_workflow(self, test_client, owner, other_user, posted_job):
        _, owner_headers = owner
        _, other_headers = other_user
        job_id = posted_job["id"]

        application = test_client.post(
            f"/api/jobs/{job_id}/apply", json=APPLICATION_PAYLOAD
        ).json()["application"]

        # Only the owner may list
        assert test_client.get(f"/api/jobs/{job_id}/applications", headers=other_headers).status_code == 403
        listing = test_client.get(f"/api/jobs/{job_id}/applications", headers=owner_headers).json()
        assert listing["job"]["id"] == job_id
        assert listing["stats"] == {"total": 1, "pending": 1, "shortlisted": 0, "rejected": 0, "hired": 0}

        # Only the owner may review
        status_url = f"/api/jobs/{job_id}/applications/{application['id']}/status"
        denied = test_client.put(status_url, json={"status": "hired"}, headers=other_headers)
        assert denied.status_code == 403

        response = test_client.put(
            status_url, json={"status": "shortlisted", "notes": "Call next week"}, headers=owner_headers
        )
        assert response.status_code == status.HTTP_200_OK
        updated = response.json()["application"]
        assert updated["status"] == "shortlisted"
        assert updated["notes"] == "Call next week"
        assert updated["reviewedAt"] is not None

    def test_invalid_status_value(self, test_client, owner, posted_job):
        _, headers = owner
        application = test_client.post(
            f"/api/jobs/{posted_job['id']}/apply", json=APPLICATION_PAYLOAD
        ).json()["application"]

        response = test_client.put(
            f"/api/jobs/{posted_job['id']}/applications/{application['id']}/status",
            json={"status": "interviewing"},
            headers=headers
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_health(test_client):
    with patch("app.main.test_mongo_connection", return_value=True):
        response = test_client.get("/api/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["mongodb"] == "connected"
