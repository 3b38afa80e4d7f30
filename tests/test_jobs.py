"""
Test suite for job endpoints.

Tests cover:
- Job creation (admin only)
- Job listing and filtering
- Job retrieval
- Job updates and deletion
- Error handling
"""

import pytest


class TestJobCreation:
    """Tests for job creation endpoint"""

    new_job = {
        "title": "new",
        "salary": 100000,
        "equity": 0.5,
        "companyHandle": "c1",
    }

    def test_create_job_as_admin(self, client, seeded, admin_headers):
        response = client.post("/api/v1/jobs/", json=self.new_job, headers=admin_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job["title"] == "new"
        assert job["salary"] == 100000
        assert job["equity"] == pytest.approx(0.5)
        assert job["companyHandle"] == "c1"

    def test_create_job_non_admin(self, client, seeded, u1_headers):
        response = client.post("/api/v1/jobs/", json=self.new_job, headers=u1_headers)
        assert response.status_code == 401

    def test_create_job_anonymous(self, client, seeded):
        response = client.post("/api/v1/jobs/", json=self.new_job)
        assert response.status_code == 401

    def test_create_job_missing_fields(self, client, seeded, admin_headers):
        response = client.post("/api/v1/jobs/", json={
            "title": "new",
            "salary": 100000,
            # Missing companyHandle
        }, headers=admin_headers)

        assert response.status_code == 400

    def test_create_job_invalid_salary(self, client, seeded, admin_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={**self.new_job, "salary": "not-a-number"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_create_job_equity_above_one(self, client, seeded, admin_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={**self.new_job, "equity": 1.5},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_create_job_unknown_company(self, client, seeded, admin_headers):
        response = client.post(
            "/api/v1/jobs/",
            json={**self.new_job, "companyHandle": "nope"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert "nope" in response.json()["error"]["message"]


class TestJobListing:
    """Tests for GET /jobs and its filters"""

    def test_list_jobs(self, client, seeded):
        response = client.get("/api/v1/jobs/")

        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert [j["title"] for j in jobs] == ["j1", "j2", "j3"]
        assert jobs[2]["equity"] is None

    def test_filter_all_criteria(self, client, seeded):
        response = client.get("/api/v1/jobs/?title=j&minSalary=150&hasEquity=true")

        assert response.status_code == 200
        assert response.json()["jobs"] == [{
            "id": seeded["j2"],
            "title": "j2",
            "salary": 200,
            "equity": pytest.approx(0.2),
            "companyHandle": "c2",
        }]

    def test_filter_title(self, client, seeded):
        response = client.get("/api/v1/jobs/", params={"title": "J1"})
        assert [j["title"] for j in response.json()["jobs"]] == ["j1"]

    def test_filter_min_salary(self, client, seeded):
        response = client.get("/api/v1/jobs/", params={"minSalary": 250})
        assert [j["title"] for j in response.json()["jobs"]] == ["j3"]

    def test_filter_has_equity(self, client, seeded):
        response = client.get("/api/v1/jobs/", params={"hasEquity": "true"})
        assert [j["title"] for j in response.json()["jobs"]] == ["j1", "j2"]

    def test_filter_has_equity_false(self, client, seeded):
        response = client.get("/api/v1/jobs/", params={"hasEquity": "false"})
        assert len(response.json()["jobs"]) == 3

    def test_filter_unknown_key(self, client, seeded):
        response = client.get("/api/v1/jobs/", params={"nope": "nope"})
        assert response.status_code == 400

    def test_filter_non_numeric_salary(self, client, seeded):
        response = client.get("/api/v1/jobs/", params={"minSalary": "lots"})
        assert response.status_code == 400


class TestJobRetrieval:
    """Tests for GET /jobs/{id}"""

    def test_get_job(self, client, seeded):
        response = client.get(f"/api/v1/jobs/{seeded['j1']}")

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["title"] == "j1"
        assert job["company"]["handle"] == "c1"
        assert job["company"]["numEmployees"] == 1

    def test_get_nonexistent_job(self, client, seeded):
        response = client.get("/api/v1/jobs/0")

        assert response.status_code == 404
        assert "no job" in response.json()["error"]["message"].lower()


class TestJobUpdate:
    """Tests for PATCH /jobs/{id}"""

    def test_update_as_admin(self, client, seeded, admin_headers):
        response = client.patch(
            f"/api/v1/jobs/{seeded['j1']}",
            json={"title": "J-New"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["job"] == {
            "id": seeded["j1"],
            "title": "J-New",
            "salary": 100,
            "equity": pytest.approx(0.1),
            "companyHandle": "c1",
        }

    def test_update_to_null(self, client, seeded, admin_headers):
        response = client.patch(
            f"/api/v1/jobs/{seeded['j1']}",
            json={"salary": None, "equity": None},
            headers=admin_headers,
        )

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["salary"] is None
        assert job["equity"] is None

    def test_update_non_admin(self, client, seeded, u1_headers):
        response = client.patch(
            f"/api/v1/jobs/{seeded['j1']}",
            json={"title": "J-New"},
            headers=u1_headers,
        )
        assert response.status_code == 401

    def test_update_empty_body(self, client, seeded, admin_headers):
        response = client.patch(f"/api/v1/jobs/{seeded['j1']}", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No data"

    def test_update_company_handle_rejected(self, client, seeded, admin_headers):
        response = client.patch(
            f"/api/v1/jobs/{seeded['j1']}",
            json={"companyHandle": "c2"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_update_title_to_null_rejected(self, client, seeded, admin_headers):
        response = client.patch(
            f"/api/v1/jobs/{seeded['j1']}",
            json={"title": None},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_update_nonexistent_job(self, client, seeded, admin_headers):
        response = client.patch("/api/v1/jobs/0", json={"title": "x"}, headers=admin_headers)
        assert response.status_code == 404


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, seeded, admin_headers):
        response = client.delete(f"/api/v1/jobs/{seeded['j1']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": seeded["j1"]}

        get_response = client.get(f"/api/v1/jobs/{seeded['j1']}")
        assert get_response.status_code == 404

    def test_delete_non_admin(self, client, seeded, u1_headers):
        response = client.delete(f"/api/v1/jobs/{seeded['j1']}", headers=u1_headers)
        assert response.status_code == 401

    def test_delete_nonexistent_job(self, client, seeded, admin_headers):
        response = client.delete("/api/v1/jobs/0", headers=admin_headers)
        assert response.status_code == 404
