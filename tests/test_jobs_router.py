from datetime import datetime, timezone

import jobtracker.routers.jobs as jobs_mod
import jobtracker.routers.parse as parse_mod


class _Job:
    def __init__(self, job_id="j1", user_id="user-1", title="Backend Engineer", company="ACME", status="SAVED"):
        self.id = job_id
        self.user_id = user_id
        self.title = title
        self.company = company
        self.url = "https://acme.test/jobs/1"
        self.source = "acme.test"
        self.favicon_url = None
        self.notes = None
        self.location = "Remote"
        self.is_remote = True
        self.tags = ["python", "sql"]
        self.status = status
        self.salary = None
        self.salary_min = 10000000
        self.salary_max = 12000000
        self.salary_currency = "USD"
        self.salary_type = "ANNUAL"
        self.last_activity_at = datetime(2026, 1, 2, tzinfo=timezone.utc)
        self.created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.updated_at = None


def test_list_jobs_passes_status_filter(monkeypatch, client):
    seen = {}

    def _list(db, user_id, status=None):
        seen.update(user_id=user_id, status=status)
        return [_Job()]

    monkeypatch.setattr(jobs_mod.job_repo, "list_for_user", _list)
    resp = client.get("/jobs?status=APPLIED")
    assert resp.status_code == 200
    assert resp.json()[0]["title"] == "Backend Engineer"
    assert seen == {"user_id": "user-1", "status": "APPLIED"}


def test_list_jobs_rejects_unknown_status(client):
    resp = client.get("/jobs?status=GHOSTED")
    assert resp.status_code == 400


def test_create_job_returns_201(monkeypatch, client):
    captured = {}

    def _create(db, user_id, data):
        captured.update(data)
        return _Job(title=data["title"], company=data["company"])

    monkeypatch.setattr(jobs_mod.job_repo, "create", _create)
    resp = client.post("/jobs", json={"title": "SRE", "company": "Initech", "url": "https://initech.test/sre"})
    assert resp.status_code == 201
    assert resp.json()["company"] == "Initech"
    assert captured["status"] == "SAVED"


def test_create_job_requires_fields(client):
    resp = client.post("/jobs", json={"title": "SRE", "company": "", "url": "https://initech.test"})
    assert resp.status_code == 400


def test_create_job_db_failure_is_500(monkeypatch, client):
    def _create(db, user_id, data):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(jobs_mod.job_repo, "create", _create)
    resp = client.post("/jobs", json={"title": "SRE", "company": "Initech", "url": "https://initech.test/sre"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to create job"


def test_get_update_delete_not_found(monkeypatch, client):
    monkeypatch.setattr(jobs_mod.job_repo, "get_by_id", lambda db, job_id, user_id: None)
    monkeypatch.setattr(jobs_mod.job_repo, "update", lambda db, job_id, user_id, patch: None)
    monkeypatch.setattr(jobs_mod.job_repo, "delete", lambda db, job_id, user_id: False)
    assert client.get("/jobs/missing").status_code == 404
    assert client.patch("/jobs/missing", json={"notes": "x"}).status_code == 404
    assert client.delete("/jobs/missing").status_code == 404


def test_update_job_sends_only_changed_fields(monkeypatch, client):
    captured = {}

    def _update(db, job_id, user_id, patch):
        captured.update(patch)
        return _Job(status="INTERVIEW")

    monkeypatch.setattr(jobs_mod.job_repo, "update", _update)
    resp = client.patch("/jobs/j1", json={"status": "INTERVIEW"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "INTERVIEW"
    assert list(captured) == ["status"]


def test_delete_job_returns_204(monkeypatch, client):
    monkeypatch.setattr(jobs_mod.job_repo, "delete", lambda db, job_id, user_id: True)
    resp = client.delete("/jobs/j1")
    assert resp.status_code == 204
    assert resp.content == b""


def test_export_csv(monkeypatch, client):
    monkeypatch.setattr(jobs_mod.job_repo, "list_for_user", lambda db, user_id, status=None: [_Job()])
    resp = client.get("/jobs/export.csv")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "jobs-export.csv" in resp.headers["content-disposition"]
    lines = resp.text.strip().splitlines()
    assert lines[0].startswith("title,company,status")
    assert "Backend Engineer,ACME,SAVED" in lines[1]
    assert "100000.0" in lines[1]


def test_parse_url_success(monkeypatch, client):
    monkeypatch.setattr(
        parse_mod,
        "fetch_url_metadata",
        lambda url: {
            "title": "Staff Engineer",
            "company": "Globex",
            "source": "globex.test",
            "favicon_url": "https://www.google.com/s2/favicons?domain=globex.test",
        },
    )
    resp = client.post("/jobs/parse-url", json={"url": "https://globex.test/careers/42"})
    assert resp.status_code == 200
    assert resp.json()["company"] == "Globex"


def test_parse_url_requires_url(client):
    assert client.post("/jobs/parse-url", json={}).status_code == 400
    assert client.post("/jobs/parse-url", json={"url": "not a url"}).status_code == 400
