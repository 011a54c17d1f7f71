from datetime import datetime, timedelta, timezone

from conftest import USER_A, auth


def _iso(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def test_create_application_defaults(db_client, make_job):
    job = make_job()
    resp = db_client.post(
        "/applications",
        json={"job_id": job["id"], "applied_at": "2026-03-01T10:00:00Z"},
        headers=auth(USER_A),
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "APPLIED"
    assert body["applied_at"].startswith("2026-03-01T10:00:00")
    assert body["next_action"].startswith("2026-03-06T10:00:00")

    refreshed = db_client.get(f"/jobs/{job['id']}", headers=auth(USER_A)).json()
    assert refreshed["status"] == "APPLIED"


def test_create_application_unknown_resume_is_404(db_client, make_job):
    job = make_job()
    resp = db_client.post(
        "/applications",
        json={"job_id": job["id"], "resume_id": "nope"},
        headers=auth(USER_A),
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Resume not found"


def test_create_application_requires_job_id(db_client):
    resp = db_client.post("/applications", json={}, headers=auth(USER_A))
    assert resp.status_code == 400


def test_list_applications_includes_job(db_client, make_job):
    job = make_job(company="Globex")
    db_client.post("/applications", json={"job_id": job["id"]}, headers=auth(USER_A))
    items = db_client.get("/applications", headers=auth(USER_A)).json()
    assert len(items) == 1
    assert items[0]["job"]["company"] == "Globex"


def test_due_filters(db_client, make_job):
    now = datetime.now(timezone.utc)
    noon_today = now.replace(hour=12, minute=0, second=0, microsecond=0)
    headers = auth(USER_A)
    due_today = make_job(title="Due today")
    overdue = make_job(title="Overdue")
    later = make_job(title="Later")
    for job, next_action in (
        (due_today, noon_today),
        (overdue, noon_today - timedelta(days=2)),
        (later, noon_today + timedelta(days=3)),
    ):
        resp = db_client.post(
            "/applications",
            json={"job_id": job["id"], "next_action": _iso(next_action)},
            headers=headers,
        )
        assert resp.status_code == 201

    today = db_client.get("/applications?due=today", headers=headers).json()
    assert [a["job_id"] for a in today] == [due_today["id"]]

    late = db_client.get("/applications?due=overdue", headers=headers).json()
    assert [a["job_id"] for a in late] == [overdue["id"]]

    assert len(db_client.get("/applications", headers=headers).json()) == 3
    assert db_client.get("/applications?due=someday", headers=headers).status_code == 400


def test_update_and_delete_application(db_client, make_job):
    job = make_job()
    headers = auth(USER_A)
    application = db_client.post("/applications", json={"job_id": job["id"]}, headers=headers).json()

    resp = db_client.patch(
        f"/applications/{application['id']}",
        json={"status": "INTERVIEW", "notes": "Recruiter replied"},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "INTERVIEW"
    assert resp.json()["notes"] == "Recruiter replied"

    assert db_client.delete(f"/applications/{application['id']}", headers=headers).status_code == 204
    assert db_client.delete(f"/applications/{application['id']}", headers=headers).status_code == 404


def test_patch_application_rejects_null_status(db_client, make_job):
    headers = auth(USER_A)
    job = make_job()
    application = db_client.post("/applications", json={"job_id": job["id"]}, headers=headers).json()
    resp = db_client.patch(f"/applications/{application['id']}", json={"status": None}, headers=headers)
    assert resp.status_code == 400
    assert "status cannot be null" in resp.json()["detail"]
