from datetime import datetime

from app.models_job import Job


def test_create_job_without_schedule_is_draft(api, client_record):
    response = api.post("/jobs", json={"clientId": client_record.id, "title": "Estimate visit"})

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "DRAFT"
    assert body["servicePlanId"] is None
    assert body["scheduledStart"] is None


def test_create_scheduled_job(api, address_record):
    response = api.post(
        "/jobs",
        json={
            "clientId": address_record.client_id,
            "addressId": address_record.id,
            "title": "Mulch beds",
            "scheduledStart": "2026-04-02T09:00:00-04:00",
            "scheduledEnd": "2026-04-02T11:00:00-04:00",
            "estimatedPrice": 120.25,
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "SCHEDULED"
    assert body["scheduledStart"] == "2026-04-02T13:00:00"
    assert body["estimatedPriceCents"] == 12025


def test_create_job_rejects_negative_price(api, client_record):
    response = api.post(
        "/jobs", json={"clientId": client_record.id, "title": "Edging", "estimatedPrice": -5}
    )

    assert response.status_code == 422


def test_create_job_rejects_end_before_start(api, client_record):
    response = api.post(
        "/jobs",
        json={
            "clientId": client_record.id,
            "title": "Edging",
            "scheduledStart": "2026-04-02T11:00:00",
            "scheduledEnd": "2026-04-02T09:00:00",
        },
    )

    assert response.status_code == 400


def test_create_job_unknown_client(api):
    response = api.post("/jobs", json={"clientId": 9999, "title": "Edging"})

    assert response.status_code == 404


def test_complete_job_with_actual_price(api, client_record):
    job = api.post(
        "/jobs",
        json={"clientId": client_record.id, "title": "Aeration", "scheduledStart": "2026-04-02T13:00:00"},
    ).json()

    response = api.patch(f"/jobs/{job['id']}", json={"status": "completed", "actualPrice": 95})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "COMPLETED"
    assert body["actualPriceCents"] == 9500
    assert body["title"] == "Aeration"


def test_update_job_rejects_unknown_status(api, client_record):
    job = api.post("/jobs", json={"clientId": client_record.id, "title": "Aeration"}).json()

    response = api.patch(f"/jobs/{job['id']}", json={"status": "ON_HOLD"})

    assert response.status_code == 422


def test_update_missing_job(api):
    assert api.patch("/jobs/9999", json={"title": "x"}).status_code == 404


def test_list_jobs_by_plan_and_window(api, db, make_plan):
    plan = make_plan()
    other = make_plan(title="Other plan")
    db.add_all(
        [
            Job(client_id=plan.client_id, service_plan_id=plan.id, title="a",
                status="SCHEDULED", scheduled_start=datetime(2026, 3, 16, 14)),
            Job(client_id=plan.client_id, service_plan_id=plan.id, title="b",
                status="SCHEDULED", scheduled_start=datetime(2026, 3, 9, 14)),
            Job(client_id=plan.client_id, service_plan_id=plan.id, title="c",
                status="CANCELED", scheduled_start=datetime(2026, 3, 23, 14)),
            Job(client_id=plan.client_id, service_plan_id=other.id, title="z",
                status="SCHEDULED", scheduled_start=datetime(2026, 3, 10, 14)),
        ]
    )
    db.commit()

    by_plan = api.get("/jobs", params={"planId": plan.id}).json()
    scheduled = api.get("/jobs", params={"planId": plan.id, "status": "scheduled"}).json()
    windowed = api.get(
        "/jobs", params={"start": "2026-03-10T00:00:00", "end": "2026-03-20T00:00:00"}
    ).json()

    assert [j["title"] for j in by_plan] == ["b", "a", "c"]
    assert [j["title"] for j in scheduled] == ["b", "a"]
    assert [j["title"] for j in windowed] == ["z", "a"]


def test_get_job(api, client_record):
    job = api.post("/jobs", json={"clientId": client_record.id, "title": "Aeration"}).json()

    assert api.get(f"/jobs/{job['id']}").json()["title"] == "Aeration"
    assert api.get("/jobs/9999").status_code == 404


def test_reschedule_onto_taken_plan_slot_conflicts(api, db, make_plan):
    plan = make_plan()
    first = Job(client_id=plan.client_id, service_plan_id=plan.id, title="Mowing",
                status="SCHEDULED", scheduled_start=datetime(2026, 3, 9, 14))
    second = Job(client_id=plan.client_id, service_plan_id=plan.id, title="Mowing",
                 status="SCHEDULED", scheduled_start=datetime(2026, 3, 16, 14))
    db.add_all([first, second])
    db.commit()
    first_id = first.id

    response = api.patch(f"/jobs/{first_id}", json={"scheduledStart": "2026-03-16T14:00:00"})

    assert response.status_code == 409
    assert response.json()["detail"] == "A job for this plan is already scheduled at that time."
    assert api.get(f"/jobs/{first_id}").json()["scheduledStart"] == "2026-03-09T14:00:00"
    # The session is usable again after the conflict
    moved = api.patch(f"/jobs/{first_id}", json={"scheduledStart": "2026-03-10T14:00:00"})
    assert moved.status_code == 200
