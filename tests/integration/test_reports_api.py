"""HTTP tests for reports, students and notes/attendance."""

import asyncio

import pytest


def _student(nisn, name, **extra):
    return {"nisn": nisn, "name": name, **extra}


@pytest.mark.asyncio
async def test_create_then_update_report(client, account):
    resp = await client.post(
        f"/api/users/{account.nip}/reports",
        json={"report_data": {"school_year": "2024/2025", "semester": 1, "class": "5A", "phase": "C"}},
    )
    assert resp.status_code == 200
    report_id = resp.json()["report_id"]
    assert resp.json()["status"] == 200

    resp = await client.get(f"/api/reports/{report_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["class"] == "5A"
    assert body["semester"] == "1"
    assert body["nip"] == account.nip

    resp = await client.post(
        f"/api/users/{account.nip}/reports",
        json={"report_data": {"report_id": report_id, "class": "5B", "deadline": "2025-06-20"}},
    )
    assert resp.status_code == 200
    assert resp.json()["report_id"] == report_id

    body = (await client.get(f"/api/reports/{report_id}")).json()
    assert body["class"] == "5B"
    assert body["deadline"] == "2025-06-20"

    reports = (await client.get(f"/api/users/{account.nip}/reports")).json()
    assert [r["report_id"] for r in reports] == [report_id]


@pytest.mark.asyncio
async def test_update_unknown_report_is_404(client, account):
    resp = await client.post(
        f"/api/users/{account.nip}/reports", json={"report_data": {"report_id": "missing"}}
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Report not found"}


@pytest.mark.asyncio
async def test_create_report_for_unknown_user_is_404(client):
    resp = await client.post("/api/users/nobody/reports", json={"report_data": {"class": "1A"}})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_get_unknown_report_is_404(client):
    resp = await client.get("/api/reports/missing")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_student_roster_round_trip(client, report):
    url = f"/api/reports/{report.report_id}/students"

    resp = await client.post(
        url,
        json={"students_data": [_student("001", "Adi", nis=11), _student("002", "Budi")]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"status": 200}

    students = (await client.get(url)).json()
    assert [s["name"] for s in students] == ["Adi", "Budi"]
    assert students[0]["nis"] == "11"
    adi_id = students[0]["student_id"]

    # Adi renamed, Budi dropped, Citra added
    resp = await client.post(
        url, json={"students_data": [_student("001", "Adi S."), _student("003", "Citra")]}
    )
    assert resp.status_code == 200

    students = (await client.get(url)).json()
    assert [(s["nisn"], s["name"]) for s in students] == [("001", "Adi S."), ("003", "Citra")]
    assert students[0]["student_id"] == adi_id

    resp = await client.post(url, json={"students_data": []})
    assert resp.status_code == 200
    assert (await client.get(url)).json() == []


@pytest.mark.asyncio
async def test_students_for_unknown_report_is_404(client):
    resp = await client.post(
        "/api/reports/missing/students", json={"students_data": [_student("001", "Adi")]}
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Report not found"}


@pytest.mark.asyncio
async def test_student_without_nisn_is_400(client, report):
    resp = await client.post(
        f"/api/reports/{report.report_id}/students", json={"students_data": [{"name": "Adi"}]}
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_notes_attendance_save_and_list(client, report):
    await client.post(
        f"/api/reports/{report.report_id}/students",
        json={"students_data": [_student("001", "Adi")]},
    )
    (student,) = (await client.get(f"/api/reports/{report.report_id}/students")).json()
    url = f"/api/reports/{report.report_id}/notes-attendance"

    resp = await client.post(
        url, json=[{"student_id": student["student_id"], "notes": "Rajin", "sick": 2}]
    )
    assert resp.status_code == 200

    (entry,) = (await client.get(url)).json()
    assert entry["notes"] == "Rajin"
    assert (entry["sick"], entry["leave"], entry["alpha"]) == (2, 0, 0)

    resp = await client.post(url, json=[{**entry, "alpha": 1}])
    assert resp.status_code == 200
    (updated,) = (await client.get(url)).json()
    assert updated["id"] == entry["id"]
    assert updated["alpha"] == 1


@pytest.mark.asyncio
async def test_failed_save_is_500_and_changes_nothing(client, report):
    url = f"/api/reports/{report.report_id}/notes-attendance"
    await client.post(
        f"/api/reports/{report.report_id}/students",
        json={"students_data": [_student("001", "Adi")]},
    )
    (student,) = (await client.get(f"/api/reports/{report.report_id}/students")).json()
    await client.post(url, json=[{"student_id": student["student_id"], "sick": 1}])

    resp = await client.post(
        url,
        json=[
            {"student_id": student["student_id"], "sick": 9},
            {"student_id": "ghost", "sick": 9},
        ],
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}

    entries = (await client.get(url)).json()
    assert [e["sick"] for e in entries] == [1]


@pytest.mark.asyncio
async def test_concurrent_roster_saves_end_in_one_of_them(client, report):
    url = f"/api/reports/{report.report_id}/students"
    await client.post(url, json={"students_data": [_student("001", "Adi"), _student("002", "Budi")]})

    first = {"students_data": [_student("001", "Adi A"), _student("002", "Budi A")]}
    second = {"students_data": [_student("001", "Adi B"), _student("002", "Budi B")]}
    responses = await asyncio.gather(client.post(url, json=first), client.post(url, json=second))

    codes = [r.status_code for r in responses]
    assert set(codes) <= {200, 500}
    assert 200 in codes

    names = sorted(s["name"] for s in (await client.get(url)).json())
    assert names in (["Adi A", "Budi A"], ["Adi B", "Budi B"])


@pytest.mark.asyncio
async def test_notes_attendance_left_out_are_deleted(client, report):
    await client.post(
        f"/api/reports/{report.report_id}/students",
        json={"students_data": [_student("001", "Adi"), _student("002", "Budi")]},
    )
    adi, budi = (await client.get(f"/api/reports/{report.report_id}/students")).json()
    url = f"/api/reports/{report.report_id}/notes-attendance"
    await client.post(
        url,
        json=[{"student_id": adi["student_id"], "sick": 1}, {"student_id": budi["student_id"], "leave": 2}],
    )
    entries = {e["student_id"]: e for e in (await client.get(url)).json()}
    assert len(entries) == 2

    resp = await client.post(url, json=[entries[budi["student_id"]]])
    assert resp.status_code == 200

    (remaining,) = (await client.get(url)).json()
    assert remaining["id"] == entries[budi["student_id"]]["id"]
    assert remaining["leave"] == 2
