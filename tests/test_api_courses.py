def course_payload(code="MTH-101", **kw):
    data = {
        "code": code,
        "name": "College Algebra",
        "credits": 3,
        "required": True,
        "priority": 5,
        "sections": [
            {"label": "001", "meetings": [
                {"title": "Lecture", "days": ["Mon", "Wed"], "start": "9:00 AM", "end": "10:15 AM",
                 "location": "Wells Hall A216", "mode": "in-person", "async": False},
            ]},
            {"label": "002", "meetings": [
                {"title": "Lecture", "days": ["Thu", "Tue"], "start": 660, "end": "12:15",
                 "location": "Wells Hall A216"},
            ]},
        ],
    }
    data.update(kw)
    return data


def test_root(client):
    assert client.get("/").json() == {"message": "Schedule builder backend is running!"}


def test_create_and_list_course(client):
    res = client.post("/courses", json=course_payload())
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["sections"][0]["meetings"][0]["start"] == 540
    assert body["sections"][0]["meetings"][0]["end"] == 615
    assert body["sections"][1]["meetings"][0]["days"] == ["Tue", "Thu"]
    assert body["sections"][1]["meetings"][0]["async"] is False

    listed = client.get("/courses").json()
    assert [c["code"] for c in listed] == ["MTH-101"]
    assert [s["label"] for s in listed[0]["sections"]] == ["001", "002"]


def test_create_duplicate_id_conflicts(client):
    first = client.post("/courses", json=course_payload()).json()
    res = client.post("/courses", json=course_payload(id=first["id"]))
    assert res.status_code == 409


def test_invalid_payloads_are_rejected(client):
    assert client.post("/courses", json=course_payload(priority=9)).status_code == 422

    bad_day = course_payload()
    bad_day["sections"][0]["meetings"][0]["days"] = ["Sun"]
    assert client.post("/courses", json=bad_day).status_code == 422

    bad_time = course_payload()
    bad_time["sections"][0]["meetings"][0]["start"] = "half past nine"
    assert client.post("/courses", json=bad_time).status_code == 422


def test_update_replaces_sections(client):
    created = client.post("/courses", json=course_payload()).json()
    cid = created["id"]

    changed = dict(created)
    changed["credits"] = 4
    changed["sections"] = created["sections"][1:]
    changed["sections"][0]["label"] = "002-R"

    res = client.put(f"/courses/{cid}", json=changed)
    assert res.status_code == 200
    assert res.json()["credits"] == 4
    assert [s["label"] for s in res.json()["sections"]] == ["002-R"]

    again = client.get(f"/courses/{cid}").json()
    assert again["sections"][0]["id"] == created["sections"][1]["id"]


def test_unknown_course_is_404(client):
    assert client.get("/courses/nope").status_code == 404
    assert client.put("/courses/nope", json=course_payload()).status_code == 404
    assert client.delete("/courses/nope").status_code == 404


def test_delete_course(client):
    cid = client.post("/courses", json=course_payload()).json()["id"]
    assert client.delete(f"/courses/{cid}").json() == {"message": "Deleted", "course_id": cid}
    assert client.get("/courses").json() == []


def test_load_example_replaces_everything(client):
    client.post("/courses", json=course_payload(code="OLD-1"))

    res = client.post("/courses/example")
    assert res.status_code == 200
    assert [c["code"] for c in res.json()] == ["MTH-101", "ENG-201", "CIS-150", "SOC-110"]
    assert [c["code"] for c in client.get("/courses").json()] == ["MTH-101", "ENG-201", "CIS-150", "SOC-110"]


def test_section_id_owned_by_another_course_conflicts(client):
    first = client.post("/courses", json=course_payload()).json()
    reused = course_payload(code="ENG-201")
    reused["sections"][0]["id"] = first["sections"][0]["id"]

    res = client.post("/courses", json=reused)
    assert res.status_code == 409
    assert res.json()["detail"]["section_ids"] == [first["sections"][0]["id"]]

    other = client.post("/courses", json=course_payload(code="SOC-110")).json()
    other["sections"][0]["meetings"][0]["id"] = first["sections"][1]["meetings"][0]["id"]
    res = client.put(f"/courses/{other['id']}", json=other)
    assert res.status_code == 409
    assert res.json()["detail"]["meeting_ids"] == [first["sections"][1]["meetings"][0]["id"]]

    assert [c["code"] for c in client.get("/courses").json()] == ["MTH-101", "SOC-110"]


def test_duplicate_section_ids_in_one_payload_conflict(client):
    data = course_payload()
    data["sections"][1]["id"] = data["sections"][0]["id"] = "sec-1"

    res = client.post("/courses", json=data)
    assert res.status_code == 409
    assert res.json()["detail"]["section_ids"] == ["sec-1"]
    assert client.get("/courses").json() == []
