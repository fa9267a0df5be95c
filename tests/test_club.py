def test_create_and_list_club(client, club_payload):
    response = client.post("/v1/club", json=club_payload)
    assert response.status_code == 201
    club_id = response.json()["id"]

    response = client.get("/v1/club")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    club = body["clubs"][0]
    assert club["id"] == club_id
    assert club["establish_date"] == "2010-05-17"
    assert club["active"] == "TRUE"
    assert club["district"] == "Jakarta Selatan"


def test_create_club_without_active_is_unknown(client, club_payload):
    del club_payload["active"]
    club_id = client.post("/v1/club", json=club_payload).json()["id"]

    club = client.get("/v1/club", params={"id": club_id}).json()["clubs"][0]
    assert club["active"] == "UNKNOWN"


def test_create_club_reports_missing_and_malformed(client):
    response = client.post("/v1/club", json={"name": "X", "establish_date": "17/05/2010"})

    assert response.status_code == 400
    assert response.json() == {
        "code": 400,
        "message": (
            "Missing required fields: [country,province,district,email_pic,"
            "logo,address,pic,discipline,phone_number]"
            " + Wrong Format fields: [establish_date (format: yyyy-mm-dd)]"
        ),
    }


def test_create_club_rejects_non_ascii_digits(client, club_payload):
    club_payload["establish_date"] = "２０２４-01-01"

    response = client.post("/v1/club", json=club_payload)

    assert response.status_code == 400
    assert response.json()["message"] == "Wrong Format fields: [establish_date (format: yyyy-mm-dd)]"
    assert client.get("/v1/club").json()["total"] == 0


def test_list_clubs_by_ids(client, club_payload):
    ids = []
    for name in ("A", "B", "C"):
        club_payload["name"] = name
        ids.append(client.post("/v1/club", json=club_payload).json()["id"])

    response = client.get("/v1/club", params={"id": ids[:2]})
    body = response.json()

    assert body["total"] == 2
    assert sorted(club["name"] for club in body["clubs"]) == ["A", "B"]

    body = client.get("/v1/club", params={"id": "missing"}).json()
    assert body == {"total": 0, "clubs": []}


def test_update_club_merges_supplied_fields(client, club_id):
    response = client.put("/v1/club", json={
        "id": club_id,
        "name": "Bandung Fencing Club",
        "active": "FALSE",
        "establish_date": "2011-01-02",
    })

    assert response.status_code == 200
    club = response.json()["club"]
    assert club["id"] == club_id
    assert club["name"] == "Bandung Fencing Club"
    assert club["active"] == "FALSE"
    assert club["establish_date"] == "2011-01-02"
    assert club["country"] == "Indonesia"
    assert club["phone_number"] == "+62211234567"


def test_update_club_without_id(client):
    response = client.put("/v1/club", json={"name": "X"})

    assert response.status_code == 400
    assert response.json()["message"] == "no uuid provided"


def test_update_unknown_club(client):
    response = client.put("/v1/club", json={"id": "nope", "name": "X"})

    assert response.status_code == 400
    assert response.json()["message"] == "wrong uuid provided"


def test_update_club_rejects_bad_active(client, club_id):
    response = client.put("/v1/club", json={"id": club_id, "active": "UNKNOWN"})

    assert response.status_code == 400
    assert response.json()["message"] == "wrong value for active, should be FALSE or TRUE"

    club = client.get("/v1/club", params={"id": club_id}).json()["clubs"][0]
    assert club["active"] == "TRUE"


def test_update_club_rejects_bad_date(client, club_id):
    response = client.put("/v1/club", json={"id": club_id, "establish_date": "2011-02-30"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("establish_date: ")


def test_delete_club(client, club_id):
    response = client.request("DELETE", "/v1/club", json={"id": club_id})

    assert response.status_code == 200
    assert response.json() is None
    assert client.get("/v1/club").json() == {"total": 0, "clubs": []}


def test_delete_club_twice(client, club_id):
    client.request("DELETE", "/v1/club", json={"id": club_id})
    response = client.request("DELETE", "/v1/club", json={"id": club_id})

    assert response.status_code == 400
    assert response.json() == {"code": 400, "message": "wrong uuid provided"}


def test_delete_club_without_id(client):
    response = client.request("DELETE", "/v1/club", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "no uuid provided"


def test_list_clubs_with_blank_id_is_unfiltered(client, club_id):
    body = client.get("/v1/club?id=").json()

    assert body["total"] == 1
    assert body["clubs"][0]["id"] == club_id
