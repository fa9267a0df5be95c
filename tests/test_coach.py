COACH = {
    "name": "Agus",
    "dob": "12 August 1980",
    "phone_number": "0813",
    "gender": "MALE",
    "email": "agus@example.com",
    "discipline": "fencing",
    "register_date": "2024-01-10",
}


def test_create_and_delete_coach(client):
    response = client.post("/v1/coach", json=COACH)
    assert response.status_code == 201
    coach_id = response.json()["id"]

    response = client.request("DELETE", "/v1/coach", json={"id": coach_id})
    assert response.status_code == 200
    assert response.json() is None

    response = client.request("DELETE", "/v1/coach", json={"id": coach_id})
    assert response.status_code == 400
    assert response.json()["message"] == "wrong uuid provided"


def test_create_coach_without_gender(client):
    payload = dict(COACH, gender="")

    response = client.post("/v1/coach", json=payload)

    assert response.status_code == 201


def test_create_coach_validation(client):
    response = client.post("/v1/coach", json={"name": "Agus", "gender": "M", "register_date": "2024"})

    assert response.status_code == 400
    assert response.json()["message"] == (
        "Missing required fields: [dob,phone_number,email,discipline]"
        " + Wrong Format fields: [gender (one of: MALE,FEMALE),register_date (format: yyyy-mm-dd)]"
    )


def test_coach_has_no_list_or_update(client):
    assert client.get("/v1/coach").status_code == 405

    response = client.put("/v1/coach", json={"id": "x"})
    assert response.status_code == 405
    assert response.json() == {"code": 405, "message": "Method Not Allowed"}
