ACCOUNT = {"name": "Admin", "email": "admin@example.com", "password": "secret"}


def test_create_and_list_account(client):
    response = client.post("/v1/account", json=ACCOUNT)
    assert response.status_code == 201
    account_id = response.json()["id"]

    body = client.get("/v1/account").json()
    assert body["total"] == 1
    assert body["accounts"][0] == dict(ACCOUNT, id=account_id)

    body = client.get("/v1/account", params={"id": [account_id, "other"]}).json()
    assert body["total"] == 1


def test_create_account_validation(client):
    response = client.post("/v1/account", json={"email": "a@example.com"})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields: [name,password]"


def test_duplicate_email_is_storage_error(client):
    client.post("/v1/account", json=ACCOUNT)

    response = client.post("/v1/account", json=ACCOUNT)

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == 500
    assert body["message"].startswith("failed to create account data: ")


def test_update_account(client):
    account_id = client.post("/v1/account", json=ACCOUNT).json()["id"]

    response = client.put("/v1/account", json={"id": account_id, "email": "new@example.com"})

    assert response.status_code == 200
    account = response.json()["account"]
    assert account["email"] == "new@example.com"
    assert account["name"] == "Admin"
    assert account["password"] == "secret"

    stored = client.get("/v1/account", params={"id": account_id}).json()["accounts"][0]
    assert stored == account


def test_update_unknown_account(client):
    response = client.put("/v1/account", json={"id": "nope", "name": "X"})

    assert response.status_code == 400
    assert response.json()["message"] == "wrong uuid provided"


def test_delete_account_revokes_token(client):
    account_id = client.post("/v1/account", json=ACCOUNT).json()["id"]
    token = client.post("/v1/signin", json={"email": ACCOUNT["email"], "password": "secret"}).json()["token"]

    response = client.request("DELETE", "/v1/account", json={"id": account_id})
    assert response.status_code == 200
    assert response.json() is None

    response = client.get("/v1/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_list_accounts_with_blank_id_is_unfiltered(client):
    client.post("/v1/account", json=ACCOUNT)

    assert client.get("/v1/account?id=").json()["total"] == 1
