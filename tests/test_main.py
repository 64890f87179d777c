import logging


def test_home_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"msg": "Account API running"}


def test_malformed_body_is_a_bad_request(client):
    response = client.post("/api/auth/login", json={"email": ["not", "a", "string"]})

    assert response.status_code == 400
    assert response.json() == {"msg": "Invalid request body"}


def test_malformed_body_log_omits_submitted_values(client, caplog):
    caplog.set_level(logging.INFO, logger="account_api.main")

    response = client.post("/api/auth/verify-otp", json={"mobile": "9876543210", "otp": 482913})

    assert response.status_code == 400
    messages = [record.getMessage() for record in caplog.records if record.name == "account_api.main"]
    assert any("Malformed request body on /api/auth/verify-otp" in message for message in messages)
    assert not any("482913" in message for message in messages)
