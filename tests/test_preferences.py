from skipsave.services.auth.service import DEMO_USER_ID


async def test_default_preferences_are_created_on_first_read(client):
    response = await client.get("/api/preferences")
    assert response.status_code == 200
    prefs = response.json()
    assert prefs["userId"] == DEMO_USER_ID
    assert prefs["bankProvider"] == "manual"
    assert prefs["monthlyGoal"] == "0.00"
    assert prefs["yearlyGoal"] == "0.00"
    assert prefs["fromAccountLabel"] is None

    again = (await client.get("/api/preferences")).json()
    assert again["id"] == prefs["id"]


async def test_update_goals(client):
    response = await client.patch("/api/preferences", json={"monthlyGoal": 500, "yearlyGoal": "6000.5"})
    assert response.status_code == 200
    prefs = response.json()
    assert prefs["monthlyGoal"] == "500.00"
    assert prefs["yearlyGoal"] == "6000.50"
    assert prefs["bankProvider"] == "manual"

    response = await client.patch("/api/preferences", json={"toAccountLabel": "Savings (****5678)"})
    prefs = response.json()
    assert prefs["monthlyGoal"] == "500.00"
    assert prefs["toAccountLabel"] == "Savings (****5678)"


async def test_invalid_preference_updates_are_rejected(client):
    for payload in ({"monthlyGoal": -1}, {"bankProvider": "real_bank"}, {"yearlyGoal": None}):
        response = await client.patch("/api/preferences", json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    prefs = (await client.get("/api/preferences")).json()
    assert prefs["monthlyGoal"] == "0.00"


async def test_provider_settings_upsert(client):
    response = await client.post(
        "/api/settings/provider",
        json={
            "provider": "plaid_sandbox",
            "fromAccountLabel": "Checking (****1234)",
            "plaidFromId": "acc_checking_1234",
            "plaidToId": "acc_savings_5678",
        },
    )
    assert response.status_code == 200
    prefs = response.json()
    assert prefs["bankProvider"] == "plaid_sandbox"
    assert prefs["fromAccountLabel"] == "Checking (****1234)"
    assert prefs["plaidToId"] == "acc_savings_5678"

    info = (await client.get("/api/settings/provider")).json()
    assert info["provider"] == "plaid_sandbox"
    assert info["displayName"] == "Plaid Sandbox (Demo)"
    assert info["capabilities"] == {"simulateTransfers": True, "manualChecklist": False}


async def test_provider_settings_require_known_provider(client):
    response = await client.post("/api/settings/provider", json={"provider": "wire"})
    assert response.status_code == 400

    info = (await client.get("/api/settings/provider")).json()
    assert info["provider"] == "manual"
    assert info["capabilities"] == {"simulateTransfers": False, "manualChecklist": True}


async def test_bank_accounts_follow_the_active_provider(client):
    assert (await client.get("/api/bank/accounts")).json() == []

    await client.post("/api/settings/provider", json={"provider": "plaid_sandbox"})
    accounts = (await client.get("/api/bank/accounts")).json()
    assert [a["id"] for a in accounts] == ["acc_checking_1234", "acc_savings_5678", "acc_checking_9012"]
    assert accounts[1]["balance"] == 12350.75


async def test_bank_link_returns_mock_token(client):
    response = await client.post("/api/bank/link")
    assert response.status_code == 200
    body = response.json()
    assert body["link_token"] == "link-sandbox-mock-token"
    assert body["expiration"]


async def test_session_cookie_is_issued(client):
    response = await client.get("/api/preferences")
    assert "skipsave_session" in response.cookies

    response = await client.get("/api/preferences")
    assert "skipsave_session" not in response.cookies
