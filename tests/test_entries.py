from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from sqlmodel import select

from skipsave.services.auth.service import DEMO_USER_ID
from skipsave.services.database.models import Entry, User


async def test_create_entry_and_list(client):
    response = await client.post("/api/entries", json={"item": "Coffee", "amount": 5.50})
    assert response.status_code == 201
    created = response.json()
    assert created["item"] == "Coffee"
    assert created["amount"] == "5.50"
    assert created["userId"] == DEMO_USER_ID
    assert created["transferId"] is None

    response = await client.get("/api/entries")
    assert response.status_code == 200
    entries = response.json()
    assert [e["id"] for e in entries] == [created["id"]]
    assert entries[0]["amount"] == "5.50"


async def test_amount_string_is_parsed_and_rounded_to_cents(client):
    response = await client.post("/api/entries", json={"item": "Snack", "amount": "3.456"})
    assert response.status_code == 201
    assert response.json()["amount"] == "3.46"


async def test_create_entry_with_optional_fields(client):
    payload = {
        "item": "Concert ticket",
        "amount": 45,
        "category": "Entertainment",
        "note": "skipped it",
        "date": "2024-03-01T18:30:00Z",
    }
    response = await client.post("/api/entries", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["category"] == "Entertainment"
    assert body["note"] == "skipped it"
    assert body["date"].startswith("2024-03-01T18:30:00")


@pytest.mark.parametrize(
    "payload",
    [
        {"item": "Coffee", "amount": 0},
        {"item": "Coffee", "amount": -2},
        {"item": "Coffee", "amount": "NaN"},
        {"item": "Coffee", "amount": "Infinity"},
        {"item": "Coffee", "amount": "lots"},
        {"item": "Coffee", "amount": 0.001},
        {"item": "", "amount": 5},
        {"item": "x" * 121, "amount": 5},
        {"item": "Coffee", "amount": 5, "category": "c" * 51},
        {"item": "Coffee", "amount": 5, "note": "n" * 501},
        {"amount": 5},
    ],
)
async def test_invalid_entries_are_rejected(client, payload):
    response = await client.post("/api/entries", json=payload)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]

    listed = await client.get("/api/entries")
    assert listed.json() == []


async def test_update_entry(client):
    created = (await client.post("/api/entries", json={"item": "Lunch", "amount": 12})).json()

    response = await client.patch(f"/api/entries/{created['id']}", json={"amount": "15.25", "category": "Food"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["amount"] == "15.25"
    assert updated["category"] == "Food"
    assert updated["item"] == "Lunch"


async def test_update_unknown_entry_is_not_found(client):
    response = await client.patch("/api/entries/does-not-exist", json={"item": "Nope"})
    assert response.status_code == 404
    assert response.json() == {"error": {"code": "NOT_FOUND", "message": "Entry not found"}}


async def test_update_rejects_invalid_values(client):
    created = (await client.post("/api/entries", json={"item": "Lunch", "amount": 12})).json()

    for payload in ({"amount": -1}, {"amount": None}, {"item": ""}):
        response = await client.patch(f"/api/entries/{created['id']}", json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    entry = (await client.get(f"/api/entries/{created['id']}")).json()
    assert entry["amount"] == "12.00"


async def test_entry_of_another_user_is_invisible(client, session):
    session.add(User(id="someone-else", email="else@example.com"))
    await session.commit()
    other = Entry(user_id="someone-else", item="Theirs", amount=Decimal("9.99"))
    session.add(other)
    await session.commit()

    assert (await client.get("/api/entries")).json() == []
    assert (await client.get(f"/api/entries/{other.id}")).status_code == 404
    assert (await client.patch(f"/api/entries/{other.id}", json={"item": "Mine"})).status_code == 404
    assert (await client.delete(f"/api/entries/{other.id}")).status_code == 204

    result = await session.exec(select(Entry).where(Entry.id == other.id))
    assert result.first() is not None


async def test_delete_entry_keeps_user_and_other_entries(client, session):
    first = (await client.post("/api/entries", json={"item": "Coffee", "amount": 5.5})).json()
    second = (await client.post("/api/entries", json={"item": "Tea", "amount": 3})).json()

    response = await client.delete(f"/api/entries/{first['id']}")
    assert response.status_code == 204
    assert response.content == b""

    remaining = (await client.get("/api/entries")).json()
    assert [e["id"] for e in remaining] == [second["id"]]
    assert await session.get(User, DEMO_USER_ID) is not None


async def test_delete_unknown_entry_is_no_content(client):
    response = await client.delete("/api/entries/missing")
    assert response.status_code == 204


async def test_entries_are_listed_newest_first(client):
    now = datetime(2024, 5, 10, 12, 0, 0)
    for days_ago, item in ((2, "old"), (0, "new"), (1, "middle")):
        date = (now - timedelta(days=days_ago)).isoformat()
        await client.post("/api/entries", json={"item": item, "amount": 1, "date": date})

    items = [e["item"] for e in (await client.get("/api/entries")).json()]
    assert items == ["new", "middle", "old"]


async def test_search_entries_filters_and_paginates(client):
    await client.post("/api/entries", json={"item": "Morning coffee", "amount": 5.5, "category": "Coffee"})
    await client.post("/api/entries", json={"item": "Takeout", "amount": 28, "category": "Food", "note": "coffee after"})
    await client.post("/api/entries", json={"item": "Movie", "amount": 14, "category": "Fun"})

    response = await client.get("/api/entries/search", params={"search": "COFFEE"})
    assert response.status_code == 200
    page = response.json()
    assert page["total"] == 2
    assert {e["item"] for e in page["items"]} == {"Morning coffee", "Takeout"}

    response = await client.get("/api/entries/search", params={"category": "Fun"})
    assert [e["item"] for e in response.json()["items"]] == ["Movie"]

    response = await client.get("/api/entries/search", params={"size": 1, "page": 2})
    page = response.json()
    assert page["total"] == 3
    assert len(page["items"]) == 1


async def test_search_entries_by_date_range(client):
    await client.post("/api/entries", json={"item": "January", "amount": 1, "date": "2024-01-15T10:00:00"})
    await client.post("/api/entries", json={"item": "March", "amount": 1, "date": "2024-03-15T10:00:00"})

    response = await client.get(
        "/api/entries/search", params={"from": "2024-02-01T00:00:00", "to": "2024-04-01T00:00:00"}
    )
    assert [e["item"] for e in response.json()["items"]] == ["March"]


async def test_offset_dates_are_stored_as_utc(client, session):
    response = await client.post(
        "/api/entries", json={"item": "Brunch", "amount": 18, "date": "2024-06-01T09:15:00Z"}
    )
    assert response.status_code == 201
    created = response.json()

    fetched = (await client.get(f"/api/entries/{created['id']}")).json()
    assert fetched["date"].startswith("2024-06-01T09:15:00")

    stored = (await session.exec(select(Entry).where(Entry.id == created["id"]))).one()
    assert stored.date == datetime(2024, 6, 1, 9, 15)

    response = await client.patch(f"/api/entries/{created['id']}", json={"date": "2024-06-02T08:00:00+02:00"})
    assert response.status_code == 200
    assert response.json()["date"].startswith("2024-06-02T06:00:00")


async def test_search_date_range_accepts_utc_offsets(client):
    await client.post("/api/entries", json={"item": "Late", "amount": 1, "date": "2024-03-01T23:30:00Z"})

    response = await client.get(
        "/api/entries/search", params={"from": "2024-03-02T00:00:00+01:00", "to": "2024-03-02T02:00:00+01:00"}
    )
    assert [e["item"] for e in response.json()["items"]] == ["Late"]


async def test_search_text_wildcards_match_literally(client):
    await client.post("/api/entries", json={"item": "100% juice", "amount": 4})
    await client.post("/api/entries", json={"item": "Bagel", "amount": 3, "note": "snack_time"})
    await client.post("/api/entries", json={"item": "Cookies", "amount": 2, "note": "snacktime"})

    response = await client.get("/api/entries/search", params={"search": "100%"})
    assert [e["item"] for e in response.json()["items"]] == ["100% juice"]

    response = await client.get("/api/entries/search", params={"search": "%"})
    assert [e["item"] for e in response.json()["items"]] == ["100% juice"]

    response = await client.get("/api/entries/search", params={"search": "snack_"})
    assert [e["item"] for e in response.json()["items"]] == ["Bagel"]
