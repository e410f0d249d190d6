import pytest

from skipsave.services.rate_limit.service import RateLimitService
from skipsave.services.settings.base import Settings
from skipsave.services.settings.service import SettingsService


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock, monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_MAX", "3")
    monkeypatch.setenv("RATE_LIMIT_WINDOW_SECONDS", "60")
    return RateLimitService(SettingsService(Settings()), clock=clock)


def test_requests_over_the_limit_are_refused(limiter):
    assert [limiter.hit("1.2.3.4") for _ in range(4)] == [True, True, True, False]
    assert limiter.hit("5.6.7.8") is True


def test_window_resets(limiter, clock):
    for _ in range(4):
        limiter.hit("1.2.3.4")
    assert limiter.retry_after("1.2.3.4") == 60

    clock.now += 0.5
    assert limiter.retry_after("1.2.3.4") == 60
    clock.now += 0.5
    assert limiter.retry_after("1.2.3.4") == 59

    clock.now += 59
    assert limiter.retry_after("1.2.3.4") == 0

    assert limiter.hit("1.2.3.4") is True


def test_expired_windows_are_swept(limiter, clock):
    limiter.hit("1.2.3.4")
    limiter.hit("5.6.7.8")
    clock.now += 61
    limiter.hit("9.9.9.9")
    assert set(limiter.store) == {"9.9.9.9"}


async def test_write_endpoints_return_429(monkeypatch):
    from httpx import ASGITransport, AsyncClient

    from skipsave.main import create_app
    from skipsave.services.util import initialize_services, teardown_services

    monkeypatch.setenv("RATE_LIMIT_MAX", "2")
    await initialize_services()
    try:
        async with AsyncClient(transport=ASGITransport(app=create_app()), base_url="http://test") as client:
            for _ in range(2):
                assert (await client.post("/api/entries", json={"item": "Coffee", "amount": 1})).status_code == 201

            response = await client.post("/api/entries", json={"item": "Coffee", "amount": 1})
            assert response.status_code == 429
            assert response.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
            assert 0 < int(response.headers["retry-after"]) <= 60

            # reads are not throttled
            assert (await client.get("/api/entries")).status_code == 200
    finally:
        await teardown_services()
