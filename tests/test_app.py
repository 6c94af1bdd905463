"""Tests for application assembly."""

import pytest

from app.config import settings
from app.core.middleware import RateLimitMiddleware, booking_limiter, rate_limiting_enabled
from app.main import create_application


def _has_rate_limit_middleware(application) -> bool:
    return any(m.cls is RateLimitMiddleware for m in application.user_middleware)


class TestRateLimitSwitch:
    @pytest.mark.parametrize(
        "environment,debug,enabled",
        [
            ("production", False, True),
            ("staging", False, True),
            ("production", True, False),
            ("development", False, False),
            ("test", False, False),
        ],
    )
    def test_middleware_follows_switch(self, monkeypatch, environment, debug, enabled):
        monkeypatch.setattr(settings, "environment", environment)
        monkeypatch.setattr(settings, "debug", debug)

        assert rate_limiting_enabled() is enabled
        assert _has_rate_limit_middleware(create_application()) is enabled

    @pytest.mark.asyncio
    async def test_endpoint_limiter_skips_redis_in_debug(self, monkeypatch):
        monkeypatch.setattr(settings, "environment", "production")
        monkeypatch.setattr(settings, "debug", True)

        async def fail():
            raise AssertionError("redis must not be contacted")

        monkeypatch.setattr(booking_limiter, "get_redis", fail)

        assert await booking_limiter(request=None) is None
