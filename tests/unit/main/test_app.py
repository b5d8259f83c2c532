from __future__ import annotations

import pytest

from official_status.main.app import create_app
from official_status.main.config import AppInfoSettings, AppSettings


@pytest.mark.asyncio
async def test_create_app_uses_settings() -> None:
    app = create_app(AppSettings(app=AppInfoSettings(title="Probe API")))

    assert app.title == "Probe API"
    assert "/status/official" in app.openapi()["paths"]

    async with app.router.lifespan_context(app):
        assert app.state.container is not None
