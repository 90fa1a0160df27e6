from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from userhub.core import app_factory
from userhub.core.app_factory import create_application
from userhub.core.config import Settings
from userhub.domain.errors import ServiceInitError

pytestmark = pytest.mark.anyio


class RecordingPool:
    instances: List["RecordingPool"] = []

    def __init__(self) -> None:
        self.connection_kwargs: dict = {}
        self.disconnected = False
        RecordingPool.instances.append(self)

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "RecordingPool":
        return cls()

    async def disconnect(self) -> None:
        self.disconnected = True


@pytest.fixture()
def recording_pool(monkeypatch: pytest.MonkeyPatch):
    RecordingPool.instances = []
    monkeypatch.setattr(app_factory, "ConnectionPool", RecordingPool)
    return RecordingPool


async def test_pool_is_closed_when_service_cannot_start(tmp_path: Path, recording_pool) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")
    settings = Settings()
    settings.database_path = blocker / "users.db"
    app = create_application(settings=settings)

    with pytest.raises(ServiceInitError):
        async with app.router.lifespan_context(app):
            pass

    assert len(recording_pool.instances) == 1
    assert recording_pool.instances[0].disconnected


async def test_pool_is_closed_on_shutdown(tmp_path: Path, recording_pool) -> None:
    settings = Settings()
    settings.database_path = tmp_path / "users.db"
    app = create_application(settings=settings)

    async with app.router.lifespan_context(app):
        assert app.state.container.users_service is not None
        assert not recording_pool.instances[0].disconnected

    assert recording_pool.instances[0].disconnected
