from __future__ import annotations

import json
from typing import Any, Callable, List, Tuple

import httpx
import pytest

from official_status.infrastructure.services.status_page_probe import StatusPageProbe

STATUS_URL = "https://status.example.com/api/v2/status.json"


class RecordingErrorLogger:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, BaseException]] = []

    def log_error(self, operation: str, error: BaseException) -> None:
        self.calls.append((operation, error))


def _status_payload(indicator: Any = "none", description: Any = "All good") -> bytes:
    return json.dumps(
        {
            "page": {
                "id": "abc123",
                "name": "Example",
                "url": "https://status.example.com",
                "updated_at": "2024-09-09T12:00:00.000Z",
            },
            "status": {"indicator": indicator, "description": description},
        }
    ).encode()


@pytest.fixture()
def status_payload() -> Callable[..., bytes]:
    return _status_payload


@pytest.fixture()
def error_logger() -> RecordingErrorLogger:
    return RecordingErrorLogger()


@pytest.fixture()
def make_probe(
    error_logger: RecordingErrorLogger,
) -> Callable[..., StatusPageProbe]:
    def _make(handler: Callable[..., Any], timeout_ms: int = 1000) -> StatusPageProbe:
        return StatusPageProbe(
            STATUS_URL,
            error_logger,
            timeout_ms=timeout_ms,
            transport=httpx.MockTransport(handler),
        )

    return _make
