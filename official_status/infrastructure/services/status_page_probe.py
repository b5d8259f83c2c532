"""Infrastructure implementation of the official status page probe."""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from official_status.domain.entities.errors import (
    MalformedResponseError,
    ProbeError,
    ProbeHttpError,
    ProbeTimeoutError,
    ProbeTransportError,
)
from official_status.domain.entities.health import StatusResult, utc_timestamp
from official_status.domain.ports.status_probe import IErrorLogger, IStatusProbe
from official_status.domain.services.indicator_classifier import classify_indicator
from official_status.shared import CHECK_OPERATION, DEFAULT_TIMEOUT_MS, get_logger

logger = get_logger(__name__)


class StatusIndicator(BaseModel):
    """The ``status`` object of a status page summary."""

    indicator: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("indicator", mode="before")
    @classmethod
    def _reject_null_indicator(cls, value: object) -> object:
        # An absent indicator is allowed; an explicit null is not.
        if value is None:
            raise ValueError("indicator must not be null")
        return value


class StatusPagePayload(BaseModel):
    """Fields read from ``/api/v2/status.json``."""

    status: StatusIndicator

    model_config = ConfigDict(extra="ignore")


class StatusPageProbe(IStatusProbe):
    """Query a status page and normalize its indicator."""

    def __init__(
        self,
        endpoint: str,
        error_logger: IErrorLogger,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        self._endpoint = endpoint
        self._error_logger = error_logger
        self._timeout_ms = timeout_ms
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    async def check(self) -> StatusResult:
        """Run one probe. Every failure is returned as an unknown result."""

        checked_at = utc_timestamp()

        try:
            payload = await self._fetch_with_deadline()
        except ProbeError as exc:
            self._report(exc)
            return StatusResult.unknown(exc.result_message, checked_at)
        except Exception as exc:
            self._report(exc)
            return StatusResult.unknown(ProbeError.result_message, checked_at)

        status = classify_indicator(payload.status.indicator)
        logger.debug(
            "status_probe.check.completed",
            endpoint=self._endpoint,
            indicator=payload.status.indicator,
            status=status.value,
        )
        return StatusResult(
            status=status,
            message=payload.status.description or "",
            checked_at=checked_at,
        )

    async def _fetch_with_deadline(self) -> StatusPagePayload:
        # wait_for cancels the fetch when the deadline wins, so a late body is
        # never parsed; on completion the timer is discarded.
        try:
            return await asyncio.wait_for(
                self._fetch(), timeout=self._timeout_ms / 1000
            )
        except asyncio.TimeoutError as exc:
            raise ProbeTimeoutError(self._timeout_ms) from exc

    async def _fetch(self) -> StatusPagePayload:
        async with httpx.AsyncClient(
            timeout=self._timeout_ms / 1000,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(
                    self._endpoint, headers={"Accept": "application/json"}
                )
            except httpx.TimeoutException as exc:
                raise ProbeTimeoutError(
                    self._timeout_ms, details={"url": self._endpoint}
                ) from exc
            except httpx.RequestError as exc:
                raise ProbeTransportError(
                    f"Status page request failed: {exc}",
                    details={"url": self._endpoint},
                ) from exc

        if not response.is_success:
            raise ProbeHttpError(
                response.status_code, details={"url": self._endpoint}
            )

        try:
            return StatusPagePayload.model_validate_json(response.content)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected status page payload: {exc.error_count()} error(s)",
                details={"url": self._endpoint},
            ) from exc

    def _report(self, error: BaseException) -> None:
        try:
            self._error_logger.log_error(CHECK_OPERATION, error)
        except Exception:
            logger.warning(
                "status_probe.error_logger.failed",
                endpoint=self._endpoint,
                exc_info=True,
            )
