"""HTTP client for the department resource, used to compose employee responses."""

import json
import logging
import time
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from eshop.schemas.department import DepartmentResponse

if TYPE_CHECKING:
    from eshop.core.config import Settings

logger = logging.getLogger(__name__)

GENERIC_ERROR_CODE = "INTERNAL_SERVER_ERROR"


class DownstreamServiceError(Exception):
    """
    Raised when the department resource cannot supply a department.

    status_code and message come from the remote error body when it has one;
    transport failures and unreadable bodies use 500.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = GENERIC_ERROR_CODE,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message)


def _error_from_response(resp: httpx.Response) -> DownstreamServiceError:
    """Decode a remote error body ({"detail": ...} or {"message": ..., "error_code": ...})."""
    try:
        body = resp.json()
    except (json.JSONDecodeError, ValueError):
        detail = resp.text[:500] if resp.text else f"Department service returned {resp.status_code}"
        return DownstreamServiceError(detail, resp.status_code)
    if not isinstance(body, dict):
        return DownstreamServiceError(json.dumps(body)[:500], resp.status_code)
    message = body.get("message") or body.get("detail")
    if not isinstance(message, str):
        message = json.dumps(message)[:500] if message else f"Department service returned {resp.status_code}"
    error_code = body.get("error_code") or body.get("errorCode") or resp.reason_phrase
    return DownstreamServiceError(message, resp.status_code, str(error_code or GENERIC_ERROR_CODE))


class DepartmentClient:
    """Fetches departments by id with one synchronous request; no retry and no caching."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DepartmentClient":
        return cls(settings.DEPARTMENT_SERVICE_URL, settings.DEPARTMENT_REQUEST_TIMEOUT_SEC)

    async def get_department(
        self, department_id: int, authorization: str | None = None
    ) -> DepartmentResponse:
        """GET {base_url}/departments/{id}, forwarding the caller's Authorization header."""
        url = f"{self.base_url}/departments/{department_id}"
        headers = {"Authorization": authorization} if authorization else {}
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self.transport
            ) as client:
                resp = await client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(
                "Department request timed out",
                extra={"department_id": department_id, "latency_seconds": time.perf_counter() - start},
            )
            raise DownstreamServiceError("Department service request timed out.") from e
        except httpx.HTTPError as e:
            logger.error(
                "Department request failed",
                extra={"department_id": department_id, "latency_seconds": time.perf_counter() - start},
            )
            raise DownstreamServiceError("Department service is unreachable.") from e

        logger.info(
            "Department request completed",
            extra={
                "department_id": department_id,
                "status_code": resp.status_code,
                "latency_seconds": time.perf_counter() - start,
            },
        )
        if resp.status_code >= 400:
            raise _error_from_response(resp)
        try:
            return DepartmentResponse.model_validate(resp.json())
        except (json.JSONDecodeError, ValueError, ValidationError) as e:
            raise DownstreamServiceError("Department service returned an unreadable body.") from e
