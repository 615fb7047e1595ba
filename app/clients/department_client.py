"""HTTP client for the department service."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from app.exceptions import DependencyUnavailable
from app.schemas.department import DepartmentOut

logger = logging.getLogger(__name__)


class DepartmentClient:
    """
    Looks departments up by code over HTTP.

    Each call opens a short-lived ``httpx.AsyncClient`` bounded by ``timeout``
    and is made exactly once.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def get_department_by_code(self, code: str) -> Optional[DepartmentOut]:
        """
        Fetch the department with the given code.

        Returns:
            The department, or None when the department service does not know the code.

        Raises:
            DependencyUnavailable: On timeouts, transport errors, unexpected
                statuses, or a body that is not a department.
        """
        url = f"{self.base_url}/code/{quote(code, safe='')}"
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self.transport) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except httpx.TimeoutException as e:
            logger.error("Department lookup for code %s timed out after %ss", code, self.timeout)
            raise DependencyUnavailable(
                message="Department service unavailable",
                details=f"Lookup of department '{code}' timed out",
            ) from e
        except httpx.HTTPError as e:
            logger.error("Department lookup for code %s failed: %s", code, e)
            raise DependencyUnavailable(
                message="Department service unavailable",
                details=f"Lookup of department '{code}' failed: {e.__class__.__name__}",
            ) from e

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning("Department service has no department with code %s", code)
            return None
        if response.status_code != httpx.codes.OK:
            logger.error("Department lookup for code %s returned HTTP %s", code, response.status_code)
            raise DependencyUnavailable(
                message="Department service unavailable",
                details=f"Lookup of department '{code}' returned HTTP {response.status_code}",
            )

        try:
            return DepartmentOut.model_validate(response.json())
        except ValueError as e:
            logger.error("Department service returned an invalid body for code %s", code)
            raise DependencyUnavailable(
                message="Department service unavailable",
                details=f"Lookup of department '{code}' returned an invalid response",
            ) from e
