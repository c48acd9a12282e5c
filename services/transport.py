from typing import Any, Dict, Optional
from crud import operations
from crud.exceptions import ResolverError
from config.settings import settings
import httpx
import logging

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Base class for every failure seen by the service client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OperationError(ClientError):
    """The server answered with an ``errors`` envelope."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class TransportError(ClientError):
    """The server could not be reached or sent back something unreadable."""


class InProcessTransport:
    """Calls the operation table directly, with the same data shapes as the wire."""

    async def execute(self, operation: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        try:
            return await operations.execute(operation, variables or {})
        except ResolverError as e:
            raise OperationError(e.message, e.code) from e
        except Exception as e:
            logger.error(f"Unexpected error in operation {operation}: {str(e)}", exc_info=True)
            raise TransportError("Internal server error") from e

    async def close(self) -> None:
        pass


class HttpTransport:
    """Posts operation envelopes to the ``/graphql`` endpoint of a running server."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout
        )

    async def execute(self, operation: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        payload = {"operationName": operation, "variables": variables or {}}
        try:
            response = await self.client.post("/graphql", json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Request for {operation} to {self.base_url} failed: {str(e)}")
            raise TransportError(f"Could not reach booking service: {str(e)}") from e
        except ValueError as e:
            logger.error(f"Malformed response for {operation}: {str(e)}")
            raise TransportError("Booking service returned a malformed response") from e

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            first = errors[0] if isinstance(errors, list) else None
            if not isinstance(first, dict) or not isinstance(first.get("extensions", {}), dict):
                logger.error(f"Malformed errors envelope for {operation}: {errors!r}")
                raise TransportError("Booking service returned a malformed response")
            raise OperationError(
                first.get("message", "Unknown error"),
                first.get("extensions", {}).get("code")
            )

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict) or operation not in data:
            raise TransportError(f"Response for {operation} carried no data")
        return data[operation]

    async def close(self) -> None:
        await self.client.aclose()
