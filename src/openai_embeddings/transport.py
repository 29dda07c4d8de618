import logging

import httpx
from pydantic import BaseModel

from openai_embeddings.errors import APIStatusError
from openai_embeddings.operations.base import Operation

logger = logging.getLogger(__name__)


class Client:
    """HTTP transport for :class:`Operation` values.

    Owns host, TLS, authentication and timeouts. Operations only describe
    the method, path and body.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._transport = transport

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def bearer_auth(self, token: str) -> "Client":
        return Client(
            self.base_url,
            token=token,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def send(self, operation: Operation) -> BaseModel:
        endpoint = operation.endpoint()
        logger.debug(f"Sending {operation.method} {endpoint}")

        try:
            response = await self.client.request(
                operation.method,
                endpoint,
                json=operation.data(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text[:500]
            logger.warning(
                f"{operation.method} {endpoint} failed "
                f"(HTTP {e.response.status_code}): {body}"
            )
            raise APIStatusError(e.response.status_code, body) from e

        return operation.parse_response(response.content)

    async def close(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
