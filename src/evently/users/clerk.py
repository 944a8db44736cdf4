import logging
from typing import Any

import httpx

CLERK_API_URL = "https://api.clerk.com/v1"

logger = logging.getLogger(__name__)


class Clerk:
    """
    The bits of Clerk's backend API we use.
    """

    def __init__(
        self,
        secret_key: str | None,
        base_url: str = CLERK_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.secret_key = secret_key
        self.base_url = base_url
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"Authorization": f"Bearer {self.secret_key}"}
        return httpx.AsyncClient(
            base_url=self.base_url, headers=headers, transport=self.transport
        )

    async def update_user_metadata(
        self, clerk_user_id: str, public_metadata: dict[str, Any]
    ) -> None:
        # Clerk merges this into the user's existing public metadata.
        async with self._client() as client:
            response = await client.patch(
                f"/users/{clerk_user_id}/metadata",
                json={"public_metadata": public_metadata},
            )
            response.raise_for_status()
        logger.info("Clerk metadata updated for %s", clerk_user_id)
