"""Async GraphQL transport for the DashX API."""
import logging
from typing import Any, Optional

import aiohttp

from ..config import ClientConfig
from ..exceptions import DashXGraphQLError


logger = logging.getLogger(__name__)


class GraphQLTransport:
    """Sends one GraphQL POST per call and unwraps the response envelope.

    No retries, no batching and no timeout policy of its own: aiohttp and
    JSON decoding errors propagate unchanged.
    """

    USER_AGENT = "dashx-python"

    def __init__(
        self,
        config: ClientConfig,
        session: Optional[aiohttp.ClientSession] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize transport.

        Args:
            config: Endpoint and credentials (keys are never logged)
            session: Optional injected ClientSession, owned by the caller.
                When omitted, a session is opened for each request.
            logger_instance: Optional logger
        """
        self.config = config
        self.session = session
        self.logger = logger_instance or logger

    @property
    def endpoint(self) -> str:
        return self.config.base_uri

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.USER_AGENT,
            "X-Public-Key": self.config.public_key or "",
            "X-Private-Key": self.config.private_key or "",
            "X-Target-Environment": self.config.target_environment or "",
            "Content-Type": "application/json",
        }
        if self.config.target_installation:
            headers["X-Target-Installation"] = self.config.target_installation
        return headers

    async def send(self, query: str, variables: Optional[dict[str, Any]] = None) -> Any:
        """POST a query and return the envelope's ``data`` value.

        Args:
            query: GraphQL document
            variables: GraphQL variables

        Returns:
            The ``data`` field of the response

        Raises:
            DashXGraphQLError: If the response has no data; ``.errors`` holds
                the envelope's ``errors`` value verbatim, or the whole body
                when it is not a JSON object
        """
        payload = {"query": query, "variables": variables or {}}

        if self.session is not None:
            json_data = await self._post(self.session, payload)
        else:
            async with aiohttp.ClientSession() as session:
                json_data = await self._post(session, payload)

        if not isinstance(json_data, dict):
            self.logger.warning(f"Non-object JSON body from {self.endpoint}")
            raise DashXGraphQLError(json_data)

        data = json_data.get("data")
        if data is not None:
            return data

        errors = json_data.get("errors")
        self.logger.warning(f"GraphQL errors from {self.endpoint}: {errors}")
        raise DashXGraphQLError(errors)

    async def _post(self, session: aiohttp.ClientSession, payload: dict) -> dict:
        self.logger.debug(f"POST {self.endpoint}")
        async with session.post(
            self.endpoint,
            json=payload,
            headers=self._headers(),
        ) as resp:
            # Error envelopes may arrive with non-2xx statuses; decode regardless
            return await resp.json(content_type=None)
