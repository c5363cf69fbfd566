"""Async Python client for the DashX GraphQL API."""
from typing import Optional

import aiohttp

from .client import DashXClient
from .config import ClientConfig
from .exceptions import (
    DashXClientError,
    DashXConfigurationError,
    DashXGraphQLError,
    DashXInvalidLocatorError,
)
from .identity import generate_identity_token
from .query import ContentOptionsBuilder, SearchRecordsInputBuilder, parse_filter_object


def create_client(
    session: Optional[aiohttp.ClientSession] = None, **options: Optional[str]
) -> DashXClient:
    """Create a client; unset options default to the DASHX_* environment."""
    return DashXClient(session=session, **options)


__all__ = [
    "ClientConfig",
    "ContentOptionsBuilder",
    "DashXClient",
    "DashXClientError",
    "DashXConfigurationError",
    "DashXGraphQLError",
    "DashXInvalidLocatorError",
    "SearchRecordsInputBuilder",
    "create_client",
    "generate_identity_token",
    "parse_filter_object",
]
