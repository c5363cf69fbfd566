"""GraphQL transport and request templates."""
from .transport import GraphQLTransport

__all__ = ["GraphQLTransport"]
