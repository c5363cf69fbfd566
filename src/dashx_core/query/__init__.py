"""Search option builders and filter normalization."""
from .builders import ContentOptionsBuilder, SearchRecordsInputBuilder
from .filters import parse_filter_object

__all__ = [
    "ContentOptionsBuilder",
    "SearchRecordsInputBuilder",
    "parse_filter_object",
]
