"""Chainable search option builders for content and record queries.

A builder accumulates options across setter calls and only talks to the API
when a terminal method (``one`` or ``all``) is awaited. Builders are reusable:
terminal calls keep the accumulated state, so a second ``all()`` resolves
again with everything set so far plus its own late options.

A builder is meant to be owned by one caller. Mutating the same builder from
concurrent tasks is last-writer-wins per field.
"""
import logging
from typing import Any, Awaitable, Callable, Optional

from .filters import parse_filter_object


logger = logging.getLogger(__name__)

Resolver = Callable[[dict[str, Any]], Awaitable[Any]]


def _first_or_none(data: Any) -> Any:
    if isinstance(data, list):
        return data[0] if data else None
    return data


class _OptionsBuilder:
    """Setters shared by the content and record builders."""

    def __init__(self, resolver: Resolver):
        self.options: dict[str, Any] = {}
        self._resolver = resolver

    def limit(self, by: Optional[int]):
        self.options["limit"] = by
        return self

    def page(self, number: Optional[int]):
        self.options["page"] = number
        return self

    def order(self, by: Optional[dict[str, str]]):
        self.options["order"] = by
        return self

    def language(self, to: Optional[str]):
        self.options["language"] = to
        return self

    def fields(self, identifiers: Optional[list[str]]):
        self.options["fields"] = identifiers
        return self

    def include(self, identifiers: Optional[list[str]]):
        self.options["include"] = identifiers
        return self

    def exclude(self, identifiers: Optional[list[str]]):
        self.options["exclude"] = identifiers
        return self

    def preview(self, value: bool = True):
        self.options["preview"] = value
        return self

    def _merge(self, with_options: Optional[dict[str, Any]], **tags: Any) -> dict[str, Any]:
        self.options = {**self.options, **(with_options or {}), **tags}
        return self.options


class ContentOptionsBuilder(_OptionsBuilder):
    """Builder for searchContent; tags each resolution with a returnType."""

    def filter(self, by: Optional[dict[str, Any]]):
        self.options["filter"] = parse_filter_object(by)
        return self

    async def all(self, with_options: Optional[dict[str, Any]] = None) -> Any:
        options = self._merge(with_options, returnType="all")
        logger.debug("Resolving content search (all): %s", sorted(options))
        return await self._resolver(options)

    async def one(self, with_options: Optional[dict[str, Any]] = None) -> Any:
        options = self._merge(with_options, returnType="one")
        logger.debug("Resolving content search (one): %s", sorted(options))
        data = await self._resolver(options)
        return _first_or_none(data)


class SearchRecordsInputBuilder(_OptionsBuilder):
    """Builder for searchRecords, bound to a single resource.

    Unlike ContentOptionsBuilder, ``filter`` is stored as given: record
    filters are already in the API's canonical shape.
    """

    def __init__(self, resource: str, resolver: Resolver):
        super().__init__(resolver)
        self.resource = resource

    def filter(self, by: Optional[dict[str, Any]]):
        self.options["filter"] = by or {}
        return self

    async def _resolve(self, with_options: Optional[dict[str, Any]]) -> Any:
        options = self._merge(with_options)
        logger.debug(
            "Resolving record search: resource=%s, options=%s",
            self.resource,
            sorted(options),
        )
        return await self._resolver({**options, "resource": self.resource})

    async def all(self, with_options: Optional[dict[str, Any]] = None) -> Any:
        return await self._resolve(with_options)

    async def one(self, with_options: Optional[dict[str, Any]] = None) -> Any:
        data = await self._resolve(with_options)
        return _first_or_none(data)
