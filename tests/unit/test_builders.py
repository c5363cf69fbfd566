"""Unit tests for the content and record search builders."""
from unittest.mock import AsyncMock

import pytest

from dashx_core.query.builders import ContentOptionsBuilder, SearchRecordsInputBuilder


@pytest.mark.asyncio
async def test_content_chain_resolves_with_union_of_options():
    resolver = AsyncMock(return_value=[{"id": 1}])
    builder = ContentOptionsBuilder(resolver)

    result = await builder.filter({"_status": "x"}).limit(5).all({"page": 2})

    assert result == [{"id": 1}]
    resolver.assert_awaited_once_with(
        {"filter": {"status": "x"}, "limit": 5, "page": 2, "returnType": "all"}
    )


@pytest.mark.asyncio
async def test_setters_return_same_builder_and_overwrite():
    resolver = AsyncMock(return_value=[])
    builder = ContentOptionsBuilder(resolver)

    assert builder.limit(1) is builder
    assert builder.order({"createdAt": "DESC"}) is builder
    assert builder.language("en-US") is builder
    assert builder.fields(["title"]) is builder
    assert builder.include(["author"]) is builder
    assert builder.exclude(["body"]) is builder
    assert builder.preview() is builder
    assert builder.page(3) is builder
    builder.limit(10)

    await builder.all()

    options = resolver.await_args.args[0]
    assert options == {
        "limit": 10,
        "order": {"createdAt": "DESC"},
        "language": "en-US",
        "fields": ["title"],
        "include": ["author"],
        "exclude": ["body"],
        "preview": True,
        "page": 3,
        "returnType": "all",
    }


@pytest.mark.asyncio
async def test_late_options_override_chained_values():
    resolver = AsyncMock(return_value=[])
    builder = ContentOptionsBuilder(resolver).limit(5).language("en")

    await builder.all({"limit": 20})

    options = resolver.await_args.args[0]
    assert options["limit"] == 20
    assert options["language"] == "en"


@pytest.mark.asyncio
async def test_terminal_calls_do_not_reset_state():
    resolver = AsyncMock(return_value=[])
    builder = ContentOptionsBuilder(resolver).limit(5)

    await builder.all({"page": 1})
    await builder.all({"page": 2})

    assert resolver.await_count == 2
    first, second = (call.args[0] for call in resolver.await_args_list)
    assert first["page"] == 1
    assert second == {"limit": 5, "page": 2, "returnType": "all"}


@pytest.mark.asyncio
async def test_content_one_tags_return_type_and_narrows():
    resolver = AsyncMock(return_value=[{"id": "a"}, {"id": "b"}])
    builder = ContentOptionsBuilder(resolver)

    result = await builder.one()

    assert result == {"id": "a"}
    assert resolver.await_args.args[0]["returnType"] == "one"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "resolved, expected",
    [
        ([], None),
        ([{"id": 1}], {"id": 1}),
        ({"id": 7}, {"id": 7}),
        (None, None),
    ],
)
async def test_one_narrowing(resolved, expected):
    content = ContentOptionsBuilder(AsyncMock(return_value=resolved))
    records = SearchRecordsInputBuilder("users", AsyncMock(return_value=resolved))

    assert await content.one() == expected
    assert await records.one() == expected


@pytest.mark.asyncio
async def test_records_filter_is_not_normalized():
    resolver = AsyncMock(return_value=[])
    builder = SearchRecordsInputBuilder("orders", resolver)

    await builder.filter({"_status": "x", "total": {"gt": 10}}).all()

    options = resolver.await_args.args[0]
    assert options["filter"] == {"_status": "x", "total": {"gt": 10}}
    assert "returnType" not in options


@pytest.mark.asyncio
async def test_records_filter_none_becomes_empty():
    resolver = AsyncMock(return_value=[])

    await SearchRecordsInputBuilder("orders", resolver).filter(None).all()

    assert resolver.await_args.args[0]["filter"] == {}


@pytest.mark.asyncio
async def test_records_resource_merged_at_resolution():
    resolver = AsyncMock(return_value=[])
    builder = SearchRecordsInputBuilder("orders", resolver).limit(2)

    await builder.all({"resource": "other", "page": 4})

    assert resolver.await_args.args[0] == {"limit": 2, "page": 4, "resource": "orders"}
    assert builder.resource == "orders"


@pytest.mark.asyncio
async def test_resolver_errors_propagate():
    resolver = AsyncMock(side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError, match="boom"):
        await ContentOptionsBuilder(resolver).all()

    with pytest.raises(RuntimeError, match="boom"):
        await SearchRecordsInputBuilder("orders", resolver).one()


def test_builders_do_not_share_state():
    first = ContentOptionsBuilder(AsyncMock()).limit(1)
    second = ContentOptionsBuilder(AsyncMock())

    assert second.options == {}
    assert first.options == {"limit": 1}
