"""Async DashX client: one method per remote GraphQL operation."""
import logging
import uuid
from typing import Any, Awaitable, Optional, Union

import aiohttp

from .config import ClientConfig
from .exceptions import DashXInvalidLocatorError
from .graphql import graphql_strings as gql
from .graphql.transport import GraphQLTransport
from .identity import generate_identity_token
from .query.builders import ContentOptionsBuilder, SearchRecordsInputBuilder
from .query.filters import parse_filter_object
from .schemas.inputs import (
    AddItemToCartInput,
    AssetsListQuery,
    CapturePaymentInput,
    CartCouponInput,
    CartInput,
    CheckoutCartInput,
    StoredPreferencesInput,
)


logger = logging.getLogger(__name__)

Uid = Union[str, int]

CONTENT_URN = "{contentType}/{content}"
RECORD_URN = "{resource}/{recordId}"


def _split_urn(urn: str, expected: str) -> tuple[str, str]:
    """Split ``type/id`` on the first '/', failing before any request is made."""
    if "/" not in urn:
        raise DashXInvalidLocatorError(urn, expected)
    head, tail = urn.split("/", 1)
    return head, tail


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else [value]


class DashXClient:
    """Async client for the DashX GraphQL API.

    Each method shapes its arguments into the operation's ``input`` variable,
    sends a single request and returns the operation's field from the
    response (or None when absent). Remote errors raise DashXGraphQLError;
    transport errors propagate unchanged.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        logger_instance: Optional[logging.Logger] = None,
        **overrides: Optional[str],
    ):
        """Initialize DashX client.

        Args:
            config: Explicit configuration. When omitted it is read from the
                DASHX_* environment variables.
            session: Optional injected aiohttp ClientSession
            logger_instance: Optional logger
            **overrides: base_uri, public_key, private_key,
                target_environment, target_installation

        Raises:
            DashXConfigurationError: If public key, private key or target
                environment is missing
        """
        if config is None:
            config = ClientConfig.from_env(**overrides)
        elif overrides:
            config = config.with_overrides(**overrides)

        self.config = config.require()
        self.logger = logger_instance or logger
        self.transport = GraphQLTransport(
            self.config, session=session, logger_instance=self.logger
        )

        self.logger.info(
            f"DashX client ready: endpoint={self.config.base_uri}, "
            f"environment={self.config.target_environment}"
        )

    async def _request(
        self,
        operation: str,
        query: str,
        params: Optional[dict[str, Any]] = None,
        variables: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one operation and unwrap its field from the response data."""
        if variables is None:
            variables = {"input": params}

        self.logger.debug(f"Dispatching {operation}")
        data = await self.transport.send(query, variables)
        return (data or {}).get(operation)

    # Identity & events

    async def identify(self, uid: Optional[Uid] = None, **options: Any) -> Any:
        """Identify an account, or an anonymous visitor when uid is omitted."""
        if uid is not None:
            params = {"uid": str(uid), **options}
        else:
            params = {"anonymousUid": str(uuid.uuid4()), **options}

        return await self._request(
            "identifyAccount", gql.MUTATION_IDENTIFY_ACCOUNT, params
        )

    async def track(
        self,
        event: str,
        account_uid: Optional[Uid] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> Any:
        params = {
            "event": event,
            "accountUid": None if account_uid is None else str(account_uid),
            "data": data,
        }
        return await self._request("trackEvent", gql.MUTATION_TRACK_EVENT, params)

    async def deliver(self, urn: str, options: Optional[dict[str, Any]] = None) -> Any:
        """Create a delivery for ``{contentType}/{content}``.

        Recipients (to, cc, bcc) may be given inside ``content`` or at the top
        level of ``options``; either way they are sent as lists inside
        ``content``.
        """
        content_type, content_id = _split_urn(urn, CONTENT_URN)

        rest = dict(options or {})
        content = dict(rest.pop("content", None) or {})
        recipients = {key: rest.pop(key, None) for key in ("to", "cc", "bcc")}

        for key, value in recipients.items():
            chosen = content.get(key) or value
            if chosen:
                content[key] = _as_list(chosen)

        params = {
            "contentTypeIdentifier": content_type,
            "contentIdentifier": content_id,
            "content": content,
            **rest,
        }
        return await self._request(
            "createDelivery", gql.MUTATION_CREATE_DELIVERY, params
        )

    # Content

    @staticmethod
    def _content_params(urn: str, data: dict[str, Any]) -> dict[str, Any]:
        # A bare content type is allowed here; the content id is optional
        if "/" in urn:
            content_type, content = urn.split("/", 1)
        else:
            content_type, content = urn, None

        params = {"contentType": content_type, "data": data}
        if content is not None:
            params["content"] = content
        return params

    async def add_content(self, urn: str, data: dict[str, Any]) -> Any:
        return await self._request(
            "addContent", gql.MUTATION_ADD_CONTENT, self._content_params(urn, data)
        )

    async def edit_content(self, urn: str, data: dict[str, Any]) -> Any:
        return await self._request(
            "editContent", gql.MUTATION_EDIT_CONTENT, self._content_params(urn, data)
        )

    def search_content(
        self,
        content_type: str,
        options: Optional[dict[str, Any]] = None,
    ) -> Union[ContentOptionsBuilder, Awaitable[Any]]:
        """Search content of one type.

        Without options, returns a ContentOptionsBuilder to chain on:

            posts = await client.search_content("blog").limit(5).all()

        With options, returns an awaitable resolving like ``one()`` or, when
        ``options["returnType"] == "all"``, like ``all()``. The shorthand
        filter in options is normalized the same way the builder does.
        """

        async def resolver(wrapped_options: dict[str, Any]) -> Any:
            return await self._request(
                "searchContent",
                gql.QUERY_SEARCH_CONTENT,
                {**wrapped_options, "contentType": content_type},
            )

        builder = ContentOptionsBuilder(resolver)
        if options is None:
            return builder

        options = {**options, "filter": parse_filter_object(options.get("filter"))}
        if options.get("returnType") == "all":
            return builder.all(options)
        return builder.one(options)

    async def fetch_content(
        self, urn: str, options: Optional[dict[str, Any]] = None
    ) -> Any:
        content_type, content = _split_urn(urn, CONTENT_URN)
        params = {"contentType": content_type, "content": content, **(options or {})}
        return await self._request("fetchContent", gql.QUERY_FETCH_CONTENT, params)

    # Records

    def search_records(
        self,
        resource: str,
        options: Optional[dict[str, Any]] = None,
    ) -> Union[SearchRecordsInputBuilder, Awaitable[Any]]:
        """Search records of one resource.

        Without options, returns a SearchRecordsInputBuilder; with options,
        returns an awaitable resolving like ``all()``. Record filters are sent
        as given.
        """

        async def resolver(wrapped_options: dict[str, Any]) -> Any:
            return await self._request(
                "searchRecords", gql.QUERY_SEARCH_RECORDS, wrapped_options
            )

        builder = SearchRecordsInputBuilder(resource, resolver)
        if options is None:
            return builder
        return builder.all(options)

    async def fetch_record(
        self, urn: str, options: Optional[dict[str, Any]] = None
    ) -> Any:
        resource, record_id = _split_urn(urn, RECORD_URN)
        params = {"resource": resource, "recordId": record_id, **(options or {})}
        return await self._request("fetchRecord", gql.QUERY_FETCH_RECORD, params)

    # Commerce

    async def fetch_item(self, identifier: str) -> Any:
        return await self._request(
            "fetchItem", gql.QUERY_FETCH_ITEM, {"identifier": identifier}
        )

    async def fetch_cart(
        self,
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
        order_id: Optional[str] = None,
    ) -> Any:
        cart = CartInput(uid=uid, anonymous_uid=anonymous_uid, order_id=order_id)
        return await self._request("fetchCart", gql.QUERY_FETCH_CART, cart.to_input())

    async def add_item_to_cart(
        self,
        item: str,
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
        pricing_id: Optional[str] = None,
        quantity: Union[str, int] = 1,
        reset: bool = False,
        custom: Optional[dict[str, Any]] = None,
    ) -> Any:
        cart = AddItemToCartInput(
            item_id=item,
            uid=uid,
            anonymous_uid=anonymous_uid,
            pricing_id=pricing_id,
            quantity=quantity,
            reset=reset,
            custom=custom,
        )
        return await self._request(
            "addItemToCart", gql.MUTATION_ADD_ITEM_TO_CART, cart.to_input()
        )

    async def apply_coupon_to_cart(
        self,
        coupon_code: str,
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
    ) -> Any:
        cart = CartCouponInput(
            coupon_code=coupon_code, uid=uid, anonymous_uid=anonymous_uid
        )
        return await self._request(
            "applyCouponToCart", gql.MUTATION_APPLY_COUPON_TO_CART, cart.to_input()
        )

    async def remove_coupon_from_cart(
        self,
        coupon_code: str,
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
    ) -> Any:
        cart = CartCouponInput(
            coupon_code=coupon_code, uid=uid, anonymous_uid=anonymous_uid
        )
        return await self._request(
            "removeCouponFromCart",
            gql.MUTATION_REMOVE_COUPON_FROM_CART,
            cart.to_input(),
        )

    async def transfer_cart(
        self,
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
    ) -> Any:
        """Move an anonymous visitor's cart to an identified account."""
        cart = CartInput(uid=uid, anonymous_uid=anonymous_uid)
        return await self._request(
            "transferCart", gql.MUTATION_TRANSFER_CART, cart.to_input()
        )

    async def checkout_cart(
        self,
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
        gateway: Optional[str] = None,
        gateway_options: Optional[dict[str, Any]] = None,
        order_id: Optional[str] = None,
    ) -> Any:
        cart = CheckoutCartInput(
            uid=uid,
            anonymous_uid=anonymous_uid,
            gateway=gateway,
            gateway_options=gateway_options,
            order_id=order_id,
        )
        return await self._request(
            "checkoutCart", gql.MUTATION_CHECKOUT_CART, cart.to_input()
        )

    async def capture_payment(
        self,
        gateway_response: dict[str, Any],
        uid: Optional[Uid] = None,
        anonymous_uid: Optional[str] = None,
        order_id: Optional[str] = None,
    ) -> Any:
        cart = CapturePaymentInput(
            gateway_response=gateway_response,
            uid=uid,
            anonymous_uid=anonymous_uid,
            order_id=order_id,
        )
        return await self._request(
            "capturePayment", gql.MUTATION_CAPTURE_PAYMENT, cart.to_input()
        )

    # Assets

    async def get_asset(self, asset_id: str) -> Any:
        return await self._request(
            "asset", gql.QUERY_ASSET, variables={"id": asset_id}
        )

    async def list_assets(
        self,
        filter: Optional[dict[str, Any]] = None,
        order: Optional[list[dict[str, Any]]] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
    ) -> Any:
        query = AssetsListQuery(filter=filter, order=order, limit=limit, page=page)
        return await self._request(
            "assetsList", gql.QUERY_ASSETS_LIST, variables=query.to_input()
        )

    # Preferences

    async def fetch_stored_preferences(self, uid: Uid) -> Any:
        prefs = StoredPreferencesInput(uid=uid)
        result = await self._request(
            "fetchStoredPreferences",
            gql.QUERY_FETCH_STORED_PREFERENCES,
            prefs.to_input(),
        )
        return (result or {}).get("preferenceData")

    async def save_stored_preferences(
        self, uid: Uid, preferences: dict[str, Any]
    ) -> Any:
        prefs = StoredPreferencesInput(uid=uid, preference_data=preferences)
        result = await self._request(
            "saveStoredPreferences",
            gql.MUTATION_SAVE_STORED_PREFERENCES,
            prefs.to_input(),
        )
        return (result or {}).get("success")

    # Tokens

    def generate_identity_token(self, uid: Uid, kind: str = "regular") -> str:
        """Build an identity token for ``uid`` signed with this client's key."""
        return generate_identity_token(self.config.private_key, uid, kind)
