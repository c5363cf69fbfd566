"""Canonical GraphQL query/mutation strings for the DashX API."""

# Identity & events
MUTATION_IDENTIFY_ACCOUNT = """
mutation IdentifyAccount($input: IdentifyAccountInput!) {
  identifyAccount(input: $input) {
    id
  }
}
"""

MUTATION_TRACK_EVENT = """
mutation TrackEvent($input: TrackEventInput!) {
  trackEvent(input: $input) {
    success
  }
}
"""

MUTATION_CREATE_DELIVERY = """
mutation CreateDelivery($input: CreateDeliveryInput!) {
  createDelivery(input: $input) {
    id
  }
}
"""

# Content
MUTATION_ADD_CONTENT = """
mutation AddContent($input: AddContentInput!) {
  addContent(input: $input) {
    id
    identifier
    position
    data
  }
}
"""

MUTATION_EDIT_CONTENT = """
mutation EditContent($input: EditContentInput!) {
  editContent(input: $input) {
    id
    identifier
    position
    data
  }
}
"""

QUERY_SEARCH_CONTENT = """
query SearchContent($input: SearchContentInput!) {
  searchContent(input: $input)
}
"""

QUERY_FETCH_CONTENT = """
query FetchContent($input: FetchContentInput!) {
  fetchContent(input: $input)
}
"""

# Records
QUERY_SEARCH_RECORDS = """
query SearchRecords($input: SearchRecordsInput!) {
  searchRecords(input: $input)
}
"""

QUERY_FETCH_RECORD = """
query FetchRecord($input: FetchRecordInput!) {
  fetchRecord(input: $input)
}
"""

# Commerce
_ITEM_FIELDS = """
  id
  installationId
  name
  identifier
  description
  createdAt
  updatedAt
  pricings {
    id
    kind
    amount
    originalAmount
    isRecurring
    recurringInterval
    recurringIntervalUnit
    appleProductIdentifier
    googleProductIdentifier
    currencyCode
    createdAt
    updatedAt
  }
"""

_CART_FIELDS = f"""
  id
  status
  subtotal
  discount
  tax
  total
  gatewayMeta
  currencyCode
  orderItems {{
    id
    quantity
    unitPrice
    subtotal
    discount
    tax
    total
    custom
    currencyCode
    item {{
      {_ITEM_FIELDS}
    }}
  }}
  couponRedemptions {{
    coupon {{
      name
      identifier
      discountType
      discountAmount
      currencyCode
      expiresAt
    }}
  }}
"""

QUERY_FETCH_ITEM = f"""
query FetchItem($input: FetchItemInput) {{
  fetchItem(input: $input) {{
    {_ITEM_FIELDS}
  }}
}}
"""

QUERY_FETCH_CART = f"""
query FetchCart($input: FetchCartInput!) {{
  fetchCart(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

MUTATION_ADD_ITEM_TO_CART = f"""
mutation AddItemToCart($input: AddItemToCartInput!) {{
  addItemToCart(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

MUTATION_APPLY_COUPON_TO_CART = f"""
mutation ApplyCouponToCart($input: ApplyCouponToCartInput!) {{
  applyCouponToCart(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

MUTATION_REMOVE_COUPON_FROM_CART = f"""
mutation RemoveCouponFromCart($input: RemoveCouponFromCartInput!) {{
  removeCouponFromCart(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

MUTATION_TRANSFER_CART = f"""
mutation TransferCart($input: TransferCartInput!) {{
  transferCart(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

MUTATION_CHECKOUT_CART = f"""
mutation CheckoutCart($input: CheckoutCartInput!) {{
  checkoutCart(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

MUTATION_CAPTURE_PAYMENT = f"""
mutation CapturePayment($input: CapturePaymentInput!) {{
  capturePayment(input: $input) {{
    {_CART_FIELDS}
  }}
}}
"""

# Assets
_ASSET_FIELDS = """
  id
  resourceId
  attributeId
  storageProviderId
  uploaderId
  name
  size
  mimeType
  uploadStatus
  processingStatus
  url
  data
  createdAt
  updatedAt
"""

QUERY_ASSET = f"""
query Asset($id: UUID!) {{
  asset(id: $id) {{
    {_ASSET_FIELDS}
  }}
}}
"""

QUERY_ASSETS_LIST = f"""
query AssetsList($filter: AssetsListFilterInput, $order: [AssetsListOrderInput!], $limit: Int, $page: Int) {{
  assetsList(filter: $filter, order: $order, limit: $limit, page: $page) {{
    {_ASSET_FIELDS}
  }}
}}
"""

# Preferences
QUERY_FETCH_STORED_PREFERENCES = """
query FetchStoredPreferences($input: FetchStoredPreferencesInput!) {
  fetchStoredPreferences(input: $input) {
    preferenceData
  }
}
"""

MUTATION_SAVE_STORED_PREFERENCES = """
mutation SaveStoredPreferences($input: SaveStoredPreferencesInput!) {
  saveStoredPreferences(input: $input) {
    success
  }
}
"""
