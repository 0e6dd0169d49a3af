"""GraphQL documents sent to the Admin API."""

PRODUCTS_QUERY = """
query getProducts($first: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        handle
        status
        totalInventory
        variants(first: 10) {
          edges {
            node {
              id
              title
              price
              inventoryQuantity
              sku
              image { url altText }
            }
          }
        }
        featuredImage { url altText }
      }
    }
  }
}
"""

CUSTOMERS_QUERY = """
query getCustomers($first: Int!, $query: String) {
  customers(first: $first, query: $query) {
    edges {
      node {
        id
        displayName
        firstName
        lastName
        email
        phone
        state
        verifiedEmail
        emailMarketingConsent { marketingState }
        smsMarketingConsent { marketingState }
      }
    }
  }
}
"""

_ORDER_FIELDS = """
  id
  name
  createdAt
  cancelledAt
  tags
  displayFinancialStatus
  displayFulfillmentStatus
  totalPriceSet { shopMoney { amount currencyCode } }
  customer { firstName lastName }
  lineItems(first: 50) { edges { node { quantity } } }
"""

ORDERS_QUERY = (
    """
query getOrders($first: Int!) {
  orders(first: $first, reverse: true) {
    edges {
      node {"""
    + _ORDER_FIELDS
    + """      }
    }
  }
}
"""
)

ORDER_QUERY = (
    """
query getOrder($id: ID!) {
  order(id: $id) {"""
    + _ORDER_FIELDS
    + """  }
}
"""
)

DRAFT_ORDER_CREATE = """
mutation draftOrderCreate($input: DraftOrderInput!) {
  draftOrderCreate(input: $input) {
    draftOrder { id name }
    userErrors { field message }
  }
}
"""

DRAFT_ORDER_COMPLETE = """
mutation draftOrderComplete($id: ID!) {
  draftOrderComplete(id: $id) {
    draftOrder {
      id
      order { id name }
    }
    userErrors { field message }
  }
}
"""

ORDER_CANCEL = """
mutation orderCancel($id: ID!, $reason: OrderCancelReason) {
  orderCancel(id: $id, reason: $reason) {
    order { id cancelledAt }
    userErrors { field message }
  }
}
"""

ORDER_DELETE = """
mutation orderDelete($id: ID!) {
  orderDelete(id: $id) {
    deletedOrderId
    userErrors { field message }
  }
}
"""

CUSTOMER_CREATE = """
mutation customerCreate($input: CustomerInput!) {
  customerCreate(input: $input) {
    customer { id displayName email }
    userErrors { field message }
  }
}
"""

PRODUCT_CREATE = """
mutation productCreate($input: ProductInput!) {
  productCreate(input: $input) {
    product { id title handle status }
    userErrors { field message }
  }
}
"""
