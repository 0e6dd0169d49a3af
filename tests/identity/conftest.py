import pytest
from commerce.gateway.port import Customer


@pytest.fixture()
def customers():
    return [
        Customer(
            id="gid://shopify/Customer/1",
            display_name="Asha Rao",
            email="asha@example.com",
            state="ENABLED",
            email_marketing_state="SUBSCRIBED",
        ),
        Customer(
            id="gid://shopify/Customer/2",
            display_name="Ben Okafor",
            email="ben@shop.test",
            state="INVITED",
            verified_email=False,
        ),
        Customer(
            id="gid://shopify/Customer/3",
            display_name="Chen Li",
            email=None,
            state="ENABLED",
            verified_email=False,
            sms_marketing_state="UNSUBSCRIBED",
        ),
    ]


@pytest.fixture()
def stocked_gateway(gateway, customers):
    gateway.customers.extend(customers)
    return gateway
