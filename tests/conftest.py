from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from base import Constants
from base.enums import ROLE, DELIVERY_ZONE
from base.models import *
from api.services import DeliveryService

GUEST_TOKEN = "5b0c7a4e-2f7d-4a53-9d9e-1f0e6a1c2b3d"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def guest_session(db):
    return GuestSessionModel.objects.create(
        sessionToken=GUEST_TOKEN,
        expiresAt=timezone.now() + Constants.GUEST_SESSION_LIFETIME,
    )


@pytest.fixture
def guest_client(guest_session):
    """API client carrying the guest_session cookie of `guest_session`."""
    client = APIClient()
    client.cookies[Constants.CookieName.GUEST_SESSION] = guest_session.sessionToken
    return client


@pytest.fixture
def cart(guest_session):
    return CartModel.objects.create(guestSession=guest_session)


@pytest.fixture
def category(db):
    return CategoryModel.objects.create(name="T-Shirts", slug="t-shirts")


@pytest.fixture
def product(category):
    product = ProductModel.objects.create(
        name="Plain Tee",
        slug="plain-tee",
        category=category,
        basePrice=Decimal("100.00"),
        stock=10,
        sku="TEE-001",
    )
    ProductImageModel.objects.create(product=product, url="https://cdn.example.com/tee.jpg", position=0, isPrimary=True)
    return product


@pytest.fixture
def sale_product(category):
    return ProductModel.objects.create(
        name="Striped Tee",
        slug="striped-tee",
        category=category,
        basePrice=Decimal("100.00"),
        salePrice=Decimal("80.00"),
        stock=5,
        sku="TEE-002",
    )


@pytest.fixture
def variant_product(category):
    return ProductModel.objects.create(
        name="Polo Shirt",
        slug="polo-shirt",
        category=category,
        basePrice=Decimal("500.00"),
        salePrice=Decimal("450.00"),
        stock=0,
        hasVariants=True,
    )


@pytest.fixture
def variant(variant_product):
    return ProductVariantModel.objects.create(
        product=variant_product,
        sku="POLO-M",
        name="M",
        options={"Size": "M"},
        price=Decimal("50.00"),
        salePrice=Decimal("40.00"),
        stock=3,
        imageUrl="https://cdn.example.com/polo-m.jpg",
    )


@pytest.fixture
def inactive_variant(variant_product):
    return ProductVariantModel.objects.create(
        product=variant_product,
        sku="POLO-XL",
        name="XL",
        options={"Size": "XL"},
        price=Decimal("55.00"),
        stock=8,
        isActive=False,
    )


@pytest.fixture
def delivery_costs(db):
    DeliveryService().initialize()
    return {cost.zone: cost for cost in DeliveryCostModel.objects.all()}


@pytest.fixture
def checkout_data():
    return {
        "customerName": "Rahim Uddin",
        "customerMobile": "01712345678",
        "customerAddress": "House 12, Road 5, Dhanmondi",
        "deliveryZone": DELIVERY_ZONE.INSIDE_DHAKA.value,
    }


@pytest.fixture
def admin_user(db):
    return UserModel.objects.create_superuser("admin", "admin@example.com", "Str0ng-Passw0rd")


@pytest.fixture
def customer_user(db):
    return UserModel.objects.create_user("customer", "customer@example.com", "Str0ng-Passw0rd", role=ROLE.CUSTOMER.value)


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def customer_client(customer_user):
    client = APIClient()
    client.force_authenticate(user=customer_user)
    return client


@pytest.fixture
def make_order(db):
    """Factory for orders that did not go through checkout."""
    def _make_order(status="PENDING", total="180.00", **fields):
        defaults = {
            "customerName": "Karim Ahmed",
            "customerMobile": "01898765432",
            "customerAddress": "Flat 3B, Agrabad, Chattogram",
            "deliveryZone": DELIVERY_ZONE.OUTSIDE_DHAKA.value,
            "subtotal": Decimal(total) - Decimal("120.00"),
            "deliveryCost": Decimal("120.00"),
            "totalAmount": Decimal(total),
            "status": status,
        }
        defaults.update(fields)
        return OrderModel.objects.create(**defaults)
    return _make_order
