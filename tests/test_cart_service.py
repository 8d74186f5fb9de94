from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from base.models import CartModel, CartItemModel, GuestSessionModel
from api.services import CartService

from .conftest import GUEST_TOKEN

pytestmark = pytest.mark.django_db


@pytest.fixture
def service():
    return CartService()


def test_get_cart_without_session_is_none(service):
    assert service.get_cart("unknown-token") is None


def test_get_cart_without_cart_is_none(service, guest_session):
    assert service.get_cart(GUEST_TOKEN) is None


def test_get_cart_ignores_expired_session(service, cart, product):
    CartItemModel.objects.create(cart=cart, product=product, quantity=1)
    GuestSessionModel.objects.filter(id=cart.guestSession_id).update(expiresAt=timezone.now() - timedelta(minutes=1))

    assert service.get_cart(GUEST_TOKEN) is None


def test_get_cart_lists_items_newest_first(service, cart, product, sale_product):
    older = CartItemModel.objects.create(cart=cart, product=product, quantity=1)
    newer = CartItemModel.objects.create(cart=cart, product=sale_product, quantity=2)
    CartItemModel.objects.filter(id=older.id).update(createdAt=timezone.now() - timedelta(hours=1))

    loaded = service.get_cart(GUEST_TOKEN)

    assert [item.id for item in loaded.items.all()] == [newer.id, older.id]
    assert loaded.subtotal == Decimal("260.00")
    assert loaded.itemCount == 3


def test_add_item_creates_cart_lazily(service, guest_session, product):
    assert not CartModel.objects.exists()

    result = service.add_item(GUEST_TOKEN, product.id, None, 2)

    assert result.success
    cart = CartModel.objects.get(guestSession=guest_session)
    assert cart.user is None
    assert result.data.cart_id == cart.id
    assert result.data.quantity == 2


def test_add_same_item_increments_quantity(service, guest_session, product):
    service.add_item(GUEST_TOKEN, product.id, None, 2)
    result = service.add_item(GUEST_TOKEN, product.id, None, 3)

    assert result.success
    assert CartItemModel.objects.count() == 1
    assert CartItemModel.objects.get().quantity == 5


def test_increment_is_capped_at_99(service, guest_session, product):
    service.add_item(GUEST_TOKEN, product.id, None, 98)
    result = service.add_item(GUEST_TOKEN, product.id, None, 5)

    assert result.success
    assert CartItemModel.objects.get().quantity == 99


@pytest.mark.parametrize("quantity", [0, -1, 100])
def test_add_item_rejects_out_of_range_quantity(service, guest_session, product, quantity):
    result = service.add_item(GUEST_TOKEN, product.id, None, quantity)

    assert not result.success
    assert not CartItemModel.objects.exists()


def test_add_item_unknown_product(service, guest_session):
    result = service.add_item(GUEST_TOKEN, "00000000-0000-0000-0000-000000000000", None, 1)

    assert not result.success
    assert result.error == "Product not found"


def test_add_item_requires_variant_for_variant_product(service, guest_session, variant_product, variant):
    result = service.add_item(GUEST_TOKEN, variant_product.id, None, 1)

    assert not result.success
    assert result.error == "Please select a variant"


def test_add_item_rejects_inactive_variant(service, guest_session, variant_product, inactive_variant):
    result = service.add_item(GUEST_TOKEN, variant_product.id, inactive_variant.id, 1)

    assert not result.success
    assert not CartItemModel.objects.exists()


def test_add_item_rejects_variant_of_other_product(service, guest_session, product, variant):
    result = service.add_item(GUEST_TOKEN, product.id, variant.id, 1)

    assert not result.success
    assert result.error == "Variant not found"


def test_same_product_different_variants_are_separate_lines(service, guest_session, variant_product, variant):
    other = variant_product.variants.create(sku="POLO-L", name="L", price=Decimal("60.00"), stock=2)

    service.add_item(GUEST_TOKEN, variant_product.id, variant.id, 1)
    service.add_item(GUEST_TOKEN, variant_product.id, other.id, 1)

    assert CartItemModel.objects.count() == 2


def test_update_quantity_below_one_removes_item(service, cart, product):
    item = CartItemModel.objects.create(cart=cart, product=product, quantity=4)

    result = service.update_quantity(GUEST_TOKEN, item.id, 0)

    assert result.success
    assert result.data is None
    assert not CartItemModel.objects.filter(id=item.id).exists()


def test_update_quantity_above_99_is_rejected(service, cart, product):
    item = CartItemModel.objects.create(cart=cart, product=product, quantity=4)

    result = service.update_quantity(GUEST_TOKEN, item.id, 100)

    assert not result.success
    item.refresh_from_db()
    assert item.quantity == 4


def test_update_quantity_sets_value(service, cart, product):
    item = CartItemModel.objects.create(cart=cart, product=product, quantity=4)

    result = service.update_quantity(GUEST_TOKEN, item.id, 7)

    assert result.success
    item.refresh_from_db()
    assert item.quantity == 7


def test_items_of_other_guests_are_not_found(service, cart, product):
    other_session = GuestSessionModel.objects.create(
        sessionToken="someone-else", expiresAt=timezone.now() + timedelta(days=1)
    )
    other_cart = CartModel.objects.create(guestSession=other_session)
    foreign = CartItemModel.objects.create(cart=other_cart, product=product, quantity=1)

    assert service.remove_item(GUEST_TOKEN, foreign.id).error == "Cart item not found"
    assert service.update_quantity(GUEST_TOKEN, foreign.id, 3).error == "Cart item not found"
    assert CartItemModel.objects.filter(id=foreign.id, quantity=1).exists()


def test_remove_item_with_malformed_id(service, cart):
    assert not service.remove_item(GUEST_TOKEN, "not-a-uuid").success


def test_clear_cart_is_idempotent(service, cart, product, sale_product):
    CartItemModel.objects.create(cart=cart, product=product, quantity=1)
    CartItemModel.objects.create(cart=cart, product=sale_product, quantity=1)

    first = service.clear_cart(GUEST_TOKEN)
    second = service.clear_cart(GUEST_TOKEN)

    assert first.success and first.data == 2
    assert second.success and second.data == 0
    assert not CartItemModel.objects.exists()
    assert CartModel.objects.filter(id=cart.id).exists()


def test_clear_cart_without_cart_succeeds(service, guest_session):
    assert service.clear_cart(GUEST_TOKEN).success


def test_clear_cart_without_session_fails(service):
    assert not service.clear_cart("unknown-token").success


def test_summary_of_missing_cart_is_empty(service, guest_session):
    assert service.get_summary(GUEST_TOKEN) == {"itemCount": 0, "subtotal": Decimal("0")}


def test_summary_counts_units_and_prices_variants(service, cart, sale_product, variant):
    CartItemModel.objects.create(cart=cart, product=sale_product, quantity=2)
    CartItemModel.objects.create(cart=cart, product=variant.product, variant=variant, quantity=1)

    summary = service.get_summary(GUEST_TOKEN)

    assert summary["itemCount"] == 3
    assert summary["subtotal"] == Decimal("200.00")
