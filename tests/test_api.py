from decimal import Decimal

import pytest

from base.models import *

pytestmark = pytest.mark.django_db


# Checkout

def test_checkout_places_order(guest_client, cart, sale_product, variant, delivery_costs, checkout_data):
    CartItemModel.objects.create(cart=cart, product=sale_product, quantity=1)
    CartItemModel.objects.create(cart=cart, product=variant.product, variant=variant, quantity=1)

    response = guest_client.post("/api/checkout", checkout_data, format="json")

    assert response.status_code == 201
    order = OrderModel.objects.get(id=response.data["orderId"])
    assert order.totalAmount == Decimal("180.00")
    assert not CartItemModel.objects.exists()


def test_checkout_validation_errors_are_per_field(guest_client, cart, product, delivery_costs):
    CartItemModel.objects.create(cart=cart, product=product, quantity=1)

    response = guest_client.post("/api/checkout", {
        "customerName": "A",
        "customerMobile": "0171",
        "customerAddress": "Dhaka",
        "deliveryZone": "MARS",
    }, format="json")

    assert response.status_code == 400
    assert set(response.data) == {"customerName", "customerMobile", "customerAddress", "deliveryZone"}
    assert not OrderModel.objects.exists()


def test_checkout_with_empty_cart(guest_client, guest_session, delivery_costs, checkout_data):
    response = guest_client.post("/api/checkout", checkout_data, format="json")

    assert response.status_code == 400
    assert response.data == {"error": "Your cart is empty"}


# Cart

def test_cart_add_update_remove(guest_client, guest_session, product):
    response = guest_client.post("/api/cart", {"productId": str(product.id), "quantity": 2}, format="json")
    assert response.status_code == 201
    item_id = response.data["id"]
    assert response.data["unitPrice"] == "100.00"
    assert response.data["lineTotal"] == "200.00"

    response = guest_client.get("/api/cart")
    assert response.data["itemCount"] == 2
    assert response.data["subtotal"] == "200.00"
    assert response.data["items"][0]["product"]["primaryImage"]["url"] == "https://cdn.example.com/tee.jpg"

    response = guest_client.put(f"/api/cart/{item_id}", {"quantity": 5}, format="json")
    assert response.status_code == 200
    assert response.data["quantity"] == 5

    response = guest_client.put(f"/api/cart/{item_id}", {"quantity": 0}, format="json")
    assert response.status_code == 204
    assert not CartItemModel.objects.exists()


def test_cart_add_rejects_quantity_over_99(guest_client, guest_session, product):
    response = guest_client.post("/api/cart", {"productId": str(product.id), "quantity": 100}, format="json")

    assert response.status_code == 400
    assert "quantity" in response.data


def test_cart_clear(guest_client, cart, product):
    CartItemModel.objects.create(cart=cart, product=product, quantity=1)

    assert guest_client.delete("/api/cart/clear").status_code == 204
    assert guest_client.delete("/api/cart/clear").status_code == 204
    assert not CartItemModel.objects.exists()


def test_empty_cart_read(guest_client, guest_session):
    response = guest_client.get("/api/cart")

    assert response.data["items"] == []
    assert response.data["subtotal"] == "0.00"


# Admin authorization

@pytest.mark.parametrize("method,url", [
    ("get", "/api/order"),
    ("get", "/api/order/ORD-000000-MISSING"),
    ("post", "/api/order/ORD-000000-MISSING/status"),
    ("get", "/api/order/statistics"),
    ("put", "/api/delivery/cost"),
    ("post", "/api/product"),
    ("delete", "/api/category/00000000-0000-0000-0000-000000000000"),
])
def test_admin_endpoints_require_authentication(api_client, method, url):
    response = getattr(api_client, method)(url, {}, format="json")

    assert response.status_code == 401


@pytest.mark.parametrize("method,url", [
    ("get", "/api/order"),
    ("get", "/api/order/ORD-000000-MISSING"),
    ("post", "/api/order/ORD-000000-MISSING/status"),
    ("put", "/api/delivery/cost"),
])
def test_admin_endpoints_forbid_customers(customer_client, method, url):
    response = getattr(customer_client, method)(url, {"status": "SHIPPED"}, format="json")

    assert response.status_code == 403


def test_forbidden_regardless_of_order_existence(customer_client, make_order):
    order = make_order()

    response = customer_client.post(f"/api/order/{order.id}/status", {"status": "PROCESSING"}, format="json")

    assert response.status_code == 403
    order.refresh_from_db()
    assert order.status == "PENDING"


# Admin orders

def test_admin_updates_status_to_delivered(admin_client, make_order):
    order = make_order(status="SHIPPED")

    response = admin_client.post(f"/api/order/{order.id}/status", {"status": "DELIVERED"}, format="json")

    assert response.status_code == 200
    assert response.data["status"] == "DELIVERED"
    assert response.data["paymentStatus"] == "PAID"


def test_admin_invalid_transition(admin_client, make_order):
    order = make_order(status="DELIVERED")

    response = admin_client.post(f"/api/order/{order.id}/status", {"status": "PENDING"}, format="json")

    assert response.status_code == 400
    assert "error" in response.data


def test_admin_status_of_missing_order(admin_client):
    response = admin_client.post("/api/order/ORD-000000-MISSING/status", {"status": "SHIPPED"}, format="json")

    assert response.status_code == 404
    assert response.data == {"error": "Order not found"}


def test_admin_order_list_paginates_and_filters(admin_client, make_order):
    for _ in range(3):
        make_order(status="PENDING")
    make_order(status="SHIPPED", customerName="Selina Parvin")

    response = admin_client.get("/api/order", {"limit": 2})
    assert response.status_code == 200
    assert len(response.data["data"]) == 2
    assert response.data["pagination"] == {
        "page": 1, "limit": 2, "total": 4, "totalPages": 2, "hasNext": True, "hasPrevious": False,
    }

    response = admin_client.get("/api/order", {"status": "SHIPPED"})
    assert [order["customerName"] for order in response.data["data"]] == ["Selina Parvin"]

    response = admin_client.get("/api/order", {"search": "selina"})
    assert response.data["pagination"]["total"] == 1


def test_admin_order_detail_has_items(admin_client, make_order):
    order = make_order()
    OrderItemModel.objects.create(
        order=order, productId="11111111-1111-1111-1111-111111111111",
        productName="Plain Tee", price=Decimal("60.00"), quantity=1,
    )

    response = admin_client.get(f"/api/order/{order.id}")

    assert response.status_code == 200
    assert response.data["items"][0]["productName"] == "Plain Tee"


def test_statistics_exclude_cancelled_revenue(admin_client, make_order, product):
    make_order(status="PENDING", total="180.00")
    make_order(status="DELIVERED", total="300.00")
    make_order(status="CANCELLED", total="999.00")

    response = admin_client.get("/api/order/statistics")

    assert response.data["totalOrders"] == 3
    assert response.data["pendingOrders"] == 1
    assert response.data["cancelledOrders"] == 1
    assert Decimal(str(response.data["totalRevenue"])) == Decimal("480.00")
    assert response.data["totalProducts"] == 1


def test_sales_analytics_groups_by_day(admin_client, make_order):
    from django.utils import timezone
    make_order(status="PENDING", total="180.00")
    make_order(status="SHIPPED", total="200.00")
    make_order(status="CANCELLED", total="999.00")
    today = timezone.localdate().isoformat()

    response = admin_client.get("/api/order/analytics", {"startDate": today, "endDate": today})

    assert response.status_code == 200
    assert len(response.data) == 1
    assert response.data[0]["date"] == today
    assert response.data[0]["orders"] == 2
    assert Decimal(str(response.data[0]["sales"])) == Decimal("380.00")


def test_top_products(admin_client, make_order):
    order = make_order()
    OrderItemModel.objects.create(order=order, productId="11111111-1111-1111-1111-111111111111", productName="Tee", price=Decimal("10.00"), quantity=2)
    OrderItemModel.objects.create(order=order, productId="22222222-2222-2222-2222-222222222222", productName="Polo", price=Decimal("10.00"), quantity=5)

    response = admin_client.get("/api/order/top-products", {"limit": 1})

    assert response.data == [{"id": "22222222-2222-2222-2222-222222222222", "name": "Polo", "quantity": 5}]


# Delivery

def test_public_delivery_costs(api_client):
    response = api_client.get("/api/delivery")

    assert response.status_code == 200
    assert {cost["zone"]: cost["cost"] for cost in response.data} == {
        "INSIDE_DHAKA": "60.00", "OUTSIDE_DHAKA": "120.00",
    }


def test_admin_updates_delivery_cost(admin_client, delivery_costs):
    response = admin_client.put("/api/delivery/cost", {"zone": "OUTSIDE_DHAKA", "cost": "150.00"}, format="json")

    assert response.status_code == 200
    assert DeliveryCostModel.objects.get(zone="OUTSIDE_DHAKA").cost == Decimal("150.00")


# Catalog

def test_product_list_filters_and_sorts(api_client, product, sale_product, variant):
    response = api_client.get("/api/product", {"sortBy": "name", "sortOrder": "asc"})
    assert [p["name"] for p in response.data["data"]] == ["Plain Tee", "Polo Shirt", "Striped Tee"]

    response = api_client.get("/api/product", {"hasVariants": "true"})
    assert [p["slug"] for p in response.data["data"]] == ["polo-shirt"]

    response = api_client.get("/api/product", {"search": "striped"})
    assert response.data["pagination"]["total"] == 1


def test_product_detail_by_slug(api_client, variant_product, variant, inactive_variant):
    response = api_client.get("/api/product/polo-shirt")

    assert response.status_code == 200
    assert [v["sku"] for v in response.data["variants"]] == ["POLO-M"]
    assert response.data["totalStock"] == 3
    assert response.data["priceRange"] == {"min": "40.00", "max": "40.00"}


def test_public_product_reads_hide_cost_price(api_client, variant_product, variant):
    ProductModel.objects.filter(id=variant_product.id).update(costPrice=Decimal("30.00"))
    ProductVariantModel.objects.filter(id=variant.id).update(costPrice=Decimal("25.00"))

    detail = api_client.get("/api/product/polo-shirt").data
    listing = api_client.get("/api/product").data["data"]

    assert "costPrice" not in detail
    assert "costPrice" not in detail["variants"][0]
    assert "costPrice" not in listing[0]
    assert "costPrice" not in listing[0]["variants"][0]


def test_admin_product_read_includes_cost_price(admin_client, variant_product, variant):
    ProductVariantModel.objects.filter(id=variant.id).update(costPrice=Decimal("25.00"))

    response = admin_client.get(f"/api/product/{variant_product.id}")

    assert response.data["variants"][0]["costPrice"] == "25.00"


def test_unknown_product(api_client, db):
    assert api_client.get("/api/product/no-such-product").status_code == 404


def test_admin_creates_product_with_variants(admin_client, category):
    response = admin_client.post("/api/product", {
        "name": "Hoodie",
        "slug": "hoodie",
        "categoryId": str(category.id),
        "basePrice": "1200.00",
        "stock": 0,
        "hasVariants": True,
        "images": [{"url": "https://cdn.example.com/hoodie.jpg", "position": 0, "isPrimary": True}],
        "variantOptions": [{"name": "Size", "values": ["M", "L"]}],
        "variants": [
            {"sku": "HOOD-M", "name": "M", "options": {"Size": "M"}, "price": "1200.00", "stock": 4, "isActive": True},
            {"sku": "HOOD-L", "name": "L", "options": {"Size": "L"}, "price": "1250.00", "stock": 2, "isActive": True},
        ],
    }, format="json")

    assert response.status_code == 201
    product = ProductModel.objects.get(slug="hoodie")
    assert product.variants.count() == 2
    assert product.images.count() == 1
    assert product.variantOptions.get().values == ["M", "L"]


def test_create_product_with_taken_variant_sku(admin_client, category, variant):
    response = admin_client.post("/api/product", {
        "name": "Polo Copy", "slug": "polo-copy", "categoryId": str(category.id),
        "basePrice": "50.00", "stock": 0, "hasVariants": True,
        "variants": [{"sku": "POLO-M", "name": "M", "options": {"Size": "M"}, "price": "50.00", "stock": 1}],
    }, format="json")

    assert response.status_code == 400
    assert response.data["variants"] == ["SKU POLO-M is already in use."]
    assert not ProductModel.objects.filter(slug="polo-copy").exists()


def test_create_product_with_repeated_variant_sku(admin_client, category):
    variant = {"sku": "CAP-1", "name": "One size", "options": {"Size": "One size"}, "price": "300.00", "stock": 1}

    response = admin_client.post("/api/product", {
        "name": "Cap", "slug": "cap", "categoryId": str(category.id),
        "basePrice": "300.00", "stock": 0, "hasVariants": True,
        "variants": [variant, dict(variant, name="Copy")],
    }, format="json")

    assert response.status_code == 400
    assert response.data["variants"] == ["SKU CAP-1 is repeated."]


def test_update_can_reuse_sku_of_removed_variant(admin_client, variant_product, variant):
    response = admin_client.patch(f"/api/product/{variant_product.id}", {
        "variants": [{"sku": "POLO-M", "name": "Medium", "options": {"Size": "M"}, "price": "55.00", "stock": 2}],
    }, format="json")

    assert response.status_code == 200
    remaining = variant_product.variants.get()
    assert remaining.sku == "POLO-M"
    assert remaining.id != variant.id
    assert remaining.name == "Medium"


def test_variant_product_needs_variants(admin_client, category):
    response = admin_client.post("/api/product", {
        "name": "Hoodie", "slug": "hoodie", "categoryId": str(category.id),
        "basePrice": "1200.00", "stock": 0, "hasVariants": True,
    }, format="json")

    assert response.status_code == 400
    assert "variants" in response.data


def test_category_with_products_cannot_be_deleted(admin_client, product):
    response = admin_client.delete(f"/api/category/{product.category_id}")

    assert response.status_code == 400
    assert CategoryModel.objects.filter(id=product.category_id).exists()


def test_active_banners_are_public(api_client, db):
    BannerModel.objects.create(imageUrl="https://cdn.example.com/b2.jpg", position=2)
    BannerModel.objects.create(imageUrl="https://cdn.example.com/b1.jpg", position=1)
    BannerModel.objects.create(imageUrl="https://cdn.example.com/off.jpg", position=0, isActive=False)

    response = api_client.get("/api/banner/active")

    assert [b["imageUrl"] for b in response.data] == [
        "https://cdn.example.com/b1.jpg", "https://cdn.example.com/b2.jpg",
    ]
