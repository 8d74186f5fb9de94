import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import F

from base.enums import ORDER_STATUS
from base.models import OrderModel, OrderItemModel, ProductModel, ProductVariantModel
from base.results import ActionResult
from base.services import PricingService

from .cart_service import CartService
from .delivery_service import DeliveryService

logger = logging.getLogger(__name__)

VALID_STATUSES = [status.value for status in ORDER_STATUS]
ORDER_NOT_FOUND = "Order not found"


class InsufficientStockError(Exception):
    """Raised inside the order transaction when an item is out of stock."""


class OrderService:
    """
    Places cash-on-delivery orders from a guest cart and moves orders through
    their statuses.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.carts = CartService(using=using)
        self.delivery = DeliveryService(using=using)

    def place_order(self, token, details):
        """
        Turn the guest's cart into an order.

        The order, its item snapshots and the stock decrements are written in
        a single transaction: either all of them happen or none do. The cart
        is cleared afterwards, outside the transaction.

        Args:
            token (str): Guest session token.
            details (CheckoutDetails): Validated customer and delivery details.

        Returns:
            ActionResult: `data` is {"orderId": ...} on success.
        """
        cart = self.carts.get_cart(token)
        items = list(cart.items.all()) if cart else []
        if not items:
            return ActionResult.fail("Your cart is empty")

        for item in items:
            if item.variant is not None and not item.variant.isActive:
                return ActionResult.fail(f"{item.product.name} ({item.variant.name}) is no longer available")

        delivery_cost = self.delivery.get_cost(details.deliveryZone)
        if not delivery_cost.success:
            return ActionResult.fail("Invalid delivery zone")

        subtotal = PricingService.calculate_subtotal(items)
        total = PricingService.calculate_total(subtotal, delivery_cost.data)

        try:
            with transaction.atomic(using=self.using):
                order = OrderModel.objects.using(self.using).create(
                    customerName=details.customerName,
                    customerMobile=details.customerMobile,
                    customerAddress=details.customerAddress,
                    deliveryZone=details.deliveryZone,
                    subtotal=subtotal,
                    deliveryCost=delivery_cost.data,
                    totalAmount=total,
                )
                OrderItemModel.objects.using(self.using).bulk_create(
                    [self._snapshot(order, item) for item in items]
                )
                for item in items:
                    self._decrement_stock(item)
        except InsufficientStockError as e:
            logger.warning(f"Order rejected for guest cart {cart.id}: {e}")
            return ActionResult.fail(str(e))
        except Exception as e:
            logger.error(f"Failed to place order for guest cart {cart.id}: {e}", exc_info=True)
            return ActionResult.fail("Failed to place order")

        logger.info(f"Order {order.id} placed: subtotal={subtotal}, delivery={delivery_cost.data}, total={total}")

        cleared = self.carts.clear_cart(token)
        if not cleared.success:
            # The order stands even if the cart could not be emptied
            logger.warning(f"Could not clear cart {cart.id} after order {order.id}: {cleared.error}")

        return ActionResult.ok({"orderId": order.id})

    @staticmethod
    def _snapshot(order, item):
        product = item.product
        variant = item.variant
        image = product.primary_image

        return OrderItemModel(
            order=order,
            productId=product.id,
            variantId=variant.id if variant else None,
            productName=product.name,
            variantName=variant.name if variant else None,
            sku=(variant.sku if variant else None) or product.sku,
            productImage=(variant.imageUrl if variant else None) or (image.url if image else None),
            price=PricingService.effective_unit_price(item),
            quantity=item.quantity,
        )

    def _decrement_stock(self, item):
        """
        Take the item's quantity out of the variant's stock, or the product's
        when no variant is selected.

        With STORE_PREVENT_OVERSELL on, the update only applies while enough
        stock is left and an InsufficientStockError aborts the order otherwise.
        """
        if item.variant is not None:
            rows = ProductVariantModel.objects.using(self.using).filter(id=item.variant_id)
            label = f"{item.product.name} ({item.variant.name})"
        else:
            rows = ProductModel.objects.using(self.using).filter(id=item.product_id)
            label = item.product.name

        if getattr(settings, "STORE_PREVENT_OVERSELL", True):
            rows = rows.filter(stock__gte=item.quantity)

        if rows.update(stock=F("stock") - item.quantity) == 0:
            raise InsufficientStockError(f"Insufficient stock for {label}")

    def update_status(self, order_id, new_status):
        """
        Move an order to `new_status`.

        Setting the current status again changes nothing. Delivering an order
        also marks it as paid.

        Returns:
            ActionResult: `data` is the OrderModel.
        """
        if new_status not in VALID_STATUSES:
            return ActionResult.fail("Invalid order status")

        with transaction.atomic(using=self.using):
            order = (
                OrderModel.objects.using(self.using)
                .select_for_update()
                .filter(id=order_id)
                .first()
            )
            if order is None:
                return ActionResult.fail(ORDER_NOT_FOUND)

            previous = order.status
            try:
                changed = order.transition_to(new_status)
            except ValidationError as e:
                return ActionResult.fail(e.messages[0])

            if changed:
                order.save(using=self.using, update_fields=changed)
                logger.info(f"Order {order.id} status changed from {previous} to {new_status}")

        return ActionResult.ok(order)
