import uuid

from django.db import models
from django.core.exceptions import ValidationError
from django.utils import timezone

from .user_model import UserModel

from base.enums import ORDER_STATUS, PAYMENT_STATUS, DELIVERY_ZONE

# Forward path plus cancellation from any non-terminal status
ALLOWED_STATUS_TRANSITIONS = {
    ORDER_STATUS.PENDING.value: {ORDER_STATUS.PROCESSING.value, ORDER_STATUS.CANCELLED.value},
    ORDER_STATUS.PROCESSING.value: {ORDER_STATUS.SHIPPED.value, ORDER_STATUS.CANCELLED.value},
    ORDER_STATUS.SHIPPED.value: {ORDER_STATUS.DELIVERED.value, ORDER_STATUS.CANCELLED.value},
    ORDER_STATUS.DELIVERED.value: set(),
    ORDER_STATUS.CANCELLED.value: set(),
}

def generate_order_id():
    return f"ORD-{timezone.now():%y%m%d}-{uuid.uuid4().hex[:8].upper()}"

class OrderModel(models.Model):
    """
    Historical record of a checkout. Totals and items are captured when the
    order is placed and are not recomputed from the catalog afterwards.
    """
    id = models.CharField(max_length=32, primary_key=True, editable=False, default=generate_order_id)
    createdAt = models.DateTimeField(auto_now_add=True)
    updatedAt = models.DateTimeField(auto_now=True)

    user = models.ForeignKey(
        UserModel,
        on_delete=models.SET_NULL,
        db_column="userId",
        null=True,
        blank=True,
        related_name="orders"
    )

    customerName = models.CharField(max_length=255)
    customerMobile = models.CharField(max_length=20)
    customerAddress = models.TextField()
    deliveryZone = models.CharField(
        max_length=20,
        choices=[(zone.value, zone.name.replace("_", " ").title()) for zone in DELIVERY_ZONE],
    )

    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    deliveryCost = models.DecimalField(max_digits=12, decimal_places=2)
    totalAmount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=[(status.value, status.name.title()) for status in ORDER_STATUS],
        default=ORDER_STATUS.PENDING.value,
        db_index=True
    )
    paymentStatus = models.CharField(
        max_length=20,
        choices=[(status.value, status.name.title()) for status in PAYMENT_STATUS],
        default=PAYMENT_STATUS.PENDING.value
    )

    def can_transition_to(self, new_status):
        return new_status in ALLOWED_STATUS_TRANSITIONS.get(self.status, set())

    def transition_to(self, new_status):
        """
        Move the order to `new_status` and return the fields that changed.

        Delivering an order marks it PAID (cash on delivery). No other
        transition touches paymentStatus.

        Raises:
            ValidationError: If the transition is not allowed.
        """
        if new_status == self.status:
            return []

        if not self.can_transition_to(new_status):
            raise ValidationError(
                f"Cannot change order status from {self.status} to {new_status}"
            )

        self.status = new_status
        changed = ["status", "updatedAt"]
        if new_status == ORDER_STATUS.DELIVERED.value:
            self.paymentStatus = PAYMENT_STATUS.PAID.value
            changed.append("paymentStatus")
        return changed

    class Meta:
        db_table = "order"
