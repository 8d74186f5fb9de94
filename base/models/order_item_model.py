import uuid

from django.db import models

from .order_model import OrderModel

class OrderItemModel(models.Model):
    """
    Snapshot of a purchased line. Product and variant ids are kept as plain
    values so that editing or deleting catalog rows never changes an order.
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, db_column="orderId", related_name="items")
    productId = models.UUIDField()
    variantId = models.UUIDField(null=True, blank=True)
    productName = models.CharField(max_length=255)
    variantName = models.CharField(max_length=255, null=True, blank=True)
    sku = models.CharField(max_length=100, null=True, blank=True)
    productImage = models.CharField(max_length=1000, null=True, blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.PositiveSmallIntegerField()

    class Meta:
        db_table = "orderItem"
