import uuid

from django.db import models
from django.db.models import CheckConstraint, Q

from base.enums import DELIVERY_ZONE

class DeliveryCostModel(models.Model):
    """
    Flat delivery cost for a zone. There is exactly one row per zone.
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    zone = models.CharField(
        max_length=20,
        unique=True,
        choices=[(zone.value, zone.name.replace("_", " ").title()) for zone in DELIVERY_ZONE],
    )
    cost = models.DecimalField(max_digits=12, decimal_places=2)
    updatedAt = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "deliveryCost"
        ordering = ["zone"]
        constraints = [
            CheckConstraint(
                condition=Q(cost__gte=0),
                name="delivery_cost_min_0"
            )
        ]
