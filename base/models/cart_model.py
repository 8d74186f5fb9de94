import uuid

from django.db import models
from django.db.models import CheckConstraint, Q

from base.services import PricingService

from .user_model import UserModel
from .guest_session_model import GuestSessionModel

class CartModel(models.Model):
    """
    A shopping cart owned by either a user or a guest session, never both.
    Created lazily on the first add-to-cart.
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    user = models.OneToOneField(
        UserModel,
        on_delete=models.CASCADE,
        db_column="userId",
        null=True,
        blank=True,
        related_name="cart"
    )
    guestSession = models.OneToOneField(
        GuestSessionModel,
        on_delete=models.CASCADE,
        db_column="guestSessionId",
        null=True,
        blank=True,
        related_name="cart"
    )
    createdAt = models.DateTimeField(auto_now_add=True)
    updatedAt = models.DateTimeField(auto_now=True)

    @property
    def itemCount(self):
        return sum(item.quantity for item in self.items.all())

    @property
    def subtotal(self):
        return PricingService.calculate_subtotal(self.items.all())

    class Meta:
        db_table = "cart"
        constraints = [
            CheckConstraint(
                condition=Q(user__isnull=True) | Q(guestSession__isnull=True),
                name="cart_single_owner"
            )
        ]
