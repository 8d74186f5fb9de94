import uuid

from django.db import models
from django.utils import timezone

class GuestSessionModel(models.Model):
    """
    Anonymous shopper identity. The token travels in the guest_session cookie
    and owns the shopper's cart. Sessions are never deleted, they just expire.
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    sessionToken = models.CharField(max_length=255, unique=True)
    expiresAt = models.DateTimeField()
    createdAt = models.DateTimeField(auto_now_add=True)

    @property
    def is_expired(self):
        return self.expiresAt <= timezone.now()

    class Meta:
        db_table = "guestSession"
