import uuid

from django.db import models

class BannerModel(models.Model):
    """
    Storefront carousel banner
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    imageUrl = models.CharField(max_length=1000)
    linkUrl = models.CharField(max_length=1000, null=True, blank=True)
    position = models.PositiveIntegerField(default=0)
    isActive = models.BooleanField(default=True)
    createdAt = models.DateTimeField(auto_now_add=True)
    updatedAt = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "banner"
