from rest_framework.routers import DefaultRouter

from .controllers import *

router = DefaultRouter(trailing_slash="")  # No trailing slash
router.register(r"cart", CartViewSet, "cart")
router.register(r"checkout", CheckoutViewSet, "checkout")
router.register(r"delivery", DeliveryViewSet, "delivery")
router.register(r"order", OrderViewSet, "order")
router.register(r"product", ProductViewSet, "product")
router.register(r"category", CategoryViewSet, "category")
router.register(r"banner", BannerViewSet, "banner")

urlpatterns = router.urls
