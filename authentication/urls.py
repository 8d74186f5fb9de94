from rest_framework.routers import DefaultRouter

from .authentication_view import AuthenticationViewSet

router = DefaultRouter(trailing_slash="")  # No trailing slash
router.register(r"", AuthenticationViewSet, basename="auth")

urlpatterns = router.urls
