import logging

from django.conf import settings

from base import Constants
from base.utils import parse_uuid
from api.services import GuestSessionService

logger = logging.getLogger(__name__)


class RefreshCookieMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # authenticate request
        response = self.get_response(request)

        # issue new access token if the current expired
        new_access = getattr(request, "_access", None)

        # Also check session if request attribute is not found
        if not new_access and hasattr(request, "session"):
            new_access = request.session.pop(Constants.Session.NEW_ACCESS_TOKEN, None)

        if new_access:
            response.set_cookie(
                Constants.CookieName.ACCESS_TOKEN,
                new_access,
                httponly=True,
                secure=settings.SESSION_COOKIE_SECURE,
                samesite=Constants.CookiePolicy.SAME_SITE,
                max_age=int(Constants.ACCESS_TOKEN_LIFETIME.total_seconds()),
            )

        return response


class GuestSessionMiddleware:
    """
    Gives every storefront visitor a guest session.

    The token comes from the guest_session cookie, or the X-Guest-Session
    header for clients without cookies. Tokens are UUIDs; visitors without
    one, or with anything else, get a new token. The session row is created
    for unknown tokens and renewed when expired, and request.guest_token is
    set for the views.
    """
    exempt_paths = ["/health"]

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if any(request.path.startswith(path) for path in self.exempt_paths):
            return self.get_response(request)

        cookie_token = self._valid_token(request.COOKIES.get(Constants.CookieName.GUEST_SESSION))
        token = cookie_token or self._valid_token(request.headers.get(Constants.Header.GUEST_SESSION))
        if not token:
            token = GuestSessionService.generate_token()

        GuestSessionService().ensure(token)
        request.guest_token = token

        response = self.get_response(request)

        if not cookie_token:
            response.set_cookie(
                Constants.CookieName.GUEST_SESSION,
                token,
                httponly=True,
                secure=settings.SESSION_COOKIE_SECURE,
                samesite=Constants.CookiePolicy.SAME_SITE,
                max_age=int(Constants.GUEST_SESSION_LIFETIME.total_seconds()),
            )

        return response

    @staticmethod
    def _valid_token(value):
        if not value:
            return None

        parsed = parse_uuid(value)
        return str(parsed) if parsed else None
