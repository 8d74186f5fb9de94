import logging

from django.conf import settings

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError

from api.serializers import UserModelSerializer

from base import Constants
from base import utils
from base.models import UserModel

logger = logging.getLogger(__name__)

class AuthenticationViewSet(viewsets.ViewSet):
    """
    Handles sign-in, token refresh, sign-out and the current user.
    Tokens travel in HttpOnly cookies only.
    """

    @action(detail=False, methods=["post"], url_path="login", permission_classes=[AllowAny])
    def login(self, request):
        """
        Log in a user by username OR email.

        POST /auth/login
        Request body JSON:
        {
          "username": "string (username or email)",
          "password": "string"
        }
        """
        identifier = request.data.get("username", "")
        password = request.data.get("password", "")

        # Choose lookup on email vs username
        lookup = {"email": identifier} if "@" in identifier else {"username": identifier}

        user = UserModel.objects.filter(**lookup).first()
        if not user or not user.check_password(password):
            return Response({"detail": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)
        if not user.is_active:
            return Response({"detail": "Account disabled"}, status=status.HTTP_403_FORBIDDEN)

        refreshToken = RefreshToken.for_user(user)
        accessToken = refreshToken.access_token
        utils.store_hashed_refresh(user, str(refreshToken))

        logger.info(f"User {user.username} signed in")
        return setCookie(accessToken, refreshToken, user)

    @action(detail=False, methods=["post"], url_path="refresh", permission_classes=[AllowAny])
    def refresh(self, request):
        """
        POST /auth/refresh
        Rotates the refreshToken cookie: the old token is blacklisted and
        a new access/refresh pair is issued.
        """
        raw_refresh = request.COOKIES.get(Constants.CookieName.REFRESH_TOKEN)
        if not raw_refresh:
            return Response({"detail": "Refresh token missing"}, status=status.HTTP_401_UNAUTHORIZED)

        try:
            token = RefreshToken(raw_refresh)
        except TokenError:
            return Response({"detail": "Refresh token invalid or expired"}, status=status.HTTP_401_UNAUTHORIZED)

        user = UserModel.objects.filter(id=token.get("user_id")).first()
        if not user or not user.is_active or not utils.verify_hashed_refresh(user, raw_refresh):
            return Response({"detail": "Refresh token invalid or expired"}, status=status.HTTP_401_UNAUTHORIZED)

        token.blacklist()
        refreshToken = RefreshToken.for_user(user)
        utils.store_hashed_refresh(user, str(refreshToken))

        return setCookie(refreshToken.access_token, refreshToken, user)

    @action(detail=False, methods=["delete"], url_path="logout", permission_classes=[AllowAny])
    def logout(self, request):
        """
        DELETE /auth/logout
        - Reads the refreshToken cookie (if present)
        - Blacklists it (if valid)
        - Clears the stored hash (if user is authenticated)
        - Deletes both JWT cookies
        - Always returns 200 OK (idempotent operation)
        """
        raw_refresh = request.COOKIES.get(Constants.CookieName.REFRESH_TOKEN)

        # Try to blacklist the refresh token if it exists and is valid
        if raw_refresh:
            try:
                token = RefreshToken(raw_refresh)
                token.blacklist()
            except TokenError:
                # Token is already expired/blacklisted/invalid - that's fine
                pass

        # Clear the stored hash if the user is authenticated
        if request.user and request.user.is_authenticated:
            utils.clear_hashed_refresh(request.user)

        # Always clear cookies and return success
        response = Response({"detail": "Logged out successfully"}, status=status.HTTP_200_OK)
        response.delete_cookie(Constants.CookieName.ACCESS_TOKEN, path="/")
        response.delete_cookie(Constants.CookieName.REFRESH_TOKEN, path="/")

        return response

    @action(detail=False, methods=["get"], url_path="me", permission_classes=[IsAuthenticated])
    def me(self, request):
        """
        GET /auth/me
        The signed-in user.
        """
        return Response(UserModelSerializer(request.user).data)


def setCookie(accessToken, refreshToken, user) -> Response:
    response = Response({
        "role": user.role,
        "id": user.id,
        "username": user.username,
    }, status=200)

    response.set_cookie(
        Constants.CookieName.ACCESS_TOKEN,
        str(accessToken),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=Constants.CookiePolicy.SAME_SITE,
        max_age=int(Constants.ACCESS_TOKEN_LIFETIME.total_seconds())
    )

    response.set_cookie(
        Constants.CookieName.REFRESH_TOKEN,
        str(refreshToken),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=Constants.CookiePolicy.SAME_SITE,
        max_age=int(Constants.REFRESH_TOKEN_LIFETIME.total_seconds())
    )

    return response
