from datetime import timedelta

import pytest
from django.utils import timezone

from base import Constants
from base.models import GuestSessionModel
from api.services import GuestSessionService

pytestmark = pytest.mark.django_db

COOKIE = Constants.CookieName.GUEST_SESSION
HEADER_TOKEN = "0d6f1b9e-8c44-4f0a-9a7e-3b2c5d1e4f60"
RESTORED_TOKEN = "7a1e2c3d-4b5f-4e6a-8b9c-0d1e2f3a4b5c"


def test_new_visitor_gets_session_and_cookie(api_client):
    response = api_client.get("/api/cart")

    assert response.status_code == 200
    token = response.cookies[COOKIE].value
    session = GuestSessionModel.objects.get(sessionToken=token)
    assert session.expiresAt > timezone.now() + timedelta(days=29)
    assert response.cookies[COOKIE]["httponly"]


def test_known_cookie_is_not_reset(guest_client, guest_session):
    response = guest_client.get("/api/cart")

    assert COOKIE not in response.cookies
    assert GuestSessionModel.objects.count() == 1


def test_header_token_is_accepted_and_cookie_set(api_client):
    response = api_client.get("/api/cart", HTTP_X_GUEST_SESSION=HEADER_TOKEN)

    assert GuestSessionModel.objects.filter(sessionToken=HEADER_TOKEN).exists()
    assert response.cookies[COOKIE].value == HEADER_TOKEN


def test_unknown_cookie_token_creates_session(api_client):
    api_client.cookies[COOKIE] = RESTORED_TOKEN

    api_client.get("/api/cart")

    assert GuestSessionModel.objects.filter(sessionToken=RESTORED_TOKEN).exists()


def test_expired_session_is_renewed(guest_client, guest_session):
    GuestSessionModel.objects.filter(id=guest_session.id).update(expiresAt=timezone.now() - timedelta(days=1))

    guest_client.get("/api/cart")

    guest_session.refresh_from_db()
    assert not guest_session.is_expired
    assert GuestSessionModel.objects.count() == 1


def test_health_check_skips_guest_tracking(api_client):
    response = api_client.get("/health")

    assert response.status_code == 200
    assert COOKIE not in response.cookies
    assert not GuestSessionModel.objects.exists()


def test_malformed_cookie_token_is_replaced(api_client):
    api_client.cookies[COOKIE] = "x" * 300

    response = api_client.get("/api/product")

    assert response.status_code == 200
    token = response.cookies[COOKIE].value
    assert token != "x" * 300
    assert GuestSessionModel.objects.filter(sessionToken=token).exists()
    assert GuestSessionModel.objects.count() == 1


def test_malformed_header_token_is_ignored(api_client):
    response = api_client.get("/api/cart", HTTP_X_GUEST_SESSION="not-a-uuid")

    assert response.status_code == 200
    assert not GuestSessionModel.objects.filter(sessionToken="not-a-uuid").exists()
    assert response.cookies[COOKIE].value != "not-a-uuid"


def test_ensure_creates_then_reuses_session():
    service = GuestSessionService()

    first = service.ensure("fresh-token")
    second = service.ensure("fresh-token")

    assert first.id == second.id
    assert GuestSessionModel.objects.count() == 1


def test_get_active_ignores_expired_sessions(guest_session):
    service = GuestSessionService()
    GuestSessionModel.objects.filter(id=guest_session.id).update(expiresAt=timezone.now() - timedelta(seconds=1))

    assert service.get_active(guest_session.sessionToken) is None
    assert service.get_active(None) is None
