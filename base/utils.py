import uuid

from django.contrib.auth.hashers import make_password, check_password
from base import Constants

def store_hashed_refresh(user, raw_refresh_token):
    """
    Hash & save the raw refresh token on the user.
    """
    user.refreshToken = make_password(raw_refresh_token)
    user.save(update_fields=[Constants.REFRESH_TOKEN])

def verify_hashed_refresh(user, raw_refresh_token):
    """
    Check a raw token against the stored hash.
    """
    return check_password(raw_refresh_token, user.refreshToken)

def clear_hashed_refresh(user):
    """
    Forget the stored refresh token so it can no longer mint access tokens.
    """
    user.refreshToken = None
    user.save(update_fields=[Constants.REFRESH_TOKEN])

def parse_uuid(value):
    """
    UUID from a URL segment or query param, None when it is not one.
    """
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None
