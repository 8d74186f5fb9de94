from datetime import timedelta
from decimal import Decimal

class Constants:
    DEFAULT_PAGINATOR_PAGE_SIZE = 10
    MAX_PAGINATOR_PAGE_SIZE = 100
    ACCESS_TOKEN_LIFETIME = timedelta(minutes=60)
    REFRESH_TOKEN_LIFETIME = timedelta(days=1)
    GUEST_SESSION_LIFETIME = timedelta(days=30)

    REFRESH_TOKEN = "refreshToken"

    class CookieName:
        ACCESS_TOKEN = "accessToken"
        REFRESH_TOKEN = "refreshToken"
        GUEST_SESSION = "guest_session"

    class Header:
        GUEST_SESSION = "X-Guest-Session"

    class CookiePolicy:
        SAME_SITE = "Lax"

    class Session:
        NEW_ACCESS_TOKEN = "_new_access_token"

    class Cart:
        MIN_QUANTITY = 1
        MAX_QUANTITY = 99

    class Checkout:
        MIN_NAME_LENGTH = 2
        MIN_MOBILE_LENGTH = 11
        MIN_ADDRESS_LENGTH = 10

    # Seed values for DeliveryCostModel, keyed by DELIVERY_ZONE value
    DEFAULT_DELIVERY_COSTS = {
        "INSIDE_DHAKA": Decimal("60.00"),
        "OUTSIDE_DHAKA": Decimal("120.00"),
    }
