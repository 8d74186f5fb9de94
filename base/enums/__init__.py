from .order_status import ORDER_STATUS
from .payment_status import PAYMENT_STATUS
from .delivery_zone import DELIVERY_ZONE
from .featured_type import FEATURED_TYPE
from .role import ROLE
