from enum import Enum

class PAYMENT_STATUS(Enum):
    """
    Payment statuses for OrderModel. Orders are cash on delivery,
    so an order is PAID once it has been delivered.
    """
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
