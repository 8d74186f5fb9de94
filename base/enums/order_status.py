from enum import Enum

class ORDER_STATUS(Enum):
    """
    Statuses for OrderModel
    """
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
