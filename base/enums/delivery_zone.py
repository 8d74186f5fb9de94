from enum import Enum

class DELIVERY_ZONE(Enum):
    """
    Fixed delivery zones, each with a flat delivery cost
    """
    INSIDE_DHAKA = "INSIDE_DHAKA"
    OUTSIDE_DHAKA = "OUTSIDE_DHAKA"
