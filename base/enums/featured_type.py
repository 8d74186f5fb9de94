from enum import Enum

class FEATURED_TYPE(Enum):
    """
    Storefront sections a product can be featured in
    """
    LATEST = "LATEST"
    HOT = "HOT"
    POPULAR = "POPULAR"
