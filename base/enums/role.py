from enum import Enum

class ROLE(Enum):
    """
    Roles for UserModel
    """
    CUSTOMER = "customer"
    ADMIN = "admin"
