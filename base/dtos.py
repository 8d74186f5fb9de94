"""
Typed, immutable values produced by the request serializers.
Services only accept these, never raw request data.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class CheckoutDetails:
    customerName: str
    customerMobile: str
    customerAddress: str
    deliveryZone: str


@dataclass(frozen=True)
class OrderQuery:
    search: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class ProductQuery:
    search: Optional[str] = None
    categoryId: Optional[str] = None
    featuredType: Optional[str] = None
    minPrice: Optional[Decimal] = None
    maxPrice: Optional[Decimal] = None
    hasVariants: Optional[bool] = None
    sortBy: str = "createdAt"
    sortOrder: str = "desc"


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date
