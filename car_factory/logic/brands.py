"""
Brands Module - Supported brand identifiers and brand checks

Handles:
1. The closed set of brands any factory may be configured with
2. Normalisation of brand identifiers for comparison
3. Display formatting of brand names
"""

import logging
from enum import Enum
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)


class Brand(str, Enum):
    """Brands a factory can be configured to produce"""
    FIAT = "fiat"
    LANCIA = "lancia"
    FORD = "ford"
    SUBARU = "subaru"


SUPPORTED_BRANDS = tuple(brand.value for brand in Brand)

BrandLike = Union[Brand, str]


class UnsupportedBrandError(Exception):
    """Raised when a brand is not supported globally or by a given factory"""

    def __init__(self, message: str, brand: BrandLike = None):
        super().__init__(message)
        self.brand = brand


def normalize_brand(brand: BrandLike) -> str:
    """Return the comparison form of a brand identifier ('  Fiat ' -> 'fiat')."""
    value = brand.value if isinstance(brand, Brand) else str(brand)
    return value.strip().lower()


def format_brand_name(brand: BrandLike) -> str:
    """Return the display form of a brand identifier ('fiat' -> 'Fiat')."""
    return normalize_brand(brand).capitalize()


def format_brand_names(brands: Iterable[BrandLike]) -> str:
    return ", ".join(format_brand_name(b) for b in brands)


def is_supported_brand(brand: BrandLike) -> bool:
    """Check if brand belongs to the supported set"""
    return normalize_brand(brand) in SUPPORTED_BRANDS


def check_brand_supported(brand: BrandLike) -> None:
    """
    Ensure a single brand is supported.

    Raises:
        UnsupportedBrandError: naming the offending brand
    """
    if is_supported_brand(brand):
        return
    logger.warning(f"Rejected unsupported brand: {brand!r}")
    raise UnsupportedBrandError(
        f"Brand not supported: '{format_brand_name(brand)}'", brand=brand
    )


def check_brands_supported(brands: Iterable[BrandLike]) -> List[BrandLike]:
    """
    Ensure every brand is supported, stopping at the first unsupported one.

    Returns:
        The checked brands, in order
    """
    checked = []
    for brand in brands:
        check_brand_supported(brand)
        checked.append(brand)
    return checked


def brand_in(brand: BrandLike, brands: Iterable[BrandLike]) -> bool:
    """Membership test on normalised identifiers"""
    wanted = normalize_brand(brand)
    return any(normalize_brand(b) == wanted for b in brands)
