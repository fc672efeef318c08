"""In-memory car factories producing brand-tagged cars."""

from car_factory.logic.brands import SUPPORTED_BRANDS, Brand, UnsupportedBrandError
from car_factory.logic.factory import CarFactory
from car_factory.schemas import (
    BrandLineup,
    ByBrandRequest,
    Car,
    CountRequest,
    SingleBrand,
    brand_config_from,
    production_request_from,
)

__all__ = [
    "SUPPORTED_BRANDS",
    "Brand",
    "UnsupportedBrandError",
    "CarFactory",
    "Car",
    "SingleBrand",
    "BrandLineup",
    "CountRequest",
    "ByBrandRequest",
    "brand_config_from",
    "production_request_from",
]
