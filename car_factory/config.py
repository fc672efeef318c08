"""
Car Factory Configuration

Environment-based configuration for car factories.
"""

import os
from typing import List

from car_factory.logic.brands import SUPPORTED_BRANDS, is_supported_brand, normalize_brand


class FactoryConfig:
    """Car factory configuration"""

    # Service info
    SERVICE_NAME = "Car Factory"
    SERVICE_VERSION = "1.0.0"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Factory defaults
    DEFAULT_FACTORY_NAME = os.getenv("FACTORY_NAME", "Main Plant")
    DEFAULT_BRANDS = os.getenv("FACTORY_BRANDS", ",".join(SUPPORTED_BRANDS))

    # Raise instead of skipping unknown brands in per-brand orders
    STRICT_BULK_ORDERS = os.getenv("STRICT_BULK_ORDERS", "false").lower() == "true"

    @classmethod
    def default_brands(cls) -> List[str]:
        """Parse DEFAULT_BRANDS into a list of brand identifiers"""
        return [normalize_brand(b) for b in cls.DEFAULT_BRANDS.split(",") if b.strip()]

    @classmethod
    def is_supported_brand(cls, brand: str) -> bool:
        """Check if brand is supported"""
        return is_supported_brand(brand)

    @classmethod
    def to_dict(cls) -> dict:
        """Export config as dictionary"""
        return {
            "service_name": cls.SERVICE_NAME,
            "service_version": cls.SERVICE_VERSION,
            "log_level": cls.LOG_LEVEL,
            "factory": {
                "name": cls.DEFAULT_FACTORY_NAME,
                "brands": cls.default_brands(),
                "supported_brands": list(SUPPORTED_BRANDS)
            },
            "orders": {
                "strict": cls.STRICT_BULK_ORDERS
            }
        }


# Example environment file (.env.local)
"""
LOG_LEVEL=INFO

FACTORY_NAME=Turin Plant
FACTORY_BRANDS=fiat,lancia

# Raise on unknown brands in per-brand orders (true|false)
STRICT_BULK_ORDERS=false
"""
