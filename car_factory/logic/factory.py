"""
Factory Module - Builds cars for a configured set of brands

A factory is configured with either a single brand or an ordered lineup of
brands. Every configured brand must be supported. Cars built without an
explicit brand take the next brand of the lineup (round-robin); the cursor is
kept on the factory and persists between calls.
"""

import logging
from typing import List, Mapping, Optional

from car_factory.config import FactoryConfig
from car_factory.logic.brands import (
    BrandLike,
    UnsupportedBrandError,
    brand_in,
    check_brands_supported,
    format_brand_name,
    format_brand_names,
)
from car_factory.schemas import (
    BrandConfig,
    BrandLineup,
    Car,
    CountRequest,
    SingleBrand,
    brand_config_from,
    production_request_from,
)

logger = logging.getLogger(__name__)


class CarFactory:
    """
    Produces Car objects for the brands it was configured with.

    Not thread-safe: the round-robin cursor is plain instance state.
    """

    def __init__(self, factory_name: str, brands, strict_orders: Optional[bool] = None):
        """
        Initialize factory.

        Args:
            factory_name: Display name of the factory
            brands: A brand, a list/tuple of brands, or a BrandConfig
            strict_orders: Raise on unknown brands in per-brand orders
                (defaults to FactoryConfig.STRICT_BULK_ORDERS)

        Raises:
            UnsupportedBrandError: If any configured brand is not supported
        """
        self.brands_counter = 0
        self._brand_config = brand_config_from(brands)
        check_brands_supported(self._brand_config.members())
        self.factory_name = factory_name
        if strict_orders is None:
            strict_orders = FactoryConfig.STRICT_BULK_ORDERS
        self.strict_orders = strict_orders
        logger.debug(f"Created factory {self.name()!r}")

    @property
    def brands(self):
        """Configured brand, or list of brands, as given"""
        return self._brand_config.raw

    @brands.setter
    def brands(self, value):
        self._brand_config = brand_config_from(value)

    @property
    def brand_config(self) -> BrandConfig:
        return self._brand_config

    def name(self) -> str:
        return f"{self.factory_name} (produces {format_brand_names(self._brand_config.members())})"

    def make_car(self, brand: Optional[BrandLike] = None) -> Car:
        """
        Build one car.

        Without a brand the next brand is picked round-robin. An explicit
        brand must belong to the lineup; single-brand factories pass it
        through unchecked.

        Raises:
            UnsupportedBrandError: If the lineup does not contain the brand
        """
        if brand is None:
            brand = self._next_brand()
        else:
            self._validate_given_brand(brand)
        return Car(brand=brand)

    def make_cars(self, config) -> List[Car]:
        """
        Build several cars.

        Args:
            config: Either a number of cars (brands picked round-robin) or a
                mapping of brand -> number of cars of that brand. Brands the
                factory does not produce are skipped unless strict orders
                are enabled.

        Returns:
            Cars in creation order
        """
        request = production_request_from(config)
        if isinstance(request, CountRequest):
            return self._make_n_cars(request.count)
        return self._make_cars_by_brand(request.amounts)

    def _make_n_cars(self, amount: int, brand: Optional[BrandLike] = None) -> List[Car]:
        return [self.make_car(brand) for _ in range(amount)]

    def _make_cars_by_brand(self, amounts: Mapping[BrandLike, int]) -> List[Car]:
        created_cars = []
        for brand, amount in amounts.items():
            if not self._brand_available(brand):
                if self.strict_orders:
                    raise self._not_produced(brand)
                logger.debug(f"{self.factory_name}: skipping {amount} x {brand!r}, brand not produced here")
                continue
            created_cars.extend(self._make_n_cars(amount, brand))
        return created_cars

    def _brand_available(self, brand: BrandLike) -> bool:
        return brand_in(brand, self._brand_config.members())

    def _validate_given_brand(self, brand: BrandLike):
        if isinstance(self._brand_config, BrandLineup) and not self._brand_available(brand):
            raise self._not_produced(brand)

    def _not_produced(self, brand: BrandLike) -> UnsupportedBrandError:
        logger.warning(f"{self.factory_name}: brand {brand!r} requested but not produced")
        return UnsupportedBrandError(
            f"Factory does not have or does not support brand: '{format_brand_name(brand)}'",
            brand=brand
        )

    def _next_brand(self) -> BrandLike:
        if isinstance(self._brand_config, SingleBrand):
            return self._brand_config.brand
        lineup = self._brand_config.brands
        index = self.brands_counter % len(lineup)
        self.brands_counter = (index + 1) % len(lineup)
        return lineup[index]

    def __repr__(self):
        return f"CarFactory({self.factory_name!r}, {self.brands!r})"
