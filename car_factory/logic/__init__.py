"""Logic modules for car factories."""

from car_factory.logic import brands
from car_factory.logic import factory

__all__ = ["brands", "factory"]
