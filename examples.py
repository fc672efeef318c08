#!/usr/bin/env python3
"""
Car Factory - Quick Start Examples

Shows how to use each factory operation.
"""

import logging

from dotenv import load_dotenv

# Load environment variables from .env.local for development
load_dotenv(".env.local")

from car_factory import Brand, CarFactory, UnsupportedBrandError
from car_factory.config import FactoryConfig


def example_1_construction():
    """Example 1: Building factories and rejecting unsupported brands"""
    print("\n" + "="*60)
    print("EXAMPLE 1: Construction")
    print("="*60)

    factory = CarFactory(FactoryConfig.DEFAULT_FACTORY_NAME, FactoryConfig.default_brands())
    print(f"\nConfigured factory: {factory.name()}")

    for brands in (Brand.FIAT, ["fiat", "ford", "tesla"]):
        try:
            CarFactory("Test Plant", brands)
            print(f"  {brands!r}: accepted")
        except UnsupportedBrandError as e:
            print(f"  {brands!r}: rejected ({e})")


def example_2_single_cars():
    """Example 2: One car at a time"""
    print("\n" + "="*60)
    print("EXAMPLE 2: Single Cars")
    print("="*60)

    factory = CarFactory("Turin Plant", ["fiat", "lancia"])
    print(f"\n{factory.name()}")
    print(f"  make_car('lancia'): {factory.make_car('lancia')}")
    print(f"  make_car():         {factory.make_car()}")
    print(f"  make_car():         {factory.make_car()}")

    try:
        factory.make_car("ford")
    except UnsupportedBrandError as e:
        print(f"  make_car('ford'):   {e}")


def example_3_bulk():
    """Example 3: Round-robin and per-brand orders"""
    print("\n" + "="*60)
    print("EXAMPLE 3: Bulk Production")
    print("="*60)

    factory = CarFactory("Detroit Plant", ["fiat", "ford", "subaru"])
    print(f"\n{factory.name()}")

    first = factory.make_cars(3)
    second = factory.make_cars(2)
    print(f"  make_cars(3): {[c.brand for c in first]}")
    print(f"  make_cars(2): {[c.brand for c in second]}")

    order = {"ford": 2, "lancia": 1, "subaru": 1}
    cars = factory.make_cars(order)
    print(f"  make_cars({order}): {[c.brand for c in cars]}")


def main():
    logging.basicConfig(level=FactoryConfig.LOG_LEVEL)

    print("\n" + "="*70)
    print(f"{FactoryConfig.SERVICE_NAME} v{FactoryConfig.SERVICE_VERSION} - EXAMPLES")
    print("="*70)

    example_1_construction()
    example_2_single_cars()
    example_3_bulk()

    print("\n" + "="*70)
    print("Config:", FactoryConfig.to_dict())
    print("="*70 + "\n")


if __name__ == "__main__":
    main()
