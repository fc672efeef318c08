import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent))

from car_factory.logic.brands import (
    SUPPORTED_BRANDS,
    Brand,
    UnsupportedBrandError,
    brand_in,
    check_brand_supported,
    check_brands_supported,
    format_brand_name,
    format_brand_names,
    is_supported_brand,
    normalize_brand,
)
from car_factory.schemas import (
    BrandLineup,
    ByBrandRequest,
    Car,
    CountRequest,
    SingleBrand,
    brand_config_from,
    production_request_from,
)


def test_supported_brands():
    assert SUPPORTED_BRANDS == ("fiat", "lancia", "ford", "subaru")
    assert Brand.LANCIA == "lancia"


@pytest.mark.parametrize("brand, expected", [
    ("fiat", "fiat"),
    (" Subaru ", "subaru"),
    ("LANCIA", "lancia"),
    (Brand.FORD, "ford"),
])
def test_normalize_brand(brand, expected):
    assert normalize_brand(brand) == expected


def test_format_brand_names():
    assert format_brand_name("FIAT") == "Fiat"
    assert format_brand_name(Brand.SUBARU) == "Subaru"
    assert format_brand_names(["fiat", "lancia"]) == "Fiat, Lancia"


def test_is_supported_brand():
    assert is_supported_brand("Ford")
    assert is_supported_brand(Brand.FIAT)
    assert not is_supported_brand("tesla")


def test_check_brand_supported():
    check_brand_supported("fiat")
    with pytest.raises(UnsupportedBrandError, match="Brand not supported: 'Tesla'"):
        check_brand_supported("tesla")


def test_check_brands_supported_stops_at_first_failure():
    assert check_brands_supported(["fiat", "ford"]) == ["fiat", "ford"]
    with pytest.raises(UnsupportedBrandError) as exc:
        check_brands_supported(["fiat", "bmw", "tesla"])
    assert exc.value.brand == "bmw"


def test_brand_in():
    assert brand_in("FIAT", ["fiat", "ford"])
    assert brand_in(Brand.FORD, ["fiat", "Ford"])
    assert not brand_in("lancia", ["fiat", "ford"])


class TestBrandConfig:

    def test_single(self):
        config = brand_config_from("fiat")
        assert isinstance(config, SingleBrand)
        assert config.members() == ["fiat"]
        assert config.raw == "fiat"

    def test_lineup_from_tuple(self):
        config = brand_config_from(("fiat", "ford"))
        assert isinstance(config, BrandLineup)
        assert config.raw == ["fiat", "ford"]

    def test_prebuilt_config_is_returned(self):
        config = BrandLineup(brands=["ford"])
        assert brand_config_from(config) is config

    def test_rejects_other_shapes(self):
        with pytest.raises(TypeError):
            brand_config_from(None)


class TestProductionRequest:

    def test_count(self):
        request = production_request_from(4)
        assert isinstance(request, CountRequest)
        assert request.count == 4

    def test_mapping_keeps_order(self):
        request = production_request_from({"ford": 1, "fiat": 2})
        assert isinstance(request, ByBrandRequest)
        assert list(request.amounts.items()) == [("ford", 1), ("fiat", 2)]

    def test_negative_count(self):
        with pytest.raises(ValidationError):
            production_request_from(-3)

    def test_rejects_other_shapes(self):
        with pytest.raises(TypeError):
            production_request_from(["fiat"])


def test_car_holds_brand_verbatim():
    assert Car(brand="Tesla").brand == "Tesla"
    assert Car(brand=Brand.FIAT).brand == "fiat"
