from collections.abc import Mapping
from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from car_factory.logic.brands import BrandLike


class Car(BaseModel):
    model_config = ConfigDict(frozen=True)

    brand: BrandLike = Field(..., description="Brand identifier, stored as given")


class SingleBrand(BaseModel):
    kind: Literal["single"] = "single"
    brand: BrandLike = Field(..., description="The only brand the factory produces")

    def members(self) -> List[BrandLike]:
        return [self.brand]

    @property
    def raw(self) -> BrandLike:
        return self.brand


class BrandLineup(BaseModel):
    kind: Literal["lineup"] = "lineup"
    brands: List[BrandLike] = Field(..., min_length=1, description="Brands in round-robin order")

    def members(self) -> List[BrandLike]:
        return list(self.brands)

    @property
    def raw(self) -> List[BrandLike]:
        return self.brands


BrandConfig = Union[SingleBrand, BrandLineup]


class CountRequest(BaseModel):
    kind: Literal["count"] = "count"
    count: int = Field(..., ge=0, description="Number of cars, brands picked round-robin")


class ByBrandRequest(BaseModel):
    kind: Literal["by_brand"] = "by_brand"
    amounts: Dict[BrandLike, Annotated[int, Field(ge=0)]] = Field(
        ..., description="Cars to build per brand, in mapping order"
    )


ProductionRequest = Union[CountRequest, ByBrandRequest]


def brand_config_from(value) -> BrandConfig:
    """
    Resolve a caller-supplied brand configuration into a BrandConfig.

    Accepts a single brand (str or Brand), a list/tuple of brands, or an
    already-built SingleBrand/BrandLineup.
    """
    if isinstance(value, (SingleBrand, BrandLineup)):
        return value
    if isinstance(value, str):
        return SingleBrand(brand=value)
    if isinstance(value, (list, tuple)):
        return BrandLineup(brands=list(value))
    raise TypeError(f"Brands must be a brand or a sequence of brands, got {type(value).__name__}")


def production_request_from(value) -> ProductionRequest:
    """
    Resolve a make_cars() argument into a ProductionRequest.

    An int means "this many cars, round-robin"; a mapping means
    "this many cars of each brand".
    """
    if isinstance(value, (CountRequest, ByBrandRequest)):
        return value
    if isinstance(value, int):
        return CountRequest(count=value)
    if isinstance(value, Mapping):
        return ByBrandRequest(amounts=dict(value))
    raise TypeError(f"Production config must be an int or a mapping, got {type(value).__name__}")
