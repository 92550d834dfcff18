"""
Pydantic models for campground payloads
"""
from pydantic import BaseModel, ConfigDict, Field


class CampgroundIn(BaseModel):
    """
    Fields a client may submit when creating or editing a campground
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    title: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1)


class CampgroundPayload(BaseModel):
    """
    Request body wrapper: forms post fields as camp[title], camp[price], ...
    """
    model_config = ConfigDict(frozen=True)

    camp: CampgroundIn


class Campground(CampgroundIn):
    """
    A stored campground, identified by the id the store assigned on insert
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
