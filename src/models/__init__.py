"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines the accepted shape of campground payloads and the shape of stored campgrounds.
"""
from src.models.campground import Campground, CampgroundIn, CampgroundPayload

__all__ = ["Campground", "CampgroundIn", "CampgroundPayload"]
