"""
Database Module
-------------
Exposes the SQLAlchemy-backed campground store.
"""
from src.db.database import CampgroundStore, CampgroundDB, make_engine

__all__ = ["CampgroundStore", "CampgroundDB", "make_engine"]
