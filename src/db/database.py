"""
Database Module
-------------
Handles database connections, the ORM model, and campground persistence operations.
Uses SQLAlchemy so the same store runs against SQLite locally and PostgreSQL in deployment.
"""
from contextlib import contextmanager
import logging
import uuid

from sqlalchemy import create_engine, Column, String, Float
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from src.models.campground import Campground, CampgroundIn

# Get logger
logger = logging.getLogger(__name__)

Base = declarative_base()


def new_campground_id():
    return uuid.uuid4().hex


# Define the Campground table structure
class CampgroundDB(Base):
    __tablename__ = "campgrounds"
    id = Column(String, primary_key=True, index=True, default=new_campground_id)
    title = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(String, nullable=False)
    location = Column(String, nullable=False)


def make_engine(database_url):
    """
    Build an engine for the given URL.

    SQLite connections are shared across the threadpool that runs store calls,
    and an in-memory database must stay on a single connection to survive.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url)


class CampgroundStore:
    """
    Record store for campgrounds.

    Every method opens its own session and returns detached pydantic
    Campground objects, so callers never hold ORM state between requests.
    """

    def __init__(self, database_url=None, engine=None):
        if engine is None:
            if database_url is None:
                raise ValueError("CampgroundStore needs a database_url or an engine")
            engine = make_engine(database_url)
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def create_tables(self):
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created (if they didn't exist previously).")
        except Exception as e:
            logger.error(f"Error creating database tables: {e}")
            raise

    @contextmanager
    def session(self):
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def find_all(self):
        with self.session() as db:
            rows = db.query(CampgroundDB).all()
            return [Campground.model_validate(row) for row in rows]

    def find_by_id(self, campground_id):
        with self.session() as db:
            row = db.query(CampgroundDB).filter(CampgroundDB.id == campground_id).first()
            return Campground.model_validate(row) if row else None

    def insert(self, data: CampgroundIn):
        with self.session() as db:
            row = CampgroundDB(id=new_campground_id(), **data.model_dump())
            db.add(row)
            db.flush()
            logger.info(f"Inserted campground {row.id}: {row.title}")
            return Campground.model_validate(row)

    def update_by_id(self, campground_id, data: CampgroundIn):
        """Overwrite every field of an existing campground. Returns None if the id is unknown."""
        with self.session() as db:
            row = db.query(CampgroundDB).filter(CampgroundDB.id == campground_id).first()
            if row is None:
                return None
            for field, value in data.model_dump().items():
                setattr(row, field, value)
            db.flush()
            logger.info(f"Updated campground {row.id}")
            return Campground.model_validate(row)

    def delete_by_id(self, campground_id):
        with self.session() as db:
            deleted = db.query(CampgroundDB).filter(CampgroundDB.id == campground_id).delete()
            if deleted:
                logger.info(f"Deleted campground {campground_id}")
            return bool(deleted)
