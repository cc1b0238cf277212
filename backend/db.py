import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import logging
from base import Base

# Setup logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# Load DATABASE_URL from environment or use default
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///catalog.db")

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db() -> None:
    """
    Creates all product catalog tables on the configured database.
    """
    import schema
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized at {DATABASE_URL}")

def reset_db() -> None:
    """
    Drops every catalog table and recreates the schema from scratch.
    """
    import schema
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

def get_db():
    """
    Dependency for generating a new SQLAlchemy session.

    Yields:
        An active database session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

if __name__ == "__main__":
    import sys

    # `python db.py` creates missing tables; `python db.py --reset` wipes the catalog first
    if "--reset" in sys.argv[1:]:
        confirm = input("Delete every product and recreate the schema? (y/N): ")
        if confirm.lower() != "y":
            print("Reset cancelled.")
            sys.exit(0)
        reset_db()
        print("Catalog database reset.")
    else:
        init_db()
