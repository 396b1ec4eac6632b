from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from carwash.config import get_settings

# --- CONNECTION URL ---
# Points at the hosted store in production, at a local SQLite file otherwise
SQLALCHEMY_DATABASE_URL = get_settings().DATABASE_URL

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    # 'check_same_thread' is only needed for SQLite
    connect_args["check_same_thread"] = False
# ----------------------

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
