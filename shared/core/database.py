from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from shared.core.config import COMPLIANCE_DATABASE_URL

Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2


def _create_engine(url: str):
    if url.startswith("sqlite"):
        # single shared connection so in-memory databases survive between sessions
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,      # max temporary extra connections
        pool_timeout=30       # wait time before failing
    )


compliance_engine = _create_engine(COMPLIANCE_DATABASE_URL)
ComplianceSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=compliance_engine)


# Dependency


def get_db():
    db = ComplianceSessionLocal()
    try:
        yield db
    finally:
        db.close()
