from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from party_membership.core.config import settings
from party_membership.db.base import Base
from party_membership.db import models  # noqa: F401  registers the tables
from party_membership.repositories.sequence_repo import SequenceRepository


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # requests are served from a thread pool
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_session_factory(engine)


def init_db(bind: Engine = engine, counter_name: str | None = None) -> None:
    """Create the tables and seed the membership counter at 0."""
    Base.metadata.create_all(bind=bind)

    session = build_session_factory(bind)()
    try:
        SequenceRepository.ensure(
            session,
            counter_name or settings.MEMBER_COUNTER_NAME,
        )
        session.commit()
    finally:
        session.close()


def drop_all(bind: Engine = engine) -> None:
    Base.metadata.drop_all(bind=bind)


def ping(bind: Engine = engine) -> None:
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
