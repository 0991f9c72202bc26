# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fleetshare.shared.logging import logger


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str) -> Engine:
    kwargs: dict[str, object] = {"echo": False, "future": True, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@contextmanager
def session_scope(session_factory: Callable[[], Session]) -> Iterator[Session]:
    session = session_factory()
    logger.debug("db.session: opened session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed session")
    except Exception:
        logger.exception("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
