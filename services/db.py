# services/db.py
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    create_engine, Column, Integer, String, Boolean, Text, TIMESTAMP
)
from sqlalchemy.orm import sessionmaker, declarative_base

from config import get_settings

Base = declarative_base()


# ============================================================
# 📌 Таблица транзакций
# ============================================================
class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(64), nullable=False, index=True)
    month = Column(String(7), nullable=False, index=True)   # YYYY-MM
    description = Column(Text, nullable=False)
    amount = Column(Integer, nullable=False)
    type = Column(String(10), nullable=False)              # income | expense
    category = Column(String(100), nullable=False)
    is_fixed = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


# ============================================================
# 📌 Подключение к базе
# ============================================================
engine = None
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)


def init_db(database_url: Optional[str] = None):
    """Создаёт engine и таблицы, если их нет."""
    global engine
    if database_url is None:
        database_url = get_settings().db_url

    engine = create_engine(database_url, echo=False, future=True)
    SessionLocal.configure(bind=engine)
    Base.metadata.create_all(bind=engine)
    return engine


def get_session():
    if engine is None:
        raise RuntimeError("init_db() has not been called")
    return SessionLocal()


@contextmanager
def session_scope():
    """Сессия на одну операцию: commit при успехе, rollback при ошибке."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
