from typing import Optional
from sqlalchemy import (
    BigInteger, Column, DateTime, Integer, MetaData, String, Table, Text, create_engine, func,
)
from sqlalchemy.engine import Engine
from src.infra.settings import settings

metadata = MetaData()

logs_table = Table(
    "logs", metadata,
    Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True),
    Column("ts", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("level", String(10), nullable=False),
    Column("msg", Text, nullable=False),
)

_engine: Optional[Engine] = None
_engine_url = ""


def get_engine(url: Optional[str] = None) -> Optional[Engine]:
    """Engine voor DATABASE_URL; None als er geen database is ingesteld."""
    global _engine, _engine_url
    url = url if url is not None else settings.DATABASE_URL
    if not url:
        return None
    if _engine is None or _engine_url != url:
        # Render/Neon/PG: sslmode komt uit de URL
        _engine = create_engine(url, pool_pre_ping=True, future=True)
        _engine_url = url
    return _engine


def init_db(engine: Engine) -> None:
    """Maakt tabellen aan als ze nog niet bestaan."""
    metadata.create_all(engine)
