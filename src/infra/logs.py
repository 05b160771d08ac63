import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.engine import Engine
from src.infra.db import get_engine, init_db, logs_table
from src.infra.settings import settings

# ---------- DB logging handler ----------

class DBHandler(logging.Handler):
    def __init__(self, engine: Engine, level: int = logging.NOTSET):
        super().__init__(level)
        self.engine = engine

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            with self.engine.begin() as conn:
                conn.execute(logs_table.insert().values(level=record.levelname, msg=msg))
        except Exception:
            # loggen mag de bestelling nooit laten falen
            self.handleError(record)


def setup_logging(level: Optional[str] = None, database_url: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(sh)

    engine = get_engine(database_url)
    if engine is not None and not any(isinstance(h, DBHandler) for h in root.handlers):
        init_db(engine)
        dbh = DBHandler(engine, level=logging.WARNING)
        dbh.setFormatter(logging.Formatter("%(name)s %(message)s"))
        root.addHandler(dbh)

# ---------- Query voor beheer ----------

DB_LEVELS = ("WARNING", "ERROR", "CRITICAL")

def get_events(engine: Engine, limit: int = 100, level: Optional[str] = None) -> List[Dict[str, Any]]:
    stmt = select(logs_table.c.ts, logs_table.c.level, logs_table.c.msg)
    # DBHandler schrijft pas vanaf WARNING
    if level in DB_LEVELS:
        stmt = stmt.where(logs_table.c.level == level)
    stmt = stmt.order_by(logs_table.c.id.desc()).limit(max(1, int(limit)))
    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()
    return [dict(r) for r in rows]
