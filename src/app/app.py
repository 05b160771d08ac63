from fastapi import FastAPI, HTTPException, Query
from src.app.customization_routes import router as customization_router
from src.infra.db import get_engine
from src.infra.logs import setup_logging, get_events
from src.infra.settings import is_dev

setup_logging()
app = FastAPI(title="Menu customization", docs_url="/docs" if is_dev() else None)

@app.get("/")
def read_root():
    return {"status": "ok", "message": "customization backend actief"}

@app.get("/healthz")
def health():
    return {"ok": True}

@app.get("/logs")
def recent_logs(limit: int = Query(100, ge=1, le=1000), level: str | None = None):
    engine = get_engine()
    if engine is None:
        raise HTTPException(status_code=404, detail="no log database configured")
    return {"events": get_events(engine, limit=limit, level=level)}

app.include_router(customization_router)
