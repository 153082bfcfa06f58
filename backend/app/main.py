# Realty CRM backend entrypoint: customer lifecycle and territory assignment API.

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from backend.app.core.settings import get_settings
from backend.app.api import register
from backend.app.api import login
from backend.app.api import customers
from backend.app.api import notes
from backend.app.api import timeline
from backend.app.api import territories
from backend.app.api import agents
from backend.app.api import admin_users
from backend.app.core.dev_seed import ensure_default_dev_super_admin
from backend.app.db.session import SessionLocal

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(customers.router)
app.include_router(notes.router)
app.include_router(timeline.router)
app.include_router(territories.router)
app.include_router(agents.router)
app.include_router(admin_users.router)


@app.get("/")
def read_root():
    return {"app": "Realty CRM backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def seed_default_dev_super_admin():
    db = SessionLocal()
    try:
        ensure_default_dev_super_admin(db)
    finally:
        db.close()
    logger.info("%s started (%s)", settings.app_name, settings.environment)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.app.main:app", host=settings.host, port=settings.port, reload=False)
