import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from core.database import Base, engine
from core.static import SPAStaticFiles
from routers import auth_router, account_router
from models import account, session
from core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("hasznalt")

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Hasznalt.hu Backend API")

# Respect X-Forwarded-Proto/Host when behind a proxy
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

# CORS: any origin, GET/POST/HEAD only
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "HEAD"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(account_router.router)


@app.get("/health")
def health():
    return {"status": "ok"}


# SPA build, mounted last so /api and /health win
if os.path.isdir(settings.FRONTEND_DIST_DIR):
    app.mount(
        "/",
        SPAStaticFiles(directory=settings.FRONTEND_DIST_DIR, html=True),
        name="frontend",
    )
else:
    logger.warning("Frontend directory %s not found, static serving disabled", settings.FRONTEND_DIST_DIR)
