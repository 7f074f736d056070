import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from core.database import Base, engine
from core.errors import AppError
from core.events import event_bus, log_stale_views
from routers import project_router, idea_router, relation_router, feed_router
from models import project, idea, like, subscription, feed_item
from core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("community.app")

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Community Projects API")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL] if settings.FRONTEND_URL else ["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(project_router.router)
app.include_router(relation_router.router)
app.include_router(feed_router.router)
app.include_router(idea_router.router)

# the presentation layer hooks in here to refresh cached pages
event_bus.subscribe(log_stale_views)

@app.get("/")
def root():
    return {"message": "Community Projects API Ready"}
