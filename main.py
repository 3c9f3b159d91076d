import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import uvicorn
from sqlalchemy.orm import sessionmaker

from database import check_connection, init_db
from dependencies import get_session_factory
from errors import RecordError, StorageError
from routers import (
    lease_agreements_router,
    maintenance_requests_router,
    properties_router,
)

# Load .env
load_dotenv()

# Logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Alembic owns the schema in production; AUTO_CREATE_TABLES=false skips this
    if os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true":
        init_db()
        logger.info("Stable storage tables ready")
    yield
    logger.info("Shutting down")


# App instance
app = FastAPI(title="Estate Records", lifespan=lifespan)

# CORS
origins = [o for o in os.getenv("CORS_ORIGINS", "").split(",") if o]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RecordError)
async def record_error_handler(request: Request, exc: RecordError):
    """Tagged error body, e.g. {"error": {"NotFound": {"msg": "..."}}}"""
    logger.warning("%s %s rejected: %s: %s", request.method, request.url.path, exc.variant, exc.msg)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage fault on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/api/health")
def health(session_factory: sessionmaker = Depends(get_session_factory)):
    database_ok = check_connection(session_factory.kw.get("bind"))
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={"status": "ok" if database_ok else "degraded", "database": database_ok},
    )


app.include_router(properties_router)
app.include_router(lease_agreements_router)
app.include_router(maintenance_requests_router)

if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
