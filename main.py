import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from database import init_db
from api.applications import router as applications_router
from api.loans import router as loans_router
from api.users import router as users_router
from utils.log import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    await init_db()
    logger.info("%s listening on port %s", settings.app_name, settings.port)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Loan marketplace API: loan offers, loan applications and users",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loans_router)
app.include_router(applications_router)
app.include_router(users_router)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Store failures surface as a 500 carrying the underlying message; nothing is retried."""
    logger.exception("Store operation failed on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/", response_class=PlainTextResponse)
async def root():
    return f"LoanLink Server is running on port {settings.port}"


@app.get("/health")
async def health():
    return {"status": "ok"}
