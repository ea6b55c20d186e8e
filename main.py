import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.database import init_db
from config.logging_config import configure_logging
from config.settings import APP_NAME, APP_VERSION, CORS_ORIGINS, LOG_LEVEL
from app.utils.errors import AppError

from app.api.endpoints.auth_credentials import router as auth_cred_routes

from app.routes.baby_routes import router as baby_routes
from app.routes.caretaker_routes import router as caretaker_routes
from app.routes.sleep_log_routes import router as sleep_log_routes
from app.routes.feed_log_routes import router as feed_log_routes
from app.routes.diaper_log_routes import router as diaper_log_routes
from app.routes.note_routes import router as note_routes
from app.routes.bath_log_routes import router as bath_log_routes
from app.routes.milestone_routes import router as milestone_routes
from app.routes.activity_routes import router as activity_routes

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s v%s", APP_NAME, APP_VERSION)
    init_db()
    yield
    logger.info("Shutting down %s", APP_NAME)


# Create the FastAPI instance
app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description="Backend for tracking baby sleep, feeds, diapers and more",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info("%s %s - %s - %.4fs", request.method, request.url.path, response.status_code, process_time)
    return response


# Every failure leaves the API as {"success": false, "error": ...}
def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message}, headers=headers)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return error_response(400, message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error")


# Main router, everything under /api
routerAPI = APIRouter(prefix="/api")

routerAPI.include_router(auth_cred_routes)
routerAPI.include_router(caretaker_routes)
routerAPI.include_router(baby_routes)
routerAPI.include_router(sleep_log_routes)
routerAPI.include_router(feed_log_routes)
routerAPI.include_router(diaper_log_routes)
routerAPI.include_router(note_routes)
routerAPI.include_router(bath_log_routes)
routerAPI.include_router(milestone_routes)
routerAPI.include_router(activity_routes)

app.include_router(routerAPI)


@app.get("/", tags=["Root"])
async def read_root():
    return {"success": True, "data": {"status": f"{APP_NAME} is up", "version": APP_VERSION}}
