"""
Job Board API - Main Application

FastAPI backend with:
- MongoDB for job postings (applicants embedded) and users
- JWT authentication for posting owners
- Public listing, search and apply

Run: uvicorn app.main:app --reload
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.exceptions import JobBoardError, ValidationFailed
from app.db.mongodb import close_mongo_client, init_mongo_indexes, test_mongo_connection
from app.utils.logging_config import get_logger, setup_logging

settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Job Board API",
    description="""
    A job board backend with an applicant review workflow.

    ## Features
    - **Authentication**: JWT-based auth for job posters
    - **Jobs**: Search, filter, paginate, post, edit and close postings
    - **Applications**: Apply without an account; owners review and set status
    - **Dashboard**: Owner's postings with per-status applicant counts
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# ============================================================
# ERROR HANDLERS
# ============================================================

def _error_response(status_code: int, message: str, code: str, details=None) -> JSONResponse:
    body = {"success": False, "error": message, "code": code}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(JobBoardError)
async def job_board_error_handler(request: Request, exc: JobBoardError):
    return _error_response(exc.status_code, exc.message, exc.code, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {"field": ".".join(str(part) for part in err["loc"] if part != "body"), "message": err["msg"]}
        for err in exc.errors()
    ]
    return _error_response(400, ValidationFailed.default_message, ValidationFailed.code, details)


@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error", "internal_error")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error", "internal_error")


# ============================================================
# LIFECYCLE
# ============================================================

@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
    except PyMongoError as e:
        logger.warning("MongoDB index initialization failed: %s", e)


@app.on_event("shutdown")
async def shutdown_event():
    close_mongo_client()


@app.get("/api/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    mongo_ok = test_mongo_connection()
    return {
        "status": "OK" if mongo_ok else "DEGRADED",
        "message": "Job Board API is running",
        "mongodb": "connected" if mongo_ok else "disconnected"
    }
