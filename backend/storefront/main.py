import logging
import os
import subprocess
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.config import CORS_ORIGINS, LOG_LEVEL
from storefront.database import init_db
from storefront.dependencies import require_auth
from storefront.routes import auth, orders, payments, products, users
from storefront.services.errors import ErrorKind, ServiceError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Storefront API")


def get_build_info() -> str:
    """Short commit hash shown by /api/health; BUILD_HASH env wins when set."""
    override = os.getenv("BUILD_HASH")
    if override:
        return override
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=os.path.dirname(os.path.dirname(__file__)),
            capture_output=True,
            text=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"git unavailable for build hash: {e}")
    else:
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout.strip()
    return "dev-" + datetime.now().strftime("%Y%m%d-%H%M%S")


BUILD_HASH = get_build_info()

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# ============================================================================
# Error mapping
# ============================================================================

STATUS_BY_KIND = {
    ErrorKind.validation: 400,
    ErrorKind.conflict: 400,
    ErrorKind.authentication: 401,
    ErrorKind.store: 500,
}


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"success": False, "message": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Public routers
app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(products.router, prefix="/api", tags=["products"])

# Protected routers (token cookie required)
app.include_router(users.router, prefix="/api", tags=["users"], dependencies=[Depends(require_auth)])
app.include_router(orders.router, prefix="/api", tags=["orders"], dependencies=[Depends(require_auth)])
app.include_router(payments.router, prefix="/api", tags=["payments"], dependencies=[Depends(require_auth)])


@app.on_event("startup")
def on_startup():
    init_db()  # Imports models and creates any missing tables
    logger.info(f"Storefront API started (build {BUILD_HASH})")


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify which code is running"""
    return {"app_name": "Storefront API", "build_hash": BUILD_HASH, "status": "healthy"}
