# Main application file

import logging
import time

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app import models  # noqa: F401  registers every mapper
from app.core.auth import require_session
from app.core.config import settings
from app.core.errors import ApiError, api_error_handler, request_validation_handler
from app.core.rate_limiter import limiter
from app.routers import (
    customers,
    deliveries,
    inventory,
    manufacturers,
    orders,
    products,
    reports,
    sales_plans,
    salespeople,
    statements,
    visits,
    warehouses,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("app")


# APP INIT

app = FastAPI(
    title="Sales & Inventory API",
    description="Orders, multi-warehouse stock and field sales tracking for a distributor",
    version="1.0.0",
)


# CORS

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# ERROR RENDERING

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

for module in (
    manufacturers,
    products,
    warehouses,
    inventory,
    salespeople,
    customers,
    orders,
    deliveries,
    visits,
    statements,
    sales_plans,
    reports,
):
    app.include_router(
        module.router,
        prefix="/api",
        dependencies=[Depends(require_session)],
    )


# ROOT

@app.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "Sales & Inventory API is running"}
