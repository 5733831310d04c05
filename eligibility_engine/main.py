"""
Eligibility Engine: FastAPI Application Entry Point

POST /v1/scoring/loan     → loan eligibility score
POST /v1/scoring/deposit  → deposit eligibility score
POST /v1/scoring/profile  → both, for the client-profile view
GET  /v1/scoring/health   → health check
GET  /docs                → OpenAPI / Swagger UI
"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from eligibility_engine.api.scoring_endpoint import invalid_input_handler
from eligibility_engine.api.scoring_endpoint import router as scoring_router
from eligibility_engine.core.config import get_settings
from eligibility_engine.core.errors import InvalidInputError
from eligibility_engine.core.logging import configure_logging

configure_logging(get_settings())
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("eligibility_engine_starting", model_version=get_settings().scoring_model_version)
    yield
    logger.info("eligibility_engine_shutting_down")


app = FastAPI(
    title="Eligibility Engine",
    description="Deterministic loan and deposit eligibility scoring",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (banking front-ends + admin panel) ──
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)

# ── Prometheus metrics ──
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# ── Routes ──
app.include_router(scoring_router)
app.add_exception_handler(InvalidInputError, invalid_input_handler)


@app.get("/", include_in_schema=False)
async def root():
    return {
        "service": get_settings().app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "loan": "POST /v1/scoring/loan",
        "deposit": "POST /v1/scoring/deposit",
    }
