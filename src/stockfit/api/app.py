# src/stockfit/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and configures CORS.
Business logic lives in `stockfit.api.routes` and `stockfit.evaluator`.
"""

from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from stockfit.core.logging import configure_logging

from .routes import router

configure_logging()

LOCAL_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"

app = FastAPI(title="StockFit API", version="0.1.0")

# CORS (dev-friendly): allow local frontends (any localhost port) to call this API.
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=LOCAL_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
