"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_checklist.api.v1.router import api_router
from mortgage_checklist.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

# Create FastAPI application
app = FastAPI(
    title="Mortgage Document Checklist API",
    description="API for deriving supporting-document checklists from mortgage applications",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Mortgage Document Checklist API",
        "version": "1.0.0",
        "docs": "/api/docs",
    }
