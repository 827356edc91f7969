"""Main API router aggregating all v1 endpoints."""

from fastapi import APIRouter

from hrpipeline.api.v1 import rfmt_import, rfmts, ukers

api_router = APIRouter()

# Include sub-routers
api_router.include_router(rfmt_import.router, prefix="/rfmts", tags=["RFMT Import"])
api_router.include_router(rfmts.router, prefix="/rfmts", tags=["RFMT"])
api_router.include_router(ukers.router, prefix="/ukers", tags=["Ukers"])
