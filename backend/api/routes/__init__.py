"""API route modules."""

from fastapi import FastAPI

from layout.measurer import ContentMeasurer

from . import layout
from ..state import init_api_state


def register_routes(app: FastAPI, measurer: ContentMeasurer):
    """Register all API routers. Call after app and measurer are created."""
    init_api_state(measurer)

    app.include_router(layout.router, prefix="/api/layout", tags=["layout"])
