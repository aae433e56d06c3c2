"""
Mind Map Layout Backend - FastAPI entry point.
Computes mind-map node sizes and positions for the canvas/DOM front end.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from api import register_routes
from measure import create_measurer

app = FastAPI(title="Mind Map Layout Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

measurer = create_measurer()
register_routes(app, measurer)
logger.info("Mind map layout backend ready (measurer: {})", type(measurer).__name__)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3001)
