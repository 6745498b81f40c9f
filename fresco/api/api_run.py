from fastapi import FastAPI
import logging

from fresco.api.routes import pantry, shopping, units
from fresco.utilities.config import DEBUG

# Logging
logger = logging.getLogger("fresco_app")

# Initialize FastAPI app
app = FastAPI(title="Fresco Pantry & Shopping API", debug=DEBUG)

# Include routers
app.include_router(units.router)
app.include_router(shopping.router)
app.include_router(pantry.router)


@app.on_event("startup")
def _startup():
    logger.info("Fresco API started")


@app.get("/health")
def health():
    return {"status": "ok"}
