from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from databases.mongo.orm import close_db, init_db
from integrations.google_places import GooglePlacesClient
from routers import ROUTERS
from utils.csv_parser import load_reference_data
from utils.logging import logger


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, Any]:
    """Open the database and Places clients and load the CSV data; release them on shutdown"""
    application.state.reference_data = load_reference_data()
    application.state.database = await init_db()
    application.state.places_client = GooglePlacesClient.create()
    yield
    logger.info("Shutting down the application.")
    await application.state.places_client.aclose()
    close_db(application.state.database)


app = FastAPI(title="Pizzerías Argentina", lifespan=lifespan)
for router in ROUTERS:
    app.include_router(router)


@app.exception_handler(RequestValidationError)
async def bad_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors like missing fields, so they answer 400"""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})
