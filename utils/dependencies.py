from fastapi import HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from integrations.google_places import GooglePlacesClient
from models.reference import ReferenceData


def get_reference_data(request: Request) -> ReferenceData:
    return request.app.state.reference_data


def get_places_client(request: Request) -> GooglePlacesClient:
    return request.app.state.places_client


def get_database(request: Request) -> AsyncIOMotorDatabase:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return database
