from fastapi import APIRouter, HTTPException, Request

from databases.mongo.orm import DATABASE_ERRORS
from databases.mongo.submission import create_submission
from models.submission import SubmissionPayload
from utils.logging import logger

router = APIRouter(prefix="/api", tags=["submissions"])


@router.post("/submit")
async def submit_form(payload: SubmissionPayload, request: Request) -> dict:
    """Save a contact form submission"""
    if not (payload.name and payload.email and payload.message):
        raise HTTPException(status_code=400, detail="Name, email, and message are required")

    ip_address = request.headers.get("x-forwarded-for") or request.headers.get("x-real-ip") or "unknown"
    user_agent = request.headers.get("user-agent") or "unknown"
    try:
        submission = await create_submission(payload, ip_address, user_agent)
    except DATABASE_ERRORS as e:
        logger.error(f"Error saving form submission: {e}")
        raise HTTPException(status_code=500, detail="Error saving form submission") from e
    return {"success": True, "id": str(submission.id)}
