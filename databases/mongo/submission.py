from datetime import datetime, timezone

from models.submission import Submission, SubmissionPayload
from utils.logging import logger


async def create_submission(payload: SubmissionPayload, ip_address: str, user_agent: str) -> Submission:
    """Store a contact form submission, enriched with where and when it came from"""
    logger.info(f"Saving form submission from {payload.email}")
    extra = {k: v for k, v in (payload.model_extra or {}).items() if k not in ("id", "_id")}
    return await Submission.model_validate(
        {
            **extra,
            "name": payload.name,
            "email": payload.email,
            "message": payload.message,
            "phone": payload.phone,
            "city": payload.city,
            "ipAddress": payload.ip_address or ip_address,
            "userAgent": payload.user_agent or user_agent,
            "submittedAt": datetime.now(timezone.utc).isoformat(),
            "createdAt": datetime.now(timezone.utc),
        }
    ).insert()
