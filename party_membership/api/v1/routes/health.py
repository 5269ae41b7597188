from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from party_membership.core.logging import get_logger
from party_membership.db.session import ping
from party_membership.schemas.common import HealthOut

logger = get_logger("health")

router = APIRouter()


@router.get("/health", response_model=HealthOut)
def health():
    try:
        ping()
    except SQLAlchemyError:
        logger.exception("Database ping failed")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        )
    return {"status": "ok"}
