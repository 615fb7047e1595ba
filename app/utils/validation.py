# app/utils/validation.py
import logging
from app.exceptions import BadRequest

logger = logging.getLogger(__name__)

def ensure_valid_id(entity: str, value: int) -> None:
    """Reject non-positive identifiers before the store is touched"""
    if value <= 0:
        logger.warning("Rejected %s ID %s", entity.lower(), value)
        raise BadRequest(
            message=f"Invalid {entity.lower()} ID",
            details=f"{entity} ID must be a positive integer, got: {value}",
        )
