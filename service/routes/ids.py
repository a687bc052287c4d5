"""ID issuing and decoding routes."""

from fastapi import APIRouter, HTTPException, Query, status

from core.errors import MalformedIdError
from utils.timestamp import format_millis

router = APIRouter(prefix="/api/v1/ids", tags=["ids"])

MAX_BATCH = 1000

# Set by app.py
_generator = None


def init(generator):
    """Initialize with the shared SerializedGenerator."""
    global _generator
    _generator = generator


@router.get("")
def issue(count: int = Query(1, ge=1, le=MAX_BATCH)):
    """Issue `count` new IDs, in increasing order."""
    return {"ids": _generator.get_ids(count)}


@router.get("/{id:path}")
def parse(id: str):
    """Decode an ID into its time, system tag and sequence."""
    try:
        parsed = _generator.parse_id(id)
    except MalformedIdError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {**parsed.to_dict(), "timestamp": format_millis(parsed.time)}
