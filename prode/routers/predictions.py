from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ..database import get_session
from ..dependencies import get_now
from ..exceptions import ValidationError
from ..models.prediction import PredictionRead
from ..services.predictions import list_by_user
from ..services.settings import ActiveSettings, resolve_active_settings
from ..services.submission import submit_prediction

router = APIRouter(prefix="/api/predictions", tags=["predictions"])


async def _read_payload(request: Request) -> dict:
    """Request body as a dict. Anything that is not a JSON object counts as empty."""
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post("", response_model=PredictionRead)
async def create_prediction(
    request: Request,
    db: Session = Depends(get_session),
    now: datetime = Depends(get_now)
):
    """Create or overwrite the caller's prediction for a match."""
    payload = await _read_payload(request)
    return submit_prediction(db, payload, now)


@router.get("", response_model=List[PredictionRead])
def get_user_predictions(
    user_id: Optional[str] = None,
    db: Session = Depends(get_session)
):
    """Get all predictions for a user, most recent first."""
    if not user_id or not user_id.strip():
        raise ValidationError("missing_user_id")

    return list_by_user(db, user_id.strip())


@router.get("/settings", response_model=ActiveSettings)
def get_active_settings(db: Session = Depends(get_session)):
    """Betting rules currently in effect."""
    return resolve_active_settings(db)
