from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_session
from ..dependencies import get_now
from ..services.matches import MatchAvailability, list_match_availability
from ..services.settings import resolve_active_settings

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("", response_model=List[MatchAvailability])
def get_matches(
    user_id: Optional[str] = None,
    db: Session = Depends(get_session),
    now: datetime = Depends(get_now)
):
    """Matches with their prediction deadline and the user's current pick."""
    settings = resolve_active_settings(db)
    return list_match_availability(db, settings, now, user_id=(user_id or "").strip() or None)
