"""Rest recommendation routes."""

from fastapi import APIRouter, Body, Request

from ...data.catalog_loader import parse_practice_logs
from ...services.recovery import analyze, recommend_recovery

router = APIRouter(prefix="/rest-recommendations", tags=["recovery"])


@router.post("")
async def rest_recommendations(request: Request, payload: dict = Body(...)):
    """Analyze the last week of practice logs.

    Expects {"logs": [{"duration_minutes": 45, "poses": [...], "created_at": ...}]}.
    """
    logs = parse_practice_logs(payload.get("logs", []))
    analysis = analyze(logs, request.app.state.catalog)
    return {
        "analysis": analysis.to_dict(),
        "recommendation": recommend_recovery(analysis).to_dict(),
    }
