"""Body map routes."""

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from ...data.catalog_loader import parse_practice_records
from ...models.history import utc_now
from ...services.body_map import analyze_body_map

router = APIRouter(prefix="/bodymap", tags=["bodymap"])


@router.post("")
async def body_map(request: Request, payload: dict = Body(...)):
    """Aggregate per-pose practice totals into a body map.

    Expects {"records": [...], "days": 30}. Only records last practiced
    within the window are counted.
    """
    try:
        days = int(payload.get("days", 30))
    except (TypeError, ValueError):
        return JSONResponse({"error": "days must be a whole number"}, status_code=400)

    records = parse_practice_records(
        payload.get("records", []), request.app.state.catalog
    )
    report = analyze_body_map(records, window_days=days, now=utc_now())
    return report.to_dict()
