"""Warm-up and cool-down generation routes."""

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from ...services.warmup import generate_cooldown, generate_warmup
from ...utils.pose_utils import build_pose_index, normalize_pose_name

router = APIRouter(prefix="/generate", tags=["sequences"])


def _build(request: Request, payload: dict, generator):
    catalog = request.app.state.catalog
    index = build_pose_index(catalog)

    program_poses = []
    for name in payload.get("poses", []):
        pose = index.get(normalize_pose_name(str(name)))
        if pose is None:
            return JSONResponse({"error": f"Pose '{name}' not found"}, status_code=404)
        program_poses.append(pose)

    generated = generator(program_poses, catalog, int(payload.get("minutes", 5)))
    return generated.to_dict()


@router.post("/warmup")
async def warmup(request: Request, payload: dict = Body(...)):
    """Generate a warm-up for {"poses": [...], "minutes": 5}."""
    return _build(request, payload, generate_warmup)


@router.post("/cooldown")
async def cooldown(request: Request, payload: dict = Body(...)):
    """Generate a cool-down for {"poses": [...], "minutes": 5}."""
    return _build(request, payload, generate_cooldown)
