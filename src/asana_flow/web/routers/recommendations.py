"""Next-pose recommendation routes."""

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from ...models.poses import Pose
from ...models.recommendation import SessionContext
from ...services.sequencer import SequenceRecommender
from ...utils.pose_utils import build_pose_index, normalize_pose_name

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


class UnknownPose(Exception):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


def _resolve(index: dict[str, Pose], names: list[str]) -> list[Pose]:
    poses = []
    for name in names:
        pose = index.get(normalize_pose_name(name))
        if pose is None:
            raise UnknownPose(name)
        poses.append(pose)
    return poses


def _not_found(name: str) -> JSONResponse:
    return JSONResponse({"error": f"Pose '{name}' not found"}, status_code=404)


@router.get("")
async def next_pose(
    request: Request,
    current: str | None = None,
    session: list[str] = Query(default=[]),
    progress: float = 0.0,
    goals: list[str] = Query(default=[]),
    limit: int = 5,
):
    """Recommend what comes after the current pose."""
    catalog = request.app.state.catalog
    index = build_pose_index(catalog)

    try:
        current_pose = _resolve(index, [current])[0] if current else None
        session_poses = _resolve(index, session)
    except UnknownPose as e:
        return _not_found(e.name)

    context = SessionContext(
        current_pose=current_pose,
        session_poses=session_poses,
        session_progress=progress,
        goals=goals,
    )
    results = SequenceRecommender().recommend(catalog, context, limit)
    return {"recommendations": [r.to_dict() for r in results]}


@router.get("/start")
async def starting_poses(request: Request, limit: int = 5):
    """Recommend opening poses for a new session."""
    results = SequenceRecommender().recommend_start(request.app.state.catalog, limit)
    return {"recommendations": [r.to_dict() for r in results]}


@router.get("/cooldown")
async def cooldown_poses(
    request: Request,
    session: list[str] = Query(default=[]),
    limit: int = 5,
):
    """Recommend gentle poses to close a session."""
    catalog = request.app.state.catalog
    try:
        session_poses = _resolve(build_pose_index(catalog), session)
    except UnknownPose as e:
        return _not_found(e.name)

    results = SequenceRecommender().recommend_cooldown(catalog, session_poses, limit)
    return {"recommendations": [r.to_dict() for r in results]}
