"""Health check route."""

from deps import APIRouter

from ..services import get_checker

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, with the size of the loaded feature dataset."""
    dataset = get_checker().dataset
    return {"status": "ok", "features": len(dataset.features), "compatKeys": len(dataset.index)}
