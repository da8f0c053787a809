"""Language detection route."""

from deps import APIRouter

from ..schemas import DetectRequest, DetectResponse
from ..services import CheckerService

router = APIRouter()
checker_svc = CheckerService()


@router.post("/detect", response_model=DetectResponse)
def detect(req: DetectRequest) -> DetectResponse:
    """Guess the language of a snippet (css, html, javascript, ... or plaintext)."""
    return DetectResponse(language=checker_svc.detect(req.code))
