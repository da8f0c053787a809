"""FastAPI app: /, /health, /detect, /check, /check/report."""

from deps import CORSMiddleware, FastAPI

from .config import get_host, get_port
from .routes import check_router, detect_router, health_router, root_router
from .startup import configure_logging, validate_config

configure_logging()

app = FastAPI(
    title="Baseline Compatibility Checker API",
    description="Reports CSS, HTML and JavaScript features that are below a Baseline level.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(detect_router)
app.include_router(check_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Warn about configuration that falls back to defaults."""
    validate_config()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=get_host(), port=get_port())
