from fastapi import APIRouter, Request

# Health router kept prefix-free to expose exactly /health and /health/ready
router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
def health() -> dict:
    """Return a simple OK payload to indicate the app is alive."""
    return {"status": "ok"}


@router.get("/health/ready", summary="Readiness probe")
def ready(request: Request) -> dict:
    """Ready once the catalogs have been loaded at least once."""
    store = request.app.state.catalog_store
    if not store.loaded:
        return {"status": "loading", "ready": False, "locales": {}}
    return {
        "status": "ready",
        "ready": True,
        "locales": {lang: len(cat) for lang, cat in store.snapshot().items()},
    }
