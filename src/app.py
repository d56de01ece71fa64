"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route handlers.
"""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from core.logging_config import setup_logging
from config import (
    API_HOST,
    API_PORT,
    IMAGE_UPLOAD_DIR,
    SESSION_SECRET_KEY,
)
from core.database import init_db
from api.routes import auth, home

# Setup logging
setup_logging()

# Initialize FastAPI application
app = FastAPI(
    title="Quillpress",
    description="Server-rendered blogging application.",
    version="1.0.0",
)

# Signed cookie session holding the logged-in username and one-time notices
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET_KEY)

# Uploaded profile pictures
app.mount(
    "/images",
    StaticFiles(directory=str(IMAGE_UPLOAD_DIR), check_dir=False),
    name="images",
)

# Register route handlers
app.include_router(home.router)
app.include_router(auth.router)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create tables, seed roles and categories, prepare the image directory."""
    init_db()
    IMAGE_UPLOAD_DIR.mkdir(parents=True, exist_ok=True)


@app.get("/api/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    print(f"🌐 Serving on http://{API_HOST}:{API_PORT}")
    # reload=True enables auto-reload on code changes
    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
