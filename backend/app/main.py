from core.config import get_settings
from app.app_factory import create_app
from app.startup import configure_startup_logging

settings = get_settings()
configure_startup_logging(settings)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
