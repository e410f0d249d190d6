from skipsave.logging.logger import configure, logger
from skipsave.main import create_app
from skipsave.services.deps import get_settings_service


if __name__ == "__main__":
    import uvicorn

    settings = get_settings_service().settings
    configure(settings.log_level, settings.log_file)
    logger.info(f"skipsave ({settings.environment}) on {settings.host}:{settings.port}")
    app = create_app()

    # single worker: rate limits and sandbox timers live in process memory
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
        loop="asyncio",
    )
