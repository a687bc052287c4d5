"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import HealthChecker, check_event_loop, create_clock_check, create_generator_check
from idgen.default import configure_default
from internal.logging import get_logger, parse_level, StructuredLogger
from utils.crash import configure as configure_crash, create_async_handler
from service import auth
from service.routes import api, health, ids


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()
    configure_crash(config.logging.crash_file)

    # Routes and the crash hook must draw from one generator per tag
    generator = configure_default(config.generator.system_tag)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("clock", create_clock_check(generator), critical=False)
    health_checker.register("generator", create_generator_check(generator), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0", system_tag=generator.system_tag)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        yield
        logger_instance.info("Application shutdown complete", **generator.get_stats())

    app = FastAPI(
        title="QuickId",
        version="1.0.0",
        description="time-ordered sortable ID service",
        lifespan=lifespan,
    )
    app.state.generator = generator

    auth.init(config.auth)
    ids.init(generator)
    api.init(generator)
    health.init(generator, health_checker)

    app.include_router(ids.router)
    app.include_router(api.router)
    app.include_router(health.router)

    return app
