from contextlib import asynccontextmanager
import logging

from resumegen.services.orchestrator import get_orchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    orchestrator = get_orchestrator()
    status = orchestrator.status()
    logger.info(
        "ai_resilience_config provider=%s model=%s remote_path=%s breaker=%s quota=%s",
        status["provider"],
        status["model"],
        status["remote_path_available"],
        status["breaker"],
        status["quota"],
    )
    yield
    logger.info("ai_shutdown cache_entries=%s", len(orchestrator.cache))
