from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from expense_categorizer.api.routes import categories, categorize
from expense_categorizer.core import settings
from expense_categorizer.logger import get_logger, setup_logging
from expense_categorizer.manager import CategorizerService
from expense_categorizer.services.categorization import CategorizationPipeline

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        app.state.pipeline = CategorizationPipeline(service=CategorizerService())

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Expense Categorizer", lifespan=lifespan)

    app.include_router(categorize.router)
    app.include_router(categories.router)

    return app


app = create_app()
