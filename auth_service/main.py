# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import auth_router
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories.auth_repository import AuthRepository
from .infrastructure.db.mongo_auth_repository import MongoAuthRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Ensures the users collection indexes exist on startup and closes the
    MongoDB client on shutdown.
    """
    try:
        repository = get_container().get(AuthRepository)
        if isinstance(repository, MongoAuthRepository):
            await repository.ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is unavailable
        logger.error(f"Failed to ensure database indexes: {e}", exc_info=True)
    
    yield
    
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Package log level
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    logging.getLogger(__package__).setLevel(get_settings().log_level)
    
    application = FastAPI(
        title="Auth Service API",
        version="1.0.0",
        description="Clean Architecture user registration service",
        lifespan=lifespan
    )
    
    application.include_router(auth_router, prefix="/api/v1/auth")
    
    return application


# Create application instance
app = create_application()
