"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import Settings, get_settings, setup_logger, get_logger
from infrastructure.database import init_db, close_db
from presentation.api.endpoints import applications, documents, health
from presentation.api.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    setup_logger(
        level=settings.log_level,
        log_format=settings.log_format,
    )
    
    get_logger("startup").info(f"Using database: {settings.database_url.split('@')[-1]}")
    await init_db()
    
    yield
    
    # Shutdown
    await close_db()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI app.
    
    Args:
        settings: Settings to use, defaults to the cached instance
        
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(app)
    
    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(applications.router, prefix=settings.api_prefix)
    app.include_router(documents.router, prefix=settings.api_prefix)
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }
    
    return app
