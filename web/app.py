"""
FastAPI application for the MRP service.

This is the main entry point for the web application.
Run with: uvicorn web.app:app --reload
"""

import logging

from fastapi import FastAPI

from web.config import get_settings


def create_app() -> FastAPI:
    """Application factory for creating the FastAPI app."""
    config = get_settings()

    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO)

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        description="Material Requirements Planning for open production orders",
    )

    # Import and include routers
    from web.routes.mrp import router as mrp_router

    app.include_router(mrp_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {"status": "healthy", "app": "mrp"}

    return app


# Create the application instance
app = create_app()


def serve() -> None:
    """Serve the application with uvicorn using MRP_HOST / MRP_PORT."""
    import uvicorn

    config = get_settings()
    uvicorn.run("web.app:app", host=config.host, port=config.port, reload=config.debug)


if __name__ == "__main__":
    serve()
