"""Views Nested Details API - style definitions and rendering service.

This API serves the nested details style to display front ends:
- Style plugin definitions (id, theme hooks, display types)
- Default options and the options form description
- Rendering of grouping sets into display nodes
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nested_details import __version__
from nested_details.api.routes import styles
from nested_details.styles.registry import get_style_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Loading style definitions...")
    style_registry = get_style_registry()
    logger.info(f"Loaded {style_registry.count()} styles")

    logger.info("Views Nested Details API ready")
    yield
    logger.info("Shutting down Views Nested Details API")


app = FastAPI(
    title="Views Nested Details API",
    description="""
## Nested Details Style Service

Renders grouped query results as nested collapsible details elements.

### Key Endpoints

- `GET /v1/styles` - List all styles
- `GET /v1/styles/{plugin_id}` - Get a style definition
- `GET /v1/styles/{plugin_id}/options` - Get default options
- `POST /v1/styles/{plugin_id}/options-form` - Build the options form
- `POST /v1/styles/{plugin_id}/render` - Render grouping sets
""",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(styles.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Views Nested Details API",
        "version": __version__,
        "description": "Nested details style definitions and rendering",
        "docs": "/docs",
        "endpoints": {
            "styles": "/v1/styles",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    style_registry = get_style_registry()
    return {
        "status": "healthy",
        "styles_loaded": style_registry.count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "nested_details.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
