"""
This module creates and configures the main FastAPI application for the
PVPC Electricity Price API. It serves today's hourly Spanish PVPC prices
from Red Eléctrica de España, flags cheap and under-average hours, and
renders the day as an interactive chart next to historical monthly
averages.

API Categories:
    - System Information: Health and API metadata
    - Price Data: Today's hourly prices and the current hour
    - Statistics & Analytics: Daily summary and monthly averages
    - Charts: Plotly area charts as JSON or HTML
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import app_config, setup_logging
from .controllers import pvpc_controller


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application with CORS and all routers under /api.

    Routes:
        - /docs: Interactive Swagger UI documentation
        - /redoc: Alternative ReDoc documentation
        - /api/*: All PVPC price endpoints
    """
    setup_logging()

    app = FastAPI(
        title=app_config.api.title,
        description=app_config.api.description,
        version=app_config.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "System Information",
                "description": "API health and version info"
            },
            {
                "name": "Price Data",
                "description": "Today's hourly PVPC prices with cheap and under-average flags"
            },
            {
                "name": "Statistics & Analytics",
                "description": "Daily summary figures and historical monthly averages"
            },
            {
                "name": "Charts",
                "description": "Interactive Plotly charts of the price series"
            }
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.api.allow_origins,
        allow_credentials=app_config.api.allow_credentials,
        allow_methods=app_config.api.allow_methods,
        allow_headers=app_config.api.allow_headers,
    )

    app.include_router(
        pvpc_controller.router,
        prefix="/api",
    )

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=app_config.api.host,
        port=app_config.api.port,
        reload=app_config.api.reload
    )
