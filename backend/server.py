# Copyright 2026 UCP Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Deposit Order Proxy Server

This module starts the server that sits between the checkout client and
Crossmint:
1. POST /api/create-order - Create a Crossmint order with server credentials
2. GET  /health - Health check

Usage:
    python -m backend.server

Or:
    uvicorn backend.server:app
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, load_settings
from .crossmint import CrossmintClient
from .order_routes import router as order_router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[CrossmintClient] = None,
) -> FastAPI:
    """
    Create the proxy application.

    Args:
        settings: Proxy settings, loaded from the environment when omitted
        client: Crossmint client, built from settings when omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or load_settings()
    client = client or CrossmintClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.aclose()

    app = FastAPI(
        title="Deposit Order Proxy",
        description="Creates Crossmint orders for the embedded deposit checkout",
        version="2022-06-09",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.crossmint = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(order_router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "Deposit Order Proxy",
            "environment": settings.environment,
            "configured": bool(settings.api_key),
        }

    return app


def run_server(host: str = "localhost", port: int = 3000):
    """Run the proxy server."""
    logger.info(f"Starting Deposit Order Proxy on http://{host}:{port}")
    logger.info("Available endpoints:")
    logger.info("  - POST /api/create-order - Create a Crossmint order")
    logger.info("  - GET  /health - Health check")

    uvicorn.run(app, host=host, port=port)


app = create_app()


if __name__ == "__main__":
    run_server()
