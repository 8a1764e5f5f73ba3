"""
APIs module for external interfaces and SDKs.
Provides a REST surface for delivering implementor tables to a host page.
"""

from fastapi import FastAPI
from typing import Optional

# Global API app instance
app: Optional[FastAPI] = None

def create_app(fresh: bool = False) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        fresh: Build a new application with its own host state instead of
            returning the shared instance
    """
    global app
    if app is None or fresh:
        from .routes import router, BridgeState
        instance = FastAPI(
            title="Implementor Bridge API",
            description="Deferred registration of trait implementor tables",
            version="1.0.0"
        )
        instance.state.bridge = BridgeState()
        instance.include_router(router)
        if fresh:
            return instance
        app = instance
    return app
