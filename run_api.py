#!/usr/bin/env python3
"""
API server runner for the implementor bridge.
Starts the FastAPI server with all endpoints.
"""

import uvicorn
import logging
from apis import create_app
from config.settings import settings
from utils.helpers import setup_logging

def main():
    """Main entry point for API server."""
    # Setup logging
    setup_logging()

    # Validate configuration
    try:
        settings.validate()
    except ValueError as e:
        logging.error(f"Configuration error: {e}")
        return

    # Create FastAPI app
    app = create_app()

    logging.info(f"Starting implementor bridge API server on {settings.API_HOST}:{settings.API_PORT}")

    # Start server
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True
    )

if __name__ == "__main__":
    main()
