"""
Utility functions and helpers for the implementor bridge.
Includes logging setup and table summaries for console output.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict, List

from config.settings import settings
from interfaces import ImplementorTable

def setup_logging():
    """Set up logging configuration for the application."""
    # Create logs directory if it doesn't exist
    os.makedirs(settings.LOG_DIR, exist_ok=True)

    log_file = os.path.join(settings.LOG_DIR, f"implementor_bridge_{datetime.now().strftime('%Y%m%d')}.log")
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Suppress some noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging system initialized")

def summarize_table(table: ImplementorTable) -> Dict[str, int]:
    """Entry count per group key, in table order."""
    return {group: len(entries) for group, entries in table.items()}

def format_delivery_report(pending: List[str], received: List[ImplementorTable]) -> str:
    """
    Format the outcome of a delivery run for display.

    Args:
        pending: Slot names still holding a table
        received: Tables the host consumer accepted

    Returns:
        Formatted string representation
    """
    output = []
    if received:
        output.append(f"Host received {len(received)} tables")
        for table in received:
            for group, count in summarize_table(table).items():
                output.append(f"  {group}: {count} implementors")
    else:
        output.append("Host not ready, nothing delivered")

    if pending:
        output.append(f"Pending slots: {len(pending)}")
        for name in pending:
            output.append(f"  {name}")

    return "\n".join(output)

def get_system_info() -> Dict[str, Any]:
    """
    Get system and configuration information.

    Returns:
        Dictionary with system info
    """
    return {
        'python_version': sys.version,
        'working_directory': os.getcwd(),
        'config': {
            'register_function_name': settings.REGISTER_FUNCTION_NAME,
            'pending_slot_name': settings.PENDING_SLOT_NAME,
            'fragment_root': settings.FRAGMENT_ROOT
        },
        'timestamp': datetime.now().isoformat()
    }
