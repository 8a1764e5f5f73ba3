#!/usr/bin/env python3
"""
Command-line entry point for the implementor bridge.
Loads generated trait fragments and delivers each one to the host page.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from config.settings import settings
from core.bridge import ImplementorBridge
from core.fragment_loader import FragmentFormatError, ImplementorFragment, discover_fragments, load_fragment
from core.pending_buffer import PendingBuffer
from host import HostNamespace, HostPage, ImplementorCollector
from utils.helpers import setup_logging, format_delivery_report, get_system_info

logger = logging.getLogger(__name__)

USAGE = "Usage: python main.py [--host-ready] FRAGMENT_OR_DIR... | --api"


class ImplementorDelivery:
    """Runs fragments through their bridges against one host page."""

    def __init__(self, host_ready: bool = False):
        """
        Initialize the delivery run.

        Args:
            host_ready: Install the host consumer before any fragment loads
        """
        self.namespace = HostNamespace()
        self.buffer = PendingBuffer()
        self.page = HostPage(self.namespace, self.buffer)
        self.collector = ImplementorCollector()
        if host_ready:
            self.page.ready(self.collector)

    def load(self, targets: List[str]) -> List[ImplementorFragment]:
        """
        Load fragments from files and directories.

        Args:
            targets: Fragment files or trait.impl directories

        Returns:
            Loaded fragments in the order given
        """
        fragments = []
        for target in targets:
            path = Path(target)
            if path.is_dir():
                fragments.extend(load_fragment(p, root=path) for p in discover_fragments(path))
            else:
                fragments.append(load_fragment(path, root=settings.FRAGMENT_ROOT))
        return fragments

    def deliver(self, fragment: ImplementorFragment) -> None:
        """Deliver one fragment through a bridge on its own slot."""
        bridge = ImplementorBridge(self.namespace, self.buffer.slot(fragment.trait_path))
        bridge.deliver(fragment.table)

    def report(self) -> str:
        return format_delivery_report(self.buffer.pending(), self.collector.received)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    # Setup logging
    setup_logging()

    # Validate configuration
    try:
        settings.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if args and args[0] == "--api":
        from run_api import main as api_main
        api_main()
        return 0

    host_ready = "--host-ready" in args
    targets = [arg for arg in args if arg != "--host-ready"]
    if not targets:
        targets = [settings.FRAGMENT_ROOT]

    logger.debug(f"System info: {get_system_info()}")

    run = ImplementorDelivery(host_ready=host_ready)
    try:
        fragments = run.load(targets)
    except FragmentFormatError as e:
        logger.error(f"Failed to load fragments: {e}")
        return 1

    if not fragments:
        print("No fragments found")
        print(USAGE)
        return 1

    for fragment in fragments:
        run.deliver(fragment)

    print(run.report())
    return 0

if __name__ == "__main__":
    sys.exit(main())
