"""
Test suite for the implementor bridge.
Provides shared sample data for all components.
"""

from pathlib import Path
from typing import Any, Dict, List

class SampleData:
    """Sample tables and paths shared by the tests."""

    @staticmethod
    def get_test_data_path() -> Path:
        """Get path to test data directory."""
        return Path(__file__).parent / "data"

    @staticmethod
    def fragment_root() -> Path:
        """Get the trait.impl directory holding sample fragments."""
        return SampleData.get_test_data_path() / "trait.impl"

    @staticmethod
    def read_fragment_path() -> Path:
        """Get the std::io::Read fragment shipped with the tests."""
        return SampleData.fragment_root() / "std" / "io" / "trait.Read.js"

    @staticmethod
    def table(**groups: List[Any]) -> Dict[str, List[Any]]:
        """Build an implementor table from keyword groups."""
        return dict(groups)
