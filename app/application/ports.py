"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from external systems, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class LLMServicePort(ABC):
    """Abstract interface for text generation."""

    @abstractmethod
    async def invoke_text(self, prompt: str) -> str:
        """Send a single prompt and return the full text completion."""
        pass


class SpreadsheetPort(ABC):
    """Abstract interface for an append-only spreadsheet target."""

    @abstractmethod
    async def append_row(
        self, spreadsheet_id: str, range_: str, row: Sequence[str]
    ) -> Any:
        """Append one row after the last non-empty row of the range."""
        pass

    @abstractmethod
    async def read_values(self, spreadsheet_id: str, range_: str) -> List[List[Any]]:
        """Read the cell values of a range."""
        pass
