"""Base classes for output writers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from AuthorSearch.core.models import SearchEnvelope


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, envelope: SearchEnvelope) -> None:
        """Write the envelope produced by one search.

        Args:
            envelope: Search response to output.
        """
