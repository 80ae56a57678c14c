"""Abstract base class for temporal parsing strategies."""

from abc import ABC, abstractmethod
from typing import Any

from timeline_temporal.config import DEFAULT_CONFIG, TemporalConfig


class TemporalParserStrategy(ABC):
    """Interface for temporal parsing strategies."""

    def __init__(self, config: TemporalConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse text into a temporal value.

        Args:
            text: The text to parse

        Returns:
            The parsed value

        Raises:
            TemporalError: If the text cannot be parsed
        """
        pass
