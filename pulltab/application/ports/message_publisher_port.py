"""Message publisher port (interface)"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class MessagePublisherPort(ABC):
    """Port for publishing ticket events"""

    @abstractmethod
    def publish_ticket_purchased(self, event: Dict[str, Any], trace_headers: Dict[str, str]) -> None:
        """Publish a committed ticket purchase for analytics"""
        pass
