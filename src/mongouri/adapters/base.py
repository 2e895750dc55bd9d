"""Abstract base class for client adapters."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..uri.connection_string import ConnectionString


class BaseClientAdapter(ABC):
    """Abstract base class for clients built from a parsed connection string.

    The parser never touches the network; adapters are the consumers that
    turn the host list and options into a live connection.
    """

    def __init__(self, connection_string: ConnectionString, timeout: float):
        """Initialize adapter with connection parameters.

        Args:
            connection_string: Parsed connection string
            timeout: Connection and server selection timeout in seconds
        """
        self.connection_string = connection_string
        self.timeout = timeout
        self.client: Optional[Any] = None

    @abstractmethod
    def connect(self) -> None:
        """Establish the client connection.

        Raises:
            ConnectionError: If connection fails
        """
        pass

    @abstractmethod
    def ping(self) -> float:
        """Round-trip a ping command and return its duration in seconds.

        Raises:
            ConnectionError: If not connected or the command fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the client and release resources."""
        pass

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
