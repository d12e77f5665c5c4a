"""
Transport Protocol Definition

Defines the interface for sending a built request over the network.
"""

from typing import Protocol, runtime_checkable

from ..result import Result


@runtime_checkable
class TransportProtocol(Protocol):
    """Protocol for single-shot request transports."""

    async def send(self, request) -> Result[bytes]:
        """
        Send one request and classify the one response.

        Args:
            request: Fully built request description

        Returns:
            Success with the body bytes, or a typed failure
        """
        ...

    async def close(self) -> None:
        """Release network resources owned by the transport."""
        ...
