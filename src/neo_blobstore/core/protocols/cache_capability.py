"""Cache capability protocol.

ONLY cache storage contract - the minimal key-value interface the blob
store delegates physical storage to.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class CacheCapability(Protocol):
    """Key-value cache capability.

    Implemented by the backing cache (memory, Redis) and by the local
    accelerator. Calls are synchronous and treated as atomic.
    """

    def contains(self, key: str) -> bool:
        """Check if key is present and not expired."""
        ...

    def fetch(self, key: str) -> Any:
        """Get stored value.

        Returns None (or another falsy sentinel) when the key is absent.
        """
        ...

    def save(self, key: str, value: Any, ttl: int = 0) -> bool:
        """Store value under key.

        A ttl of 0 or less stores the value without expiry.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete key, returning True if it existed."""
        ...

    def get_stats(self) -> Dict[str, Any]:
        """Get diagnostic statistics."""
        ...
