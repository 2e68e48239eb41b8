"""
Overpass data access

- API client: Overpass API communication
- Cache: Raw response caching
- Parser: Response parsing into resolved elements
- Collector: Fetch and convert orchestrator
"""

from .api_client import OverpassAPIClient
from .cache import OSMCache
from .parser import OSMResponseParser
from .collector import OSMCollector

__all__ = [
    "OverpassAPIClient",
    "OSMCache",
    "OSMResponseParser",
    "OSMCollector",
]
