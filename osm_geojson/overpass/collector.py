"""
Main OSM Collector

Fetches elements from Overpass, resolves them and converts them to GeoJSON
"""

import json
from typing import Dict, Any, Optional
from loguru import logger

from ..config import get_config
from ..converters import OSMGeoJsonConverter
from ..models import GeoJSONFeature, GeoJSONFeatureCollection
from .api_client import OverpassAPIClient
from .cache import OSMCache
from .parser import OSMResponseParser

ELEMENT_TYPES = ("node", "way", "relation")


class OSMCollector:
    """
    Collect elements from OpenStreetMap via Overpass API and convert them

    Supports caching raw responses to disk for debugging and reuse.
    """

    def __init__(self, cache_dir: Optional[str] = None, api_client: Optional[OverpassAPIClient] = None):
        self.config = get_config()
        self.api_client = api_client or OverpassAPIClient()
        self.cache = OSMCache(cache_dir or self.config.cache_dir)
        self.parser = OSMResponseParser()
        self.converter = OSMGeoJsonConverter()
        self.timeout = self.config.api.overpass_timeout

    def fetch_element(self, element_type: str, element_id: int) -> Optional[GeoJSONFeature]:
        """
        Fetch one element with everything it references and convert it

        Args:
            element_type: "node", "way" or "relation"
            element_id: OSM id

        Returns:
            GeoJSONFeature, or None if the element is missing or has no geometry
        """
        if element_type not in ELEMENT_TYPES:
            raise ValueError(f"Unknown element type: {element_type}")

        # Recurse down to all member relations, ways and nodes
        query = f"""
        [out:json][timeout:{self.timeout}];
        {element_type}({element_id});
        (._;>>;);
        out body;
        """
        data = self._query(query)
        elements = self.parser.parse_elements(data)

        element = self.parser.find_element(elements, element_type, element_id)
        if element is None:
            logger.warning(f"{element_type}/{element_id} not found")
            return None

        return self.converter.to_geojson(element)

    def fetch_around(self, lat: float, lon: float, radius_m: float = 150) -> GeoJSONFeatureCollection:
        """
        Fetch tagged elements around a point and convert them

        Relations crossing the search area are usually incomplete in the
        response, so parsing is lenient here.

        Args:
            lat: Center latitude
            lon: Center longitude
            radius_m: Search radius in meters

        Returns:
            GeoJSONFeatureCollection of every convertible element
        """
        logger.info(f"Fetching OSM elements within {radius_m}m of ({lat}, {lon})")

        query = f"""
        [out:json][timeout:{self.timeout}];
        (
            node(around:{radius_m},{lat},{lon})(if:count_tags() > 0);
            way(around:{radius_m},{lat},{lon});
            relation(around:{radius_m},{lat},{lon});
        );
        (._;>;);
        out body;
        """
        data = self._query(query)
        elements = self.parser.parse_elements(data, strict=False)

        # Untagged nodes are way geometry, not features of their own
        return self.converter.convert_all(e for e in elements if e.tags)

    def load_file(self, path: str, strict: bool = True) -> GeoJSONFeatureCollection:
        """Convert a saved Overpass JSON response"""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info(f"Loaded {len(data.get('elements', []))} raw elements from {path}")

        elements = self.parser.parse_elements(data, strict=strict)
        return self.converter.convert_all(e for e in elements if e.tags)

    def _query(self, query: str) -> Dict[str, Any]:
        # Check cache first
        cache_path = self.cache.get_cache_path(query)
        if cache_path:
            cached_data = self.cache.load(cache_path)
            if cached_data:
                return cached_data

        try:
            data = self.api_client.query(query)
        except RuntimeError as e:
            logger.error(f"OSM API query failed after all retries: {e}")
            raise

        if cache_path:
            self.cache.save(cache_path, data)
        return data
