"""
OSM to GeoJSON converter

Turns OpenStreetMap nodes, ways and relations into GeoJSON features
"""

from .converters import OSMGeoJsonConverter
from .models import GeoJSONFeature, GeoJSONFeatureCollection

__version__ = "1.0.0"

__all__ = [
    "OSMGeoJsonConverter",
    "GeoJSONFeature",
    "GeoJSONFeatureCollection",
]
