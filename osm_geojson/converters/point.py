"""
Point conversion

Turns a tagged node into a Point feature
"""

from typing import Optional
from loguru import logger

from ..models import GeoJSONFeature
from .elements import OSMNode
from .feature_emitter import FeatureEmitter


class PointConverter:
    """Converts OSM nodes"""

    def __init__(self):
        self.emitter = FeatureEmitter()

    def convert(self, node: OSMNode) -> Optional[GeoJSONFeature]:
        """
        Convert a node to a Point feature

        Untagged nodes carry no information of their own and are skipped.
        """
        if not node.tags:
            logger.debug(f"Skipping {node.ref}: no tags")
            return None
        return self.emitter.emit(self.emitter.point(node.coordinate), node.tags, node.ref)
