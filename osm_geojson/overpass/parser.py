"""
Overpass response parser

Parses Overpass API JSON responses into fully resolved OSMNode, OSMWay
and OSMRelation objects
"""

from typing import Any, Dict, List, Optional, Set, Tuple
from loguru import logger

from ..converters.elements import OSMElement, OSMMember, OSMNode, OSMRelation, OSMWay
from ..converters.exceptions import CyclicRelationError, MissingElementError

ElementKey = Tuple[str, int]


class OSMResponseParser:
    """Parses Overpass API responses"""

    @staticmethod
    def parse_elements(data: Dict[str, Any], strict: bool = True) -> List[OSMElement]:
        """
        Parse Overpass response into resolved elements

        Handles both 'out body' (node references) and 'out geom' (inline
        geometry) formats. Ways get their node objects and relations their
        member elements, so each result can be converted on its own.

        Args:
            data: JSON response from Overpass API
            strict: Raise on references to elements missing from the
                response instead of skipping them

        Returns:
            List of elements in document order

        Raises:
            MissingElementError: Dangling reference in strict mode
            CyclicRelationError: A relation references itself
        """
        raw = {}
        order = []
        for element in data.get("elements", []):
            if element.get("type") not in ("node", "way", "relation"):
                continue
            key = (element["type"], element["id"])
            raw[key] = element
            order.append(key)

        resolver = _ElementResolver(raw, strict)
        elements = [resolver.resolve(key) for key in order]
        logger.debug(f"Parsed {len(elements)} elements")
        return elements

    @staticmethod
    def find_element(elements: List[OSMElement], element_type: str, element_id: int) -> Optional[OSMElement]:
        """Find an element by type and id"""
        for element in elements:
            if element.element_type == element_type and element.id == element_id:
                return element
        return None


class _ElementResolver:
    """Builds element objects from raw Overpass dicts, memoized by key"""

    def __init__(self, raw: Dict[ElementKey, Dict[str, Any]], strict: bool):
        self.raw = raw
        self.strict = strict
        self._resolved: Dict[ElementKey, OSMElement] = {}
        self._resolving: List[ElementKey] = []
        self._resolving_set: Set[ElementKey] = set()

    def resolve(self, key: ElementKey) -> OSMElement:
        if key in self._resolved:
            return self._resolved[key]

        element = self.raw[key]
        if key[0] == "node":
            result = self._node(element)
        elif key[0] == "way":
            result = self._way(element)
        else:
            result = self._relation(key, element)

        self._resolved[key] = result
        return result

    def _node(self, element: Dict[str, Any]) -> OSMNode:
        return OSMNode(
            id=element["id"],
            lon=element["lon"],
            lat=element["lat"],
            tags=element.get("tags", {})
        )

    def _way(self, element: Dict[str, Any]) -> OSMWay:
        ref = f"way/{element['id']}"
        node_ids = element.get("nodes", [])

        nodes = []
        missing = [node_id for node_id in node_ids if ("node", node_id) not in self.raw]
        if "geometry" in element and (missing or not node_ids):
            # 'out geom' provides geometry as a list of {lat, lon} objects
            nodes = _inline_nodes(element["geometry"], node_ids)
        else:
            for node_id in node_ids:
                key = ("node", node_id)
                if key in self.raw:
                    nodes.append(self.resolve(key))
                elif self.strict:
                    raise MissingElementError(f"node/{node_id}", ref)
                else:
                    logger.warning(f"{ref}: skipping missing node/{node_id}")

        return OSMWay(id=element["id"], nodes=nodes, tags=element.get("tags", {}))

    def _relation(self, key: ElementKey, element: Dict[str, Any]) -> OSMRelation:
        ref = f"relation/{element['id']}"
        if key in self._resolving_set:
            path = [f"{t}/{i}" for t, i in self._resolving] + [ref]
            raise CyclicRelationError(path[path.index(ref):])

        self._resolving.append(key)
        self._resolving_set.add(key)
        try:
            members = []
            for raw_member in element.get("members", []):
                member = self._member(raw_member, ref)
                if member is not None:
                    members.append(member)
        finally:
            self._resolving.pop()
            self._resolving_set.discard(key)

        return OSMRelation(id=element["id"], members=members, tags=element.get("tags", {}))

    def _member(self, raw_member: Dict[str, Any], referenced_by: str) -> Optional[OSMMember]:
        member_type = raw_member.get("type")
        member_id = raw_member.get("ref")
        role = raw_member.get("role") or None
        key = (member_type, member_id)

        if key in self.raw:
            return OSMMember(self.resolve(key), role)

        # 'out geom' members carry their own geometry
        if member_type == "node" and "lat" in raw_member and "lon" in raw_member:
            return OSMMember(OSMNode(id=member_id, lon=raw_member["lon"], lat=raw_member["lat"]), role)
        if member_type == "way" and "geometry" in raw_member:
            nodes = _inline_nodes(raw_member["geometry"], raw_member.get("nodes", []))
            return OSMMember(OSMWay(id=member_id, nodes=nodes), role)

        if self.strict:
            raise MissingElementError(f"{member_type}/{member_id}", referenced_by)
        logger.warning(f"{referenced_by}: skipping missing member {member_type}/{member_id}")
        return None


def _inline_nodes(geometry: List[Any], node_ids: List[int]) -> List[OSMNode]:
    """Build untagged nodes from an inline geometry list"""
    if len(node_ids) != len(geometry):
        node_ids = [0] * len(geometry)

    nodes = []
    for node_id, position in zip(node_ids, geometry):
        if isinstance(position, dict):
            # Format: {"lat": ..., "lon": ...}
            nodes.append(OSMNode(id=node_id, lon=position["lon"], lat=position["lat"]))
        elif isinstance(position, list) and len(position) >= 2:
            # Format: [lon, lat]
            nodes.append(OSMNode(id=node_id, lon=position[0], lat=position[1]))
    return nodes
