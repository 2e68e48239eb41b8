"""
OSM element models

Data classes for representing coordinates, nodes, ways and relations
"""

from typing import List, Dict, Optional, Union
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coordinate:
    """A geographic position, compared by exact value"""
    lon: float
    lat: float

    def to_list(self) -> List[float]:
        """Get position as [lon, lat]"""
        return [self.lon, self.lat]


@dataclass(frozen=True)
class OSMNode:
    """Represents an OSM node (point)"""
    id: int
    lon: float
    lat: float
    tags: Dict[str, str] = field(default_factory=dict)

    element_type = "node"

    @property
    def ref(self) -> str:
        return f"{self.element_type}/{self.id}"

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lon, self.lat)


@dataclass(frozen=True)
class OSMWay:
    """Represents an OSM way (line or polygon)"""
    id: int
    nodes: List[OSMNode]
    tags: Dict[str, str] = field(default_factory=dict)

    element_type = "way"

    @property
    def ref(self) -> str:
        return f"{self.element_type}/{self.id}"

    @property
    def coordinates(self) -> List[Coordinate]:
        """Get node coordinates in way order"""
        return [n.coordinate for n in self.nodes]

    @property
    def is_closed(self) -> bool:
        return len(self.nodes) > 1 and self.nodes[0].coordinate == self.nodes[-1].coordinate


@dataclass(frozen=True)
class OSMMember:
    """A relation member: an element plus its optional role"""
    element: "OSMElement"
    role: Optional[str] = None


@dataclass(frozen=True)
class OSMRelation:
    """Represents an OSM relation (collection of members)"""
    id: int
    members: List[OSMMember]
    tags: Dict[str, str] = field(default_factory=dict)

    element_type = "relation"

    @property
    def ref(self) -> str:
        return f"{self.element_type}/{self.id}"


OSMElement = Union[OSMNode, OSMWay, OSMRelation]
