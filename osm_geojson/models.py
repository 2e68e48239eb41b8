"""
Pydantic models for GeoJSON output
Geometry, Feature and FeatureCollection as produced by the converters
"""

from typing import Annotated, List, Optional, Dict, Literal, Union
from pydantic import BaseModel, Field


# ============================================================
# GeoJSON Geometry Types
# ============================================================

class GeoJSONPoint(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: List[float]  # [longitude, latitude]


class GeoJSONLineString(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[List[float]]  # [[lon, lat], ...]


class GeoJSONPolygon(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[List[float]]]  # [shell, hole, ...]


class GeoJSONMultiPoint(BaseModel):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: List[List[float]]


class GeoJSONMultiLineString(BaseModel):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: List[List[List[float]]]


class GeoJSONMultiPolygon(BaseModel):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: List[List[List[List[float]]]]


Geometry = Annotated[
    Union[
        GeoJSONPoint,
        GeoJSONLineString,
        GeoJSONPolygon,
        GeoJSONMultiPoint,
        GeoJSONMultiLineString,
        GeoJSONMultiPolygon,
    ],
    Field(discriminator="type"),
]


# ============================================================
# Features
# ============================================================

class GeoJSONFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    id: Optional[str] = None  # "node/1", "way/2", "relation/3"
    geometry: Geometry
    properties: Dict[str, str] = Field(default_factory=dict)


class GeoJSONFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[GeoJSONFeature] = Field(default_factory=list)
