"""
Configuration settings for the OSM to GeoJSON converter
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ConversionConfig:
    """Rules used by the element converters"""
    # Relation "type" tag values that make a relation area-like
    area_relation_types: List[str] = field(default_factory=lambda: [
        "multipolygon",
        "boundary",
    ])
    # Tag keys whose presence makes a relation area-like
    area_keys: List[str] = field(default_factory=lambda: [
        "boundary",
    ])

    # Member roles
    outer_role: str = "outer"
    inner_role: str = "inner"

    # Raise on relations that contain themselves
    detect_cycles: bool = True


@dataclass
class APIConfig:
    """API endpoints and configuration"""
    # Overpass API (OSM)
    # Options: overpass-api.de (main), lz4.overpass-api.de, z.overpass-api.de
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    overpass_timeout: int = 90

    # Request settings
    request_timeout: int = 30
    max_retries: int = 3
    retry_delay: float = 5.0
    min_request_interval: float = 2.0

    # User agent for API requests
    user_agent: str = "OSMGeoJSON/1.0"


@dataclass
class AppConfig:
    """Application configuration"""
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    api: APIConfig = field(default_factory=APIConfig)

    cache_dir: Optional[str] = None


# Global config instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get global configuration"""
    return config


def validate_config(config: AppConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []

    conversion = config.conversion
    if conversion is None:
        errors.append("conversion configuration is required but not set")
    else:
        if not conversion.area_relation_types and not conversion.area_keys:
            errors.append("at least one of conversion.area_relation_types or conversion.area_keys must be set")
        if not conversion.outer_role:
            errors.append("conversion.outer_role is required but not set")
        if not conversion.inner_role:
            errors.append("conversion.inner_role is required but not set")
        if conversion.outer_role and conversion.outer_role == conversion.inner_role:
            errors.append(f"conversion.outer_role and conversion.inner_role must differ, both are '{conversion.outer_role}'")

    api = config.api
    if api is None:
        errors.append("api configuration is required but not set")
    else:
        if not api.overpass_url:
            errors.append("api.overpass_url is required but not set")
        if api.overpass_timeout <= 0:
            errors.append(f"api.overpass_timeout must be positive, got {api.overpass_timeout}")
        if api.request_timeout <= 0:
            errors.append(f"api.request_timeout must be positive, got {api.request_timeout}")
        if api.max_retries < 1:
            errors.append(f"api.max_retries must be at least 1, got {api.max_retries}")
        if api.retry_delay < 0:
            errors.append(f"api.retry_delay must not be negative, got {api.retry_delay}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
