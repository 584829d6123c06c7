"""Data source property synonyms and property rendering."""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from . import constants

logger = logging.getLogger(__name__)

# Connection property names accepted in YAML, mapped to their standard name
CONNECTION_PROPERTY_SYNONYMS: Dict[str, str] = {
    "url": constants.KEY_URL,
    "jdbcUrl": constants.KEY_URL,
    "username": constants.KEY_USERNAME,
    "user": constants.KEY_USERNAME,
    "password": constants.KEY_PASSWORD,
}

# Standard pool properties, in rendering order
STANDARD_POOL_PROPERTY_KEYS: Tuple[str, ...] = (
    "connectionTimeoutMilliseconds",
    "idleTimeoutMilliseconds",
    "maxLifetimeMilliseconds",
    "maxPoolSize",
    "minPoolSize",
    "readOnly",
)

# HikariCP names of the standard pool properties
POOL_PROPERTY_SYNONYMS: Dict[str, str] = {
    "connectionTimeout": "connectionTimeoutMilliseconds",
    "idleTimeout": "idleTimeoutMilliseconds",
    "maxLifetime": "maxLifetimeMilliseconds",
    "maximumPoolSize": "maxPoolSize",
    "minimumIdle": "minPoolSize",
}

CUSTOM_POOL_PROPS_KEY = "customPoolProps"

Property = Tuple[str, Any]


def split_data_source_properties(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Split flat YAML data source keys into connection, pool and custom properties.

    Args:
        raw: Data source mapping as found under ``dataSources`` in a proxy YAML file

    Returns:
        Dictionary with the connection keys (``url``, ``username``, ``password``),
        ``pool_properties`` in standard order and ``custom_properties`` in input order
    """
    connection: Dict[str, Any] = {}
    pool: Dict[str, Any] = {}
    custom: Dict[str, Any] = {}

    for key, value in raw.items():
        if key in CONNECTION_PROPERTY_SYNONYMS:
            connection[CONNECTION_PROPERTY_SYNONYMS[key]] = value
        elif key in STANDARD_POOL_PROPERTY_KEYS:
            pool[key] = value
        elif key in POOL_PROPERTY_SYNONYMS:
            pool[POOL_PROPERTY_SYNONYMS[key]] = value
        elif key == CUSTOM_POOL_PROPS_KEY:
            if value is not None and not isinstance(value, Mapping):
                raise ValueError(f"{CUSTOM_POOL_PROPS_KEY} must be a mapping")
            custom.update(value or {})
        else:
            logger.debug(f"Treating data source key '{key}' as a custom property")
            custom[key] = value

    ordered_pool = {key: pool[key] for key in STANDARD_POOL_PROPERTY_KEYS if key in pool}
    return {**connection, "pool_properties": ordered_pool, "custom_properties": custom}


def merge_properties(
    standard: Optional[Mapping[str, Any]],
    custom: Optional[Mapping[str, Any]] = None,
) -> List[Property]:
    """Merge standard properties and their custom overlay, skipping null values.

    Standard properties always come before custom ones. Keys present in both
    are listed twice; the custom overlay never rewrites a standard entry.
    """
    merged: List[Property] = []
    for properties in (standard, custom):
        if not properties:
            continue
        merged.extend((str(key), value) for key, value in properties.items() if value is not None)
    return merged


def escape_literal(value: Any) -> str:
    """Escape backslashes and double quotes for use inside a double-quoted literal."""
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def format_property_value(value: Any) -> str:
    """Format a property value as a DistSQL literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return f'"{escape_literal(value)}"'


def format_properties(properties: Iterable[Property]) -> str:
    """Render key/value pairs as comma-joined ``"key"=value`` items."""
    return constants.COMMA.join(
        constants.PROPERTY.format(key=escape_literal(key), value=format_property_value(value))
        for key, value in properties
    )


def render_properties(
    standard: Optional[Mapping[str, Any]],
    custom: Optional[Mapping[str, Any]] = None,
) -> str:
    """Merge and render properties in one step."""
    return format_properties(merge_properties(standard, custom))
