"""Database and resource clause builders."""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from .. import constants
from ..exceptions import ValidationError
from ..models import DataSourceConfig
from ..properties import escape_literal, render_properties
from ..script import Statement
from .base import BaseClauseBuilder

logger = logging.getLogger(__name__)


class DatabaseClauseBuilder(BaseClauseBuilder):
    """Builds the ``CREATE DATABASE`` and ``USE`` statements."""

    def build(self, database_name: Optional[str]) -> List[Statement]:
        if not database_name:
            raise ValidationError("`databaseName` is required.")
        return [
            Statement(head=constants.CREATE_DATABASE.format(name=database_name)),
            Statement(head=constants.USE_DATABASE.format(name=database_name)),
        ]


class ResourceClauseBuilder(BaseClauseBuilder):
    """Builds one ``ADD RESOURCE`` statement covering every data source."""

    def build(self, data_sources: Dict[str, DataSourceConfig]) -> List[Statement]:
        items = [self.build_resource(name, config) for name, config in data_sources.items()]
        return self._statement(constants.ADD_RESOURCE, items)

    def build_resource(self, name: str, config: DataSourceConfig) -> str:
        """Render one resource definition.

        The ``PASSWORD`` part is left out entirely when no password is set;
        ``PROPERTIES(...)`` is always present, even when empty.
        """
        parts = [constants.RESOURCE_URL.format(url=escape_literal(config.url))]
        if config.username is not None:
            parts.append(constants.RESOURCE_USER.format(username=escape_literal(config.username)))
        if config.password:
            parts.append(constants.RESOURCE_PASSWORD.format(password=escape_literal(config.password)))
        elif config.password is not None:
            logger.debug(f"Omitting empty password of resource '{name}'")
        properties = render_properties(config.pool_properties, config.custom_properties)
        parts.append(constants.RESOURCE_PROPERTIES.format(properties=properties))
        return self._definition(name, parts)
