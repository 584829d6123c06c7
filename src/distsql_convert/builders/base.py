"""Base class for clause builders."""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, List

from .. import constants
from ..models import AlgorithmConfig
from ..properties import render_properties
from ..script import Statement

logger = logging.getLogger(__name__)


class BaseClauseBuilder(ABC):
    """Turns one configuration object into DistSQL statements."""

    @abstractmethod
    def build(self, config: Any) -> List[Statement]:
        """Build the statements for a configuration object.

        Returns an empty list when there is nothing to declare, so callers
        never emit a statement head without items.
        """
        pass

    def _statement(self, head: str, items: List[str]) -> List[Statement]:
        if not items:
            logger.debug(f"Skipping '{head.strip()}' statement without items")
            return []
        return [Statement(head=head, items=items)]

    @staticmethod
    def _definition(name: str, parts: List[str]) -> str:
        """Wrap definition parts as `` name (\\npart,\\npart\\n)``."""
        body = constants.PART_SEPARATOR.join(part for part in parts if part)
        header = constants.DEFINITION_HEADER.format(name=name)
        return f"{header}{constants.LINE_SEPARATOR}{body}{constants.LINE_SEPARATOR}{constants.DEFINITION_FOOTER}"


def render_algorithm_type(algorithm: AlgorithmConfig, lower_case: bool = False) -> str:
    """Render ``TYPE(NAME=...)``, adding ``PROPERTIES(...)`` only when props exist."""
    algorithm_type = algorithm.type.lower() if lower_case else algorithm.type
    properties = render_properties(algorithm.props)
    if not properties:
        return constants.TYPE.format(type=algorithm_type)
    return constants.TYPE_PROPERTIES.format(type=algorithm_type, properties=properties)
