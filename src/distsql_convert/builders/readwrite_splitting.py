"""Read-write-splitting rule clause builder."""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from .. import constants
from ..models import AlgorithmConfig, ReadwriteSplittingGroupConfig, ReadwriteSplittingRuleConfig
from ..script import Statement
from .base import BaseClauseBuilder, render_algorithm_type

logger = logging.getLogger(__name__)


def render_load_balancer(load_balancer: Optional[AlgorithmConfig]) -> Optional[str]:
    """Render a group's load balancer, e.g. ``TYPE(NAME=round_robin)``."""
    if load_balancer is None:
        return None
    return render_algorithm_type(load_balancer, lower_case=True)


class ReadwriteSplittingClauseBuilder(BaseClauseBuilder):
    """Builds one ``CREATE READWRITE_SPLITTING RULE`` statement for all groups of all rules."""

    def build(self, rules: Sequence[ReadwriteSplittingRuleConfig]) -> List[Statement]:
        items = []
        for rule in rules:
            for name, group in rule.groups.items():
                if not group.write_data_source_name:
                    logger.warning(f"Skipping read-write-splitting group '{name}' without a static write data source")
                    continue
                items.append(self.build_group(name, group))
        return self._statement(constants.CREATE_READWRITE_SPLITTING_RULE, items)

    def build_group(self, name: str, group: ReadwriteSplittingGroupConfig) -> str:
        parts = [
            constants.WRITE_RESOURCE.format(name=group.write_data_source_name),
            constants.READ_RESOURCES.format(names=constants.COMMA.join(group.read_data_source_names)),
        ]
        load_balancer = render_load_balancer(group.load_balancer)
        if load_balancer:
            parts.append(load_balancer)
        return self._definition(name, parts)
