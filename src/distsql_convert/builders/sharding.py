"""Sharding rule clause builders."""

from __future__ import annotations
import logging
from typing import List, Optional

from .. import constants
from ..models import ShardingRuleConfig, ShardingTableRuleConfig
from ..properties import escape_literal
from ..script import Statement
from .base import BaseClauseBuilder, render_algorithm_type
from .strategy import ShardingStrategyRenderer

logger = logging.getLogger(__name__)


class ShardingAlgorithmClauseBuilder(BaseClauseBuilder):
    """Builds ``CREATE SHARDING ALGORITHM``; algorithm types are lower-cased."""

    def build(self, rule: ShardingRuleConfig) -> List[Statement]:
        items = [
            self._definition(name, [render_algorithm_type(algorithm, lower_case=True)])
            for name, algorithm in rule.sharding_algorithms.items()
        ]
        return self._statement(constants.CREATE_SHARDING_ALGORITHM, items)


class KeyGeneratorClauseBuilder(BaseClauseBuilder):
    """Builds ``CREATE SHARDING KEY GENERATOR``; generator types keep their case."""

    def build(self, rule: ShardingRuleConfig) -> List[Statement]:
        items = [
            self._definition(name, [render_algorithm_type(generator)])
            for name, generator in rule.key_generators.items()
        ]
        return self._statement(constants.CREATE_KEY_GENERATOR, items)


class ShardingTableClauseBuilder(BaseClauseBuilder):
    """Builds ``CREATE SHARDING TABLE RULE`` for every table of a rule."""

    def __init__(self, strategy_renderer: Optional[ShardingStrategyRenderer] = None):
        self.strategy_renderer = strategy_renderer or ShardingStrategyRenderer()

    def build(self, rule: ShardingRuleConfig) -> List[Statement]:
        items = [item for item in (self.build_table(table) for table in rule.tables) if item]
        return self._statement(constants.CREATE_SHARDING_TABLE, items)

    def build_table(self, table: ShardingTableRuleConfig) -> Optional[str]:
        """Render one table rule, or None when it has nothing to render."""
        parts = []
        if table.actual_data_nodes:
            parts.append(constants.DATA_NODES.format(data_nodes=escape_literal(table.actual_data_nodes)))
        parts.extend(self.strategy_renderer.render_parts(table))
        if not parts:
            logger.warning(f"Skipping sharding table '{table.logic_table}' without data nodes or strategies")
            return None
        return self._definition(table.logic_table, parts)


class BindingTableClauseBuilder(BaseClauseBuilder):
    """Builds ``CREATE SHARDING BINDING TABLE RULES``."""

    def build(self, rule: ShardingRuleConfig) -> List[Statement]:
        items = [constants.BINDING.format(tables=group) for group in rule.binding_tables]
        return self._statement(constants.CREATE_SHARDING_BINDING_TABLE_RULES, items)
