"""Rendering of table sharding and key generation strategies."""

from __future__ import annotations
import logging
from typing import List, Optional

from .. import constants
from ..models import (
    ComplexShardingStrategy,
    HintShardingStrategy,
    KeyGenerateStrategyConfig,
    ShardingStrategy,
    ShardingTableRuleConfig,
    StandardShardingStrategy,
)

logger = logging.getLogger(__name__)


class ShardingStrategyRenderer:
    """Renders the strategy parts of a sharding table rule."""

    def render(self, table: ShardingTableRuleConfig) -> str:
        """Render all present strategy parts joined by ``,\\n``.

        Returns an empty string when the table declares no renderable strategy.
        """
        return constants.PART_SEPARATOR.join(self.render_parts(table))

    def render_parts(self, table: ShardingTableRuleConfig) -> List[str]:
        """Database strategy, table strategy and key generation strategy, when present."""
        parts = [
            self.render_strategy(table.database_strategy, constants.DATABASE_STRATEGY),
            self.render_strategy(table.table_strategy, constants.TABLE_STRATEGY),
            self.render_key_generate_strategy(table.key_generate_strategy),
        ]
        return [part for part in parts if part]

    def render_strategy(self, strategy: Optional[ShardingStrategy], kind: str) -> Optional[str]:
        if strategy is None:
            return None
        strategy_type = strategy.type.lower()
        if isinstance(strategy, StandardShardingStrategy):
            return constants.SHARDING_STRATEGY_STANDARD.format(
                kind=kind,
                type=strategy_type,
                column=strategy.sharding_column,
                algorithm=strategy.sharding_algorithm_name,
            )
        elif isinstance(strategy, ComplexShardingStrategy):
            return constants.SHARDING_STRATEGY_COMPLEX.format(
                kind=kind,
                type=strategy_type,
                columns=strategy.sharding_columns,
                algorithm=strategy.sharding_algorithm_name,
            )
        elif isinstance(strategy, HintShardingStrategy):
            return constants.SHARDING_STRATEGY_HINT.format(
                kind=kind,
                type=strategy_type,
                algorithm=strategy.sharding_algorithm_name,
            )
        else:
            logger.debug(f"Omitting {kind} with unsupported type '{strategy.type}'")
            return None

    def render_key_generate_strategy(self, strategy: Optional[KeyGenerateStrategyConfig]) -> Optional[str]:
        if strategy is None:
            return None
        return constants.KEY_GENERATE_STRATEGY.format(
            column=strategy.column, generator=strategy.key_generator_name)
