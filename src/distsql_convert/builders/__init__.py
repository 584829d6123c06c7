"""Clause builders, one per kind of DistSQL statement."""

from .base import BaseClauseBuilder, render_algorithm_type
from .resource import DatabaseClauseBuilder, ResourceClauseBuilder
from .sharding import (
    BindingTableClauseBuilder,
    KeyGeneratorClauseBuilder,
    ShardingAlgorithmClauseBuilder,
    ShardingTableClauseBuilder,
)
from .strategy import ShardingStrategyRenderer
from .readwrite_splitting import ReadwriteSplittingClauseBuilder, render_load_balancer

__all__ = [
    "BaseClauseBuilder",
    "render_algorithm_type",
    "DatabaseClauseBuilder",
    "ResourceClauseBuilder",
    "ShardingAlgorithmClauseBuilder",
    "KeyGeneratorClauseBuilder",
    "ShardingTableClauseBuilder",
    "BindingTableClauseBuilder",
    "ShardingStrategyRenderer",
    "ReadwriteSplittingClauseBuilder",
    "render_load_balancer",
]
