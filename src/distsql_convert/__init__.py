"""DistSQL Convert

Compiles proxy YAML configuration (data sources, sharding and
read-write-splitting rules) into DistSQL statements.
"""

from .compiler import CompilerConfig, DistSQLCompiler, compile_document
from .models import (
    AlgorithmConfig,
    ComplexShardingStrategy,
    ConfigurationCategory,
    ConfigurationDocument,
    DataSourceConfig,
    HintShardingStrategy,
    KeyGenerateStrategyConfig,
    ReadwriteSplittingGroupConfig,
    ReadwriteSplittingRuleConfig,
    ShardingRuleConfig,
    ShardingTableRuleConfig,
    StandardShardingStrategy,
    UnsupportedShardingStrategy,
)
from .exceptions import DistSQLConvertError, FileIOError, SingleTableNotFoundError, ValidationError
from .loader import load_configuration, load_yaml_configuration
from .converter import ConvertResult, YamlConfigurationConverter, convert_yaml_configuration

__all__ = [
    # Compiler
    "DistSQLCompiler",
    "CompilerConfig",
    "compile_document",

    # Loading and conversion
    "load_configuration",
    "load_yaml_configuration",
    "YamlConfigurationConverter",
    "ConvertResult",
    "convert_yaml_configuration",

    # Data models
    "ConfigurationCategory",
    "ConfigurationDocument",
    "DataSourceConfig",
    "AlgorithmConfig",
    "ShardingRuleConfig",
    "ShardingTableRuleConfig",
    "StandardShardingStrategy",
    "ComplexShardingStrategy",
    "HintShardingStrategy",
    "UnsupportedShardingStrategy",
    "KeyGenerateStrategyConfig",
    "ReadwriteSplittingRuleConfig",
    "ReadwriteSplittingGroupConfig",

    # Errors
    "DistSQLConvertError",
    "ValidationError",
    "FileIOError",
    "SingleTableNotFoundError",
]

__version__ = "0.1.0"
