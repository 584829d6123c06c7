"""Configuration models read by the DistSQL compiler.

Models accept the camelCase keys of the proxy YAML format as well as their
snake_case field names. Every mapping is a plain ``dict``; its insertion
order is the order statements are generated in.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from . import constants
from .properties import split_data_source_properties

logger = logging.getLogger(__name__)


class ConfigModel(BaseModel):
    """Base for all configuration models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ConfigurationCategory(str, Enum):
    """Top-level shape of a configuration document."""

    RESOURCES = constants.RESOURCE_DB
    SHARDING = constants.SHARDING_DB
    READWRITE_SPLITTING = constants.READWRITE_SPLITTING_DB
    UNSUPPORTED = "unsupported"

    @classmethod
    def _missing_(cls, value: object) -> "ConfigurationCategory":
        if isinstance(value, str):
            normalized = value.strip().lower()
            aliases = {
                "resources": cls.RESOURCES,
                "resource": cls.RESOURCES,
                "sharding": cls.SHARDING,
                "readwrite_splitting": cls.READWRITE_SPLITTING,
                "readwrite-splitting": cls.READWRITE_SPLITTING,
            }
            for member in cls:
                if member.value == normalized:
                    return member
            if normalized in aliases:
                return aliases[normalized]
        return cls.UNSUPPORTED


class AlgorithmConfig(ConfigModel):
    """Type and properties of a sharding algorithm, key generator or load balancer."""

    type: str = Field(..., min_length=1, description="Algorithm type, e.g. MOD or ROUND_ROBIN")
    props: Dict[str, Any] = Field(default_factory=dict, description="Algorithm properties")

    @field_validator("props", mode="before")
    @classmethod
    def validate_props(cls, v: Any) -> Any:
        """Treat an empty ``props:`` entry as no properties."""
        return {} if v is None else v


class DataSourceConfig(ConfigModel):
    """Connection and pool settings of one data source."""

    url: str = Field(..., min_length=1, description="JDBC URL of the data source")
    username: Optional[str] = Field(None, description="Connection user")
    password: Optional[str] = Field(None, description="Connection password")
    pool_properties: Dict[str, Any] = Field(
        default_factory=dict, description="Standard pool properties")
    custom_properties: Dict[str, Any] = Field(
        default_factory=dict, description="Custom pool properties")

    @model_validator(mode="before")
    @classmethod
    def split_flat_properties(cls, data: Any) -> Any:
        """Accept the flat YAML layout with pool keys next to the connection keys."""
        if not isinstance(data, Mapping):
            return data
        structured = {"pool_properties", "poolProperties", "custom_properties", "customProperties"}
        if structured & set(data):
            return data
        return split_data_source_properties(data)

    @field_validator("username", "password", mode="before")
    @classmethod
    def validate_credentials(cls, v: Any) -> Any:
        """Credentials are strings; numbers written unquoted in YAML are converted."""
        if v is None or isinstance(v, str):
            return v
        return str(v)


def _flatten_variant(data: Any) -> Any:
    """Turn ``{standard: {...}}`` into ``{type: standard, ...}``."""
    if not isinstance(data, Mapping) or "type" in data or len(data) != 1:
        return data
    (variant, body), = data.items()
    if body is not None and not isinstance(body, Mapping):
        return data
    return {"type": variant, **(body or {})}


class StandardShardingStrategy(ConfigModel):
    """Single sharding column routed through one algorithm."""

    type: str = constants.STANDARD
    sharding_column: str = Field(..., min_length=1)
    sharding_algorithm_name: str = Field(..., min_length=1)


class ComplexShardingStrategy(ConfigModel):
    """Several sharding columns routed through one algorithm."""

    type: str = constants.COMPLEX
    sharding_columns: str = Field(..., min_length=1, description="Comma-separated columns")
    sharding_algorithm_name: str = Field(..., min_length=1)

    @field_validator("sharding_columns", mode="before")
    @classmethod
    def join_columns(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return constants.COMMA.join(str(column) for column in v)
        return v


class HintShardingStrategy(ConfigModel):
    """Sharding driven by hints instead of columns."""

    type: str = constants.HINT
    sharding_algorithm_name: str = Field(..., min_length=1)


class UnsupportedShardingStrategy(ConfigModel):
    """Any strategy type the compiler does not render, e.g. ``none``."""

    type: str
    sharding_algorithm_name: Optional[str] = None


ShardingStrategy = Union[
    StandardShardingStrategy,
    ComplexShardingStrategy,
    HintShardingStrategy,
    UnsupportedShardingStrategy,
]

_STRATEGY_VARIANTS = {
    constants.STANDARD: StandardShardingStrategy,
    constants.COMPLEX: ComplexShardingStrategy,
    constants.HINT: HintShardingStrategy,
}


def parse_sharding_strategy(data: Any) -> Any:
    """Build the strategy variant matching the declared type (case-insensitive)."""
    if data is None or isinstance(data, BaseModel):
        return data
    flat = _flatten_variant(data)
    if not isinstance(flat, Mapping) or "type" not in flat:
        return flat
    strategy_type = str(flat["type"]).lower()
    variant = _STRATEGY_VARIANTS.get(strategy_type, UnsupportedShardingStrategy)
    return variant.model_validate({**flat, "type": strategy_type})


class KeyGenerateStrategyConfig(ConfigModel):
    """Column filled by a key generator."""

    column: str = Field(..., min_length=1)
    key_generator_name: str = Field(..., min_length=1)


class ShardingTableRuleConfig(ConfigModel):
    """Sharding rule of one logic table."""

    logic_table: str = Field(..., min_length=1)
    actual_data_nodes: Optional[str] = None
    database_strategy: Optional[ShardingStrategy] = None
    table_strategy: Optional[ShardingStrategy] = None
    key_generate_strategy: Optional[KeyGenerateStrategyConfig] = None

    @field_validator("database_strategy", "table_strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v: Any) -> Any:
        return parse_sharding_strategy(v)


class ShardingRuleConfig(ConfigModel):
    """Sharding rule: algorithms, key generators, tables and binding groups."""

    rule_type: Literal["sharding"] = Field("sharding", alias="rule_type")
    sharding_algorithms: Dict[str, AlgorithmConfig] = Field(default_factory=dict)
    key_generators: Dict[str, AlgorithmConfig] = Field(default_factory=dict)
    tables: List[ShardingTableRuleConfig] = Field(default_factory=list)
    binding_tables: List[str] = Field(default_factory=list)

    @field_validator("sharding_algorithms", "key_generators", mode="before")
    @classmethod
    def validate_algorithms(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("tables", mode="before")
    @classmethod
    def validate_tables(cls, v: Any) -> Any:
        """Accept tables keyed by logic table name, as in YAML files."""
        if v is None:
            return []
        if isinstance(v, Mapping):
            tables = []
            for logic_table, table in v.items():
                if table is not None and not isinstance(table, Mapping):
                    raise ValueError(f"table '{logic_table}' must be a mapping")
                table = dict(table or {})
                if "logicTable" not in table and "logic_table" not in table:
                    table["logicTable"] = logic_table
                tables.append(table)
            return tables
        if not isinstance(v, (list, tuple)):
            raise ValueError("tables must be a mapping or a list")
        return v

    @field_validator("binding_tables", mode="before")
    @classmethod
    def validate_binding_tables(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            raise ValueError("bindingTables must be a list")
        return [
            constants.COMMA.join(str(table) for table in group) if isinstance(group, (list, tuple)) else group
            for group in v
        ]


class ReadwriteSplittingGroupConfig(ConfigModel):
    """One read-write-splitting data source group."""

    write_data_source_name: Optional[str] = None
    read_data_source_names: List[str] = Field(default_factory=list)
    load_balancer_name: Optional[str] = None
    load_balancer: Optional[AlgorithmConfig] = None

    @model_validator(mode="before")
    @classmethod
    def flatten_static_strategy(cls, data: Any) -> Any:
        """Lift ``staticStrategy`` settings onto the group."""
        if not isinstance(data, Mapping):
            return data
        static = data.get("staticStrategy") or data.get("static_strategy")
        if not static:
            return data
        if not isinstance(static, Mapping):
            raise ValueError("staticStrategy must be a mapping")
        flat = {key: value for key, value in data.items() if key not in ("staticStrategy", "static_strategy")}
        flat.update(static)
        return flat

    @field_validator("read_data_source_names", mode="before")
    @classmethod
    def validate_read_names(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [name.strip() for name in v.split(constants.COMMA) if name.strip()]
        return v


class ReadwriteSplittingRuleConfig(ConfigModel):
    """Read-write-splitting rule; each group owns its resolved load balancer."""

    rule_type: Literal["readwrite_splitting"] = Field("readwrite_splitting", alias="rule_type")
    groups: Dict[str, ReadwriteSplittingGroupConfig] = Field(
        default_factory=dict, alias="dataSources")
    load_balancers: Dict[str, AlgorithmConfig] = Field(default_factory=dict)

    @field_validator("groups", "load_balancers", mode="before")
    @classmethod
    def validate_maps(cls, v: Any) -> Any:
        return {} if v is None else v

    @model_validator(mode="after")
    def resolve_load_balancers(self) -> "ReadwriteSplittingRuleConfig":
        """Attach to every group the load balancer it references by name."""
        for group_name, group in self.groups.items():
            if group.load_balancer is not None or not group.load_balancer_name:
                continue
            balancer = self.load_balancers.get(group.load_balancer_name)
            if balancer is None:
                raise ValueError(
                    f"load balancer '{group.load_balancer_name}' referenced by group "
                    f"'{group_name}' is not declared")
            self.groups[group_name] = group.model_copy(update={"load_balancer": balancer})
        return self


RuleConfig = Annotated[
    Union[ShardingRuleConfig, ReadwriteSplittingRuleConfig],
    Field(discriminator="rule_type"),
]

_READWRITE_SPLITTING_KEYS = {"dataSources", "groups", "loadBalancers", "load_balancers"}


def infer_rule_type(data: Any) -> Any:
    """Tag an untagged rule mapping with its rule type."""
    if not isinstance(data, Mapping) or "rule_type" in data:
        return data
    if "ruleType" in data:
        tagged = {key: value for key, value in data.items() if key != "ruleType"}
        return {**tagged, "rule_type": data["ruleType"]}
    rule_type = "readwrite_splitting" if _READWRITE_SPLITTING_KEYS & set(data) else "sharding"
    logger.debug(f"Inferred rule type '{rule_type}' for untagged rule")
    return {**data, "rule_type": rule_type}


class ConfigurationDocument(ConfigModel):
    """A proxy database configuration: data sources and rules."""

    category: ConfigurationCategory = ConfigurationCategory.UNSUPPORTED
    database_name: Optional[str] = None
    data_sources: Dict[str, DataSourceConfig] = Field(default_factory=dict)
    rules: List[RuleConfig] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def derive_category(cls, data: Any) -> Any:
        """Fall back to the database name when no category is declared."""
        if not isinstance(data, Mapping) or data.get("category") is not None:
            return data
        database_name = data.get("databaseName", data.get("database_name"))
        return {**data, "category": database_name}

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v: Any) -> Any:
        if v is None:
            return ConfigurationCategory.UNSUPPORTED
        if isinstance(v, ConfigurationCategory):
            return v
        return ConfigurationCategory(v)

    @field_validator("data_sources", mode="before")
    @classmethod
    def validate_data_sources(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("rules", mode="before")
    @classmethod
    def validate_rules(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            raise ValueError("rules must be a list")
        return [infer_rule_type(rule) for rule in v]

    def rules_of(self, rule_class: type) -> List[Any]:
        """Rules of one variant, in declaration order."""
        return [rule for rule in self.rules if isinstance(rule, rule_class)]
