"""Compiles configuration documents into DistSQL scripts."""

from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from . import constants
from .builders import (
    BindingTableClauseBuilder,
    DatabaseClauseBuilder,
    KeyGeneratorClauseBuilder,
    ReadwriteSplittingClauseBuilder,
    ResourceClauseBuilder,
    ShardingAlgorithmClauseBuilder,
    ShardingTableClauseBuilder,
)
from .exceptions import ValidationError
from .models import (
    ConfigurationCategory,
    ConfigurationDocument,
    ReadwriteSplittingRuleConfig,
    ShardingRuleConfig,
)
from .script import ScriptAssembler

logger = logging.getLogger(__name__)


class CompilerConfig(BaseModel):
    """Output settings of the compiler."""

    line_separator: str = Field(
        default=constants.LINE_SEPARATOR, description="Line break placed after every statement")

    @field_validator("line_separator")
    @classmethod
    def validate_line_separator(cls, v: str) -> str:
        """Only LF and CRLF line breaks are supported."""
        if v not in ("\n", "\r\n"):
            raise ValueError("line_separator must be LF or CRLF")
        return v


class DistSQLCompiler:
    """Selects the clause builders for a document's category and assembles the script.

    The compiler holds no per-call state, so one instance may be shared.
    """

    def __init__(self, config: Optional[CompilerConfig] = None):
        self.config = config or CompilerConfig()
        self.database_builder = DatabaseClauseBuilder()
        self.resource_builder = ResourceClauseBuilder()
        self.sharding_algorithm_builder = ShardingAlgorithmClauseBuilder()
        self.key_generator_builder = KeyGeneratorClauseBuilder()
        self.sharding_table_builder = ShardingTableClauseBuilder()
        self.binding_table_builder = BindingTableClauseBuilder()
        self.readwrite_splitting_builder = ReadwriteSplittingClauseBuilder()

    def compile(self, document: ConfigurationDocument) -> str:
        """Compile a document into a DistSQL script.

        Args:
            document: Validated configuration document

        Returns:
            Newline-separated statements, each terminated by ``;``. Empty for
            documents of an unsupported category.

        Raises:
            ValidationError: If the document has no database name
        """
        if not document.database_name:
            raise ValidationError("`databaseName` is required.")

        script = ScriptAssembler(self.config.line_separator)
        category = document.category
        if category is ConfigurationCategory.RESOURCES:
            self._add_resources(document, script)
        elif category is ConfigurationCategory.SHARDING:
            self._add_resources(document, script)
            self._add_sharding_rules(document, script)
        elif category is ConfigurationCategory.READWRITE_SPLITTING:
            self._add_resources(document, script)
            self._add_readwrite_splitting_rules(document, script)
        else:
            logger.info(
                f"Configuration '{document.database_name}' has no supported category, "
                "generating an empty script")
            return ""

        logger.debug(f"Generated {len(script)} statements for '{document.database_name}'")
        return script.build()

    def _add_resources(self, document: ConfigurationDocument, script: ScriptAssembler) -> None:
        script.extend(self.database_builder.build(document.database_name))
        script.extend(self.resource_builder.build(document.data_sources))

    def _add_sharding_rules(self, document: ConfigurationDocument, script: ScriptAssembler) -> None:
        self._log_mismatched_rules(document, ShardingRuleConfig)
        for rule in document.rules_of(ShardingRuleConfig):
            # Algorithms come first; tables only reference names declared above them
            script.extend(self.sharding_algorithm_builder.build(rule))
            script.extend(self.key_generator_builder.build(rule))
            script.extend(self.sharding_table_builder.build(rule))
            script.extend(self.binding_table_builder.build(rule))

    def _add_readwrite_splitting_rules(self, document: ConfigurationDocument, script: ScriptAssembler) -> None:
        self._log_mismatched_rules(document, ReadwriteSplittingRuleConfig)
        script.extend(self.readwrite_splitting_builder.build(document.rules_of(ReadwriteSplittingRuleConfig)))

    @staticmethod
    def _log_mismatched_rules(document: ConfigurationDocument, rule_class: type) -> None:
        skipped = len(document.rules) - len(document.rules_of(rule_class))
        if skipped:
            logger.info(f"Skipping {skipped} rule(s) that do not belong to category '{document.category.value}'")


def to_document(document: Union[ConfigurationDocument, Mapping[str, Any]]) -> ConfigurationDocument:
    """Validate a raw mapping into a document, reporting failures as ``ValidationError``."""
    if isinstance(document, ConfigurationDocument):
        return document
    try:
        return ConfigurationDocument.model_validate(document)
    except PydanticValidationError as e:
        raise ValidationError("Invalid configuration, reason is: %s", e) from e


def compile_document(
    document: Union[ConfigurationDocument, Mapping[str, Any]],
    config: Optional[CompilerConfig] = None,
) -> str:
    """Compile a document or a raw configuration mapping into a DistSQL script."""
    return DistSQLCompiler(config).compile(to_document(document))
