"""Conversion of a YAML configuration file into a DistSQL result row."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel

from .compiler import CompilerConfig, DistSQLCompiler
from .loader import load_yaml_configuration

logger = logging.getLogger(__name__)


class ConvertResult(BaseModel):
    """Result row of a conversion."""

    file_path: str
    database_name: str
    distsql: str


class YamlConfigurationConverter:
    """Converts one proxy configuration file into a DistSQL script."""

    COLUMN_NAMES = ("distsql",)

    def __init__(self, file_path: Union[str, Path], config: Optional[CompilerConfig] = None):
        self.file_path = Path(file_path)
        self.compiler = DistSQLCompiler(config)

    def get_column_names(self) -> List[str]:
        return list(self.COLUMN_NAMES)

    def convert(self) -> ConvertResult:
        """Load, validate and compile the configuration file."""
        document = load_yaml_configuration(self.file_path)
        distsql = self.compiler.compile(document)
        logger.info(f"Converted {self.file_path.name} ({document.category.value})")
        return ConvertResult(
            file_path=str(self.file_path),
            database_name=document.database_name,
            distsql=distsql,
        )

    def get_rows(self) -> List[List[str]]:
        """Single row holding the generated script, matching ``get_column_names``."""
        return [[self.convert().distsql]]


def convert_yaml_configuration(file_path: Union[str, Path], config: Optional[CompilerConfig] = None) -> str:
    """Convert a configuration file and return the DistSQL script."""
    return YamlConfigurationConverter(file_path, config).convert().distsql
