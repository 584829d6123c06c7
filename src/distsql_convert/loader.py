"""Loading of proxy YAML configuration files."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .compiler import to_document
from .exceptions import FileIOError, ValidationError
from .models import ConfigurationDocument

logger = logging.getLogger(__name__)

# YAML rule tags and the rule types they stand for
RULE_TAGS: Dict[str, str] = {
    "!SHARDING": "sharding",
    "!READWRITE_SPLITTING": "readwrite_splitting",
}

_UNSUPPORTED_RULE = object()


class ConfigurationLoader(yaml.SafeLoader):
    """Safe YAML loader that understands rule tags such as ``!SHARDING``."""


def _construct_rule(loader: ConfigurationLoader, tag_suffix: str, node: yaml.Node) -> Any:
    tag = f"!{tag_suffix}"
    if not isinstance(node, yaml.MappingNode):
        raise yaml.constructor.ConstructorError(
            None, None, f"rule tag {tag} must annotate a mapping", node.start_mark)
    rule = loader.construct_mapping(node, deep=True)
    rule_type = RULE_TAGS.get(tag.upper())
    if rule_type is None:
        logger.warning(f"Ignoring unsupported rule {tag}")
        return _UNSUPPORTED_RULE
    return {**rule, "rule_type": rule_type}


ConfigurationLoader.add_multi_constructor("!", _construct_rule)


def _without_unsupported_rules(data: Any) -> Any:
    if isinstance(data, dict) and isinstance(data.get("rules"), list):
        data["rules"] = [rule for rule in data["rules"] if rule is not _UNSUPPORTED_RULE]
    return data


def parse_yaml(content: str, source: str = "<string>") -> Dict[str, Any]:
    """Parse YAML text into a raw configuration mapping."""
    try:
        data = yaml.load(content, Loader=ConfigurationLoader)
    except yaml.YAMLError as e:
        raise ValidationError("Invalid yaml file `%s`: %s", source, e) from e
    if data is None:
        raise ValidationError("Invalid yaml file `%s`", source)
    if not isinstance(data, dict):
        raise ValidationError("Invalid yaml file `%s`: top level must be a mapping", source)
    return _without_unsupported_rules(data)


def load_configuration(
    content: Union[str, Mapping[str, Any]],
    source: str = "<string>",
) -> ConfigurationDocument:
    """Build a document from YAML text or an already parsed mapping.

    Raises:
        ValidationError: If the content is not valid YAML, lacks ``databaseName``
            or does not describe a valid configuration
    """
    data = parse_yaml(content, source) if isinstance(content, str) else dict(content)
    if not data.get("databaseName") and not data.get("database_name"):
        raise ValidationError("`databaseName` in file `%s` is required.", source)
    return to_document(data)


def load_yaml_configuration(path: Union[str, Path], encoding: Optional[str] = "utf-8") -> ConfigurationDocument:
    """Read and validate a proxy configuration file.

    Raises:
        FileIOError: If the file cannot be read
        ValidationError: If the file content is invalid
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding=encoding)
    except OSError as e:
        raise FileIOError(e) from e
    logger.debug(f"Loaded configuration file {file_path}")
    return load_configuration(content, file_path.name)
