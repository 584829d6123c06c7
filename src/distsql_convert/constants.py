"""DistSQL statement templates used when converting YAML configuration."""

from __future__ import annotations

# Database names the proxy uses to tell configuration categories apart
RESOURCE_DB = "resource_db"
SHARDING_DB = "sharding_db"
READWRITE_SPLITTING_DB = "readwrite_splitting_db"

# Sharding strategy types (matched case-insensitively)
STANDARD = "standard"
COMPLEX = "complex"
HINT = "hint"

COMMA = ","
SEMI = ";"
LINE_SEPARATOR = "\n"
# Separates the parts inside one rule definition
PART_SEPARATOR = COMMA + LINE_SEPARATOR

# Database
CREATE_DATABASE = "CREATE DATABASE {name}"
USE_DATABASE = "USE {name}"

# Resources
ADD_RESOURCE = "ADD RESOURCE"
KEY_URL = "url"
KEY_USERNAME = "username"
KEY_PASSWORD = "password"
RESOURCE_URL = 'URL="{url}"'
RESOURCE_USER = 'USER="{username}"'
RESOURCE_PASSWORD = 'PASSWORD="{password}"'
RESOURCE_PROPERTIES = "PROPERTIES({properties})"
DEFINITION_HEADER = " {name} ("
DEFINITION_FOOTER = ")"

PROPERTY = '"{key}"={value}'

# Algorithms
TYPE = "TYPE(NAME={type})"
TYPE_PROPERTIES = "TYPE(NAME={type}, PROPERTIES({properties}))"

# Sharding rules
CREATE_SHARDING_ALGORITHM = "CREATE SHARDING ALGORITHM"
CREATE_KEY_GENERATOR = "CREATE SHARDING KEY GENERATOR"
CREATE_SHARDING_TABLE = "CREATE SHARDING TABLE RULE"
DATA_NODES = 'DATANODES("{data_nodes}")'

DATABASE_STRATEGY = "DATABASE_STRATEGY"
TABLE_STRATEGY = "TABLE_STRATEGY"
SHARDING_STRATEGY_STANDARD = "{kind}(TYPE={type},SHARDING_COLUMN={column},SHARDING_ALGORITHM={algorithm})"
SHARDING_STRATEGY_COMPLEX = "{kind}(TYPE={type},SHARDING_COLUMNS={columns},SHARDING_ALGORITHM={algorithm})"
SHARDING_STRATEGY_HINT = "{kind}(TYPE={type},SHARDING_ALGORITHM={algorithm})"
KEY_GENERATE_STRATEGY = "KEY_GENERATE_STRATEGY(COLUMN={column},KEY_GENERATOR={generator})"

CREATE_SHARDING_BINDING_TABLE_RULES = "CREATE SHARDING BINDING TABLE RULES "
BINDING = "({tables})"

# Readwrite-splitting rules
CREATE_READWRITE_SPLITTING_RULE = "CREATE READWRITE_SPLITTING RULE"
WRITE_RESOURCE = "WRITE_RESOURCE={name}"
READ_RESOURCES = "READ_RESOURCES({names})"
