"""
Example: Convert proxy YAML configuration into DistSQL

This example converts the sample configuration files next to this script
and builds a resources-only document directly in Python.
"""

from pathlib import Path

from distsql_convert import (
    ConfigurationDocument,
    DataSourceConfig,
    DistSQLCompiler,
    convert_yaml_configuration,
)

EXAMPLES_DIR = Path(__file__).parent


def main():
    # Convert the sample files
    for name in ("config-sharding.yaml", "config-readwrite-splitting.yaml"):
        print(f"-- {name}")
        print(convert_yaml_configuration(EXAMPLES_DIR / name))

    # Build a document in code
    document = ConfigurationDocument(
        category="resource_db",
        database_name="resource_db",
        data_sources={
            "ds_0": DataSourceConfig(
                url="jdbc:mysql://127.0.0.1:3306/demo_ds_0",
                username="root",
                pool_properties={"maxPoolSize": 10},
            ),
        },
    )
    print("-- in-memory document")
    print(DistSQLCompiler().compile(document))


if __name__ == "__main__":
    main()
