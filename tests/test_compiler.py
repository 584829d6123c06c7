"""Tests for the DistSQL compiler."""

import pytest
from distsql_convert import (
    CompilerConfig,
    ConfigurationDocument,
    DistSQLCompiler,
    ValidationError,
    compile_document,
)

SHARDING_CONFIG = {
    "databaseName": "sharding_db",
    "dataSources": {
        "ds_0": {"url": "jdbc:mysql://127.0.0.1:3306/demo_ds_0", "username": "root", "password": "pwd"},
    },
    "rules": [
        {
            "rule_type": "sharding",
            "tables": {
                "t_order": {
                    "actualDataNodes": "ds_0.t_order_${0..1}",
                    "tableStrategy": {"standard": {"shardingColumn": "order_id", "shardingAlgorithmName": "t_order_mod"}},
                    "keyGenerateStrategy": {"column": "order_id", "keyGeneratorName": "snowflake"},
                },
                "t_order_item": {
                    "actualDataNodes": "ds_0.t_order_item_${0..1}",
                    "tableStrategy": {"standard": {"shardingColumn": "order_id", "shardingAlgorithmName": "t_order_mod"}},
                },
            },
            "bindingTables": ["t_order,t_order_item"],
            "shardingAlgorithms": {"t_order_mod": {"type": "MOD", "props": {"sharding-count": 2}}},
            "keyGenerators": {"snowflake": {"type": "SNOWFLAKE"}},
        },
    ],
}


class TestResourcesCategory:
    """Test documents of the resources category."""

    def test_single_data_source_without_password(self):
        """Test the expected script for one password-less data source."""
        script = compile_document({
            "databaseName": "resource_db",
            "dataSources": {"ds0": {"url": "jdbc:mysql://h/db", "username": "root"}},
        })
        assert script == (
            "CREATE DATABASE resource_db;\n"
            "USE resource_db;\n"
            "ADD RESOURCE ds0 (\n"
            'URL="jdbc:mysql://h/db",\n'
            'USER="root",\n'
            "PROPERTIES()\n"
            ");\n"
        )
        assert "PASSWORD" not in script

    def test_no_data_sources(self):
        """Test an empty data source map yields no resource block."""
        script = compile_document({"databaseName": "resource_db"})
        assert script == "CREATE DATABASE resource_db;\nUSE resource_db;\n"
        assert "ADD RESOURCE" not in script


class TestShardingCategory:
    """Test documents of the sharding category."""

    def test_statement_order(self):
        """Test algorithms, key generators, tables and bindings follow the resources."""
        script = compile_document(SHARDING_CONFIG)
        heads = [line.split(" ")[0:3] for line in script.splitlines() if line.startswith(("CREATE", "USE", "ADD"))]
        assert heads == [
            ["CREATE", "DATABASE", "sharding_db;"],
            ["USE", "sharding_db;"],
            ["ADD", "RESOURCE", "ds_0"],
            ["CREATE", "SHARDING", "ALGORITHM"],
            ["CREATE", "SHARDING", "KEY"],
            ["CREATE", "SHARDING", "TABLE"],
            ["CREATE", "SHARDING", "BINDING"],
        ]

    def test_full_script(self):
        """Test the complete sharding script."""
        assert compile_document(SHARDING_CONFIG) == (
            "CREATE DATABASE sharding_db;\n"
            "USE sharding_db;\n"
            "ADD RESOURCE ds_0 (\n"
            'URL="jdbc:mysql://127.0.0.1:3306/demo_ds_0",\n'
            'USER="root",\n'
            'PASSWORD="pwd",\n'
            "PROPERTIES()\n"
            ");\n"
            "CREATE SHARDING ALGORITHM t_order_mod (\n"
            'TYPE(NAME=mod, PROPERTIES("sharding-count"=2))\n'
            ");\n"
            "CREATE SHARDING KEY GENERATOR snowflake (\n"
            "TYPE(NAME=SNOWFLAKE)\n"
            ");\n"
            "CREATE SHARDING TABLE RULE t_order (\n"
            'DATANODES("ds_0.t_order_${0..1}"),\n'
            "TABLE_STRATEGY(TYPE=standard,SHARDING_COLUMN=order_id,SHARDING_ALGORITHM=t_order_mod),\n"
            "KEY_GENERATE_STRATEGY(COLUMN=order_id,KEY_GENERATOR=snowflake)\n"
            "), t_order_item (\n"
            'DATANODES("ds_0.t_order_item_${0..1}"),\n'
            "TABLE_STRATEGY(TYPE=standard,SHARDING_COLUMN=order_id,SHARDING_ALGORITHM=t_order_mod)\n"
            ");\n"
            "CREATE SHARDING BINDING TABLE RULES (t_order,t_order_item);\n"
        )

    def test_algorithm_type_lower_cased(self):
        """Test a MOD algorithm is rendered as mod."""
        script = compile_document({
            "databaseName": "sharding_db",
            "rules": [{"shardingAlgorithms": {"mod_algo": {"type": "MOD"}}}],
        })
        assert "CREATE SHARDING ALGORITHM mod_algo (\nTYPE(NAME=mod)\n);\n" in script

    def test_rules_of_other_category_ignored(self):
        """Test read-write-splitting rules are not compiled in a sharding document."""
        script = compile_document({
            "databaseName": "sharding_db",
            "rules": [{"dataSources": {"g": {"writeDataSourceName": "w"}}}],
        })
        assert "READWRITE_SPLITTING" not in script


class TestReadwriteSplittingCategory:
    """Test documents of the read-write-splitting category."""

    def test_single_group(self):
        """Test one group with two read sources and a round-robin balancer."""
        script = compile_document({
            "databaseName": "readwrite_splitting_db",
            "rules": [{
                "rule_type": "readwrite_splitting",
                "dataSources": {
                    "readwrite_ds": {
                        "staticStrategy": {"writeDataSourceName": "ds_w", "readDataSourceNames": ["ds_r0", "ds_r1"]},
                        "loadBalancerName": "round_robin",
                    },
                },
                "loadBalancers": {"round_robin": {"type": "ROUND_ROBIN"}},
            }],
        })
        assert script == (
            "CREATE DATABASE readwrite_splitting_db;\n"
            "USE readwrite_splitting_db;\n"
            "CREATE READWRITE_SPLITTING RULE readwrite_ds (\n"
            "WRITE_RESOURCE=ds_w,\n"
            "READ_RESOURCES(ds_r0,ds_r1),\n"
            "TYPE(NAME=round_robin)\n"
            ");\n"
        )
        assert script.count("readwrite_ds (") == 1
        assert "PROPERTIES" not in script


class TestDispatch:
    """Test category dispatch and validation."""

    def test_unknown_category_compiles_to_empty_script(self):
        """Test unsupported categories produce an empty script, not an error."""
        assert compile_document({"databaseName": "encrypt_db", "dataSources": {"ds": {"url": "jdbc:h2:mem:ds"}}}) == ""

    @pytest.mark.parametrize("database_name", [None, ""])
    def test_missing_database_name(self, database_name):
        """Test a missing database name fails before any output."""
        document = ConfigurationDocument(category="sharding_db", database_name=database_name)
        with pytest.raises(ValidationError) as exc_info:
            DistSQLCompiler().compile(document)
        assert exc_info.value.error_code == 11000
        assert exc_info.value.sql_state.value == "44000"

    def test_invalid_mapping(self):
        """Test malformed mappings surface as ValidationError."""
        with pytest.raises(ValidationError, match="Invalid configuration"):
            compile_document({"databaseName": "resource_db", "dataSources": {"ds": {"username": "root"}}})

    def test_crlf_line_separator(self):
        """Test the configured line separator is used."""
        script = compile_document({"databaseName": "resource_db"}, CompilerConfig(line_separator="\r\n"))
        assert script == "CREATE DATABASE resource_db;\r\nUSE resource_db;\r\n"

    def test_invalid_line_separator(self):
        """Test only LF and CRLF are accepted."""
        with pytest.raises(ValueError, match="line_separator must be LF or CRLF"):
            CompilerConfig(line_separator=";")

    def test_compiler_is_reusable(self):
        """Test one compiler produces identical scripts across calls."""
        compiler = DistSQLCompiler()
        document = ConfigurationDocument.model_validate(SHARDING_CONFIG)
        assert compiler.compile(document) == compiler.compile(document)
