"""Tests for property merging and rendering."""

from distsql_convert.properties import (
    format_property_value,
    merge_properties,
    render_properties,
    split_data_source_properties,
)


class TestMergeProperties:
    """Test merging of standard and custom properties."""

    def test_standard_before_custom(self):
        """Test standard properties are listed before custom ones."""
        merged = merge_properties({"maxPoolSize": 50}, {"useSSL": False})
        assert merged == [("maxPoolSize", 50), ("useSSL", False)]

    def test_null_values_skipped(self):
        """Test entries with null values are dropped entirely."""
        merged = merge_properties({"maxPoolSize": None, "minPoolSize": 1}, {"cachePrepStmts": None})
        assert merged == [("minPoolSize", 1)]

    def test_empty_inputs(self):
        """Test merging nothing yields nothing."""
        assert merge_properties({}, {}) == []
        assert merge_properties(None, None) == []

    def test_merge_is_repeatable(self):
        """Test merging the same maps twice renders identical output."""
        standard = {"connectionTimeoutMilliseconds": 30000, "maxPoolSize": 50}
        custom = {"serverTimezone": "UTC", "useSSL": False}
        assert render_properties(standard, custom) == render_properties(standard, custom)


class TestRenderProperties:
    """Test rendering of key=value property lists."""

    def test_render_both_groups(self):
        """Test a single comma separates standard and custom groups."""
        rendered = render_properties({"maxPoolSize": 50}, {"serverTimezone": "UTC"})
        assert rendered == '"maxPoolSize"=50,"serverTimezone"="UTC"'

    def test_render_custom_only(self):
        """Test no leading comma when standard properties are empty."""
        assert render_properties({}, {"useSSL": True}) == '"useSSL"=true'

    def test_render_trailing_null_has_no_trailing_comma(self):
        """Test a null last entry does not leave a dangling separator."""
        assert render_properties({"a": 1, "b": None}) == '"a"=1'

    def test_render_empty(self):
        """Test empty properties render as an empty string."""
        assert render_properties({}) == ""

    def test_value_formatting(self):
        """Test literal formatting of property values."""
        assert format_property_value(True) == "true"
        assert format_property_value(4) == "4"
        assert format_property_value(1.5) == "1.5"
        assert format_property_value("t_order_${order_id % 2}") == '"t_order_${order_id % 2}"'

    def test_quotes_escaped(self):
        """Test embedded double quotes and backslashes keep the literal balanced."""
        assert format_property_value('ds_${"x"}') == r'"ds_${\"x\"}"'
        assert format_property_value("C:\\data") == r'"C:\\data"'
        assert render_properties({'say "hi"': "a"}) == r'"say \"hi\""="a"'


class TestSplitDataSourceProperties:
    """Test normalization of flat YAML data source keys."""

    def test_split_yaml_layout(self):
        """Test connection, pool and custom keys are separated."""
        result = split_data_source_properties({
            "url": "jdbc:mysql://127.0.0.1:3306/demo_ds_0",
            "username": "root",
            "password": "secret",
            "maxPoolSize": 50,
            "connectionTimeoutMilliseconds": 30000,
            "customPoolProps": {"cachePrepStmts": True},
        })
        assert result["url"] == "jdbc:mysql://127.0.0.1:3306/demo_ds_0"
        assert result["username"] == "root"
        assert result["password"] == "secret"
        # Standard pool properties follow the fixed standard order
        assert list(result["pool_properties"]) == ["connectionTimeoutMilliseconds", "maxPoolSize"]
        assert result["custom_properties"] == {"cachePrepStmts": True}

    def test_hikari_synonyms(self):
        """Test HikariCP property names map to the standard names."""
        result = split_data_source_properties({
            "jdbcUrl": "jdbc:h2:mem:ds",
            "maximumPoolSize": 10,
            "minimumIdle": 2,
            "leakDetectionThreshold": 5000,
        })
        assert result["url"] == "jdbc:h2:mem:ds"
        assert result["pool_properties"] == {"maxPoolSize": 10, "minPoolSize": 2}
        assert result["custom_properties"] == {"leakDetectionThreshold": 5000}
