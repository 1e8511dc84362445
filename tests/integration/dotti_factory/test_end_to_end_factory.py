"""End-to-end tests building object graphs across all layers."""

import collections
import json
import logging
from datetime import datetime, timedelta, timezone
from fractions import Fraction

import pytest

from dotti_factory import (
    ChainedTypeResolver,
    ConstructionTypeError,
    DependencyCycleError,
    ImportTypeResolver,
    MappingTypeResolver,
    MissingConfigurationError,
    ObjectFactory,
    TypeResolutionError,
)

REGISTRY = {
    "defaults": {"type": "dict", "params": {"1": {"value": {"color": "red", "size": 1}}}},
    "overrides": {"type": "dict", "params": {"1": {"value": {"size": 2}}}},
    "settings": {
        "type": "collections.ChainMap",
        "params": {"1": {"reference": "overrides"}, "2": {"reference": "defaults"}},
    },
    "ratio": {"type": "fractions:Fraction", "params": {"2": {"value": 4}, "1": {"value": 3}}},
    "window": {"type": "datetime.timedelta", "params": {"1": {"value": 1}, "2": {"value": 30}}},
    "epoch": {"type": "copy.copy", "params": {"1": {"type": "Date", "value": "2021-01-01T00:00:00Z"}}},
}


class TestEndToEndFactory:
    """Test complete build scenarios with imported types."""

    def test_builds_graph_from_importable_types(self):
        """Test that references wire real library objects together."""
        factory = ObjectFactory(REGISTRY)

        settings = factory.get("settings")

        assert isinstance(settings, collections.ChainMap)
        assert settings["size"] == 2
        assert settings["color"] == "red"
        assert settings.maps[0] is factory.get("overrides")
        assert settings.maps[1] is factory.get("defaults")

    def test_positional_binding_with_colon_path(self):
        """Test that slots bind in numeric order for an imported type."""
        assert ObjectFactory(REGISTRY).get("ratio") == Fraction(3, 4)
        assert ObjectFactory(REGISTRY).get("window") == timedelta(days=1, seconds=30)

    def test_date_literal_through_factory_function(self):
        """Test that a Date literal reaches a plain function as a datetime."""
        assert ObjectFactory(REGISTRY).get("epoch") == datetime(2021, 1, 1, tzinfo=timezone.utc)

    def test_ten_or_more_parameters(self):
        """Test that slot 10 binds after slot 9, not after slot 1."""

        def pack(*args):
            return args

        params = {str(slot): {"value": slot} for slot in range(1, 12)}
        factory = ObjectFactory(
            {"packed": {"type": "pack", "params": params}},
            ChainedTypeResolver(MappingTypeResolver({"pack": pack}), ImportTypeResolver()),
        )

        assert factory.get("packed") == tuple(range(1, 12))

    def test_loaded_from_file(self, tmp_path):
        """Test that a JSON registry file builds the same graph."""
        path = tmp_path / "objects.json"
        path.write_text(json.dumps(REGISTRY), encoding="utf-8")

        factory = ObjectFactory.from_file(str(path))

        assert factory.get("settings")["size"] == 2
        assert factory.build_order("settings") == []

    def test_reconfigure_then_build(self):
        """Test that configure changes objects that were not built yet."""
        factory = ObjectFactory(REGISTRY)
        defaults = factory.get("defaults")

        factory.configure(
            {
                "defaults": {"params": {"1": {"value": {"color": "blue"}}}},
                "overrides": {"params": {"1": {"value": {"size": 3}}}},
            }
        )
        settings = factory.get("settings")

        assert settings.maps[1] is defaults
        assert settings["color"] == "red"
        assert settings["size"] == 3

    def test_injected_object_replaces_configured_one(self):
        """Test that set lets tests and hosts provide objects themselves."""
        factory = ObjectFactory(REGISTRY)
        custom = {"color": "green"}
        factory.set("defaults", custom)

        assert factory.get("settings")["color"] == "green"

    def test_non_callable_type_logs_critical(self, caplog):
        """Test that configuring a constant as a type fails loudly."""
        factory = ObjectFactory({"separator": {"type": "os.sep"}})

        with caplog.at_level(logging.CRITICAL, logger="dotti_factory"):
            with pytest.raises(ConstructionTypeError) as exc_info:
                factory.get("separator")

        assert exc_info.value.found_kind == "str"
        assert "separator" not in factory
        assert any("os.sep" in record.getMessage() for record in caplog.records)

    def test_unknown_type_path_logs_critical(self, caplog):
        """Test that an unimportable type path is logged before the error surfaces."""
        factory = ObjectFactory({"a": {"type": "no_such_package_xyz.Type"}})

        with caplog.at_level(logging.CRITICAL, logger="dotti_factory"):
            with pytest.raises(TypeResolutionError):
                factory.get("a")

        assert "a" not in factory
        assert any(
            record.levelno == logging.CRITICAL and "no_such_package_xyz.Type" in record.getMessage()
            for record in caplog.records
        )

    def test_date_to_string_text(self):
        """Test that Date.toString style text is accepted as a Date literal."""
        factory = ObjectFactory(
            {"stamp": {"type": "copy.copy", "params": {"1": {"type": "Date", "value": "Tue Mar 26 2013 15:29:32 GMT+0800 (CST)"}}}}
        )

        assert factory.get("stamp") == datetime(2013, 3, 26, 7, 29, 32, tzinfo=timezone.utc)

    def test_errors_from_nested_graph(self):
        """Test that cycles and gaps deep in the graph are reported."""
        factory = ObjectFactory(
            {
                "app": {"type": "dict", "params": {"1": {"reference": "loop"}}},
                "loop": {"type": "dict", "params": {"1": {"reference": "app"}}},
                "orphan": {"type": "dict", "params": {"1": {"reference": "nowhere"}}},
            }
        )

        with pytest.raises(DependencyCycleError):
            factory.get("app")
        with pytest.raises(MissingConfigurationError, match="nowhere"):
            factory.get("orphan")
