"""Edge case tests for the object factory."""

import pytest

from dotti_factory import (
    BuildOrderError,
    InvalidParameterError,
    MappingTypeResolver,
    MissingConfigurationError,
    ObjectFactory,
)
from dotti_factory.application import InstanceCache, ObjectBuilder
from dotti_factory.domain import ObjectDescriptor


class Node:
    def __init__(self, *args):
        self.args = args


RESOLVER = MappingTypeResolver({"Node": Node})


class TestEdgeCases:
    """Test edge cases across the factory components."""

    def test_object_without_params_key(self):
        """Test that a descriptor may omit params entirely."""
        factory = ObjectFactory({"a": {"type": "Node"}}, RESOLVER)

        assert factory.get("a").args == ()

    def test_integer_slot_keys(self):
        """Test that Python configs may use integer slot keys."""
        factory = ObjectFactory({"a": {"type": "Node", "params": {2: {"value": "b"}, 1: {"value": "a"}}}}, RESOLVER)

        assert factory.get("a").args == ("a", "b")

    def test_zero_based_slots(self):
        """Test that slot 0 sorts first."""
        factory = ObjectFactory({"a": {"type": "Node", "params": {"1": {"value": 1}, "0": {"value": "zero"}}}}, RESOLVER)

        assert factory.get("a").args == ("zero", 1)

    def test_falsy_values_bind_none(self):
        """Test that 0, empty text and False bind as None through the factory."""
        factory = ObjectFactory(
            {"a": {"type": "Node", "params": {"1": {"value": 0}, "2": {"value": ""}, "3": {"value": False}}}},
            RESOLVER,
        )

        assert factory.get("a").args == (None, None, None)

    def test_gaps_in_slots_do_not_insert_placeholders(self):
        """Test that missing slot numbers are not filled in."""
        factory = ObjectFactory({"a": {"type": "Node", "params": {"1": {"value": 1}, "5": {"value": 5}}}}, RESOLVER)

        assert factory.get("a").args == (1, 5)

    def test_constructor_returning_none_is_cached(self):
        """Test that a None result still counts as built."""
        calls = []

        def noop(*args):
            calls.append(args)

        factory = ObjectFactory({"a": {"type": "noop"}}, MappingTypeResolver({"noop": noop}))

        assert factory.get("a") is None
        assert factory.get("a") is None
        assert len(calls) == 1
        assert "a" in factory

    def test_set_none_is_respected(self):
        """Test that an injected None satisfies a reference."""
        factory = ObjectFactory({"svc": {"type": "Node", "params": {"1": {"reference": "optional"}}}}, RESOLVER)
        factory.set("optional", None)

        assert factory.get("svc").args == (None,)

    def test_bad_date_leaves_dependencies_cached(self):
        """Test that a parameter error only drops the failing object."""
        factory = ObjectFactory(
            {
                "base": {"type": "Node"},
                "job": {
                    "type": "Node",
                    "params": {"1": {"reference": "base"}, "2": {"type": "Date", "value": "yesterday-ish"}},
                },
            },
            RESOLVER,
        )

        with pytest.raises(InvalidParameterError):
            factory.get("job")

        assert "base" in factory
        assert "job" not in factory

    def test_missing_reference_is_programming_error(self):
        """Test that building out of order surfaces a BuildOrderError."""
        builder = ObjectBuilder(RESOLVER)
        descriptor = ObjectDescriptor.model_validate({"type": "Node", "params": {"1": {"reference": "later"}}})

        with pytest.raises(BuildOrderError):
            builder.build("early", descriptor, InstanceCache())

    def test_deep_chain(self):
        """Test a long chain of references builds in order."""
        depth = 200
        config = {"n0": {"type": "Node"}}
        for index in range(1, depth):
            config[f"n{index}"] = {"type": "Node", "params": {"1": {"reference": f"n{index - 1}"}}}
        factory = ObjectFactory(config, RESOLVER)

        order = factory.build_order(f"n{depth - 1}")
        top = factory.get(f"n{depth - 1}")

        assert order == [f"n{index}" for index in range(depth)]
        assert top.args[0] is factory.get(f"n{depth - 2}")

    def test_configure_reference_to_new_object(self):
        """Test that configure can add both an object and a reference to it."""
        factory = ObjectFactory({"svc": {"type": "Node", "params": {"1": {"reference": "db"}}}}, RESOLVER)

        with pytest.raises(MissingConfigurationError):
            factory.get("svc")

        factory.configure({"db": {"type": "Node", "params": {"1": {"value": "dsn"}}}})

        assert factory.get("svc").args[0].args == ("dsn",)
