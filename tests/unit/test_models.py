"""Unit tests for collection descriptors."""

import dataclasses

import pytest

from collection_gen.exceptions import CollectionGenError, InvalidDescriptorError
from collection_gen.models import CollectionDescriptor, DerivedParam


class TestCollectionDescriptor:
    """Test cases for CollectionDescriptor."""

    def test_defaults(self, location_descriptor):
        """Optional fields default to None or empty mappings."""
        assert location_descriptor.plural_name is None
        assert location_descriptor.var_prefix is None
        assert location_descriptor.api_url is None
        assert dict(location_descriptor.args) == {}
        assert dict(location_descriptor.params) == {}

    def test_empty_name_rejected(self):
        """Empty name fails construction."""
        with pytest.raises(InvalidDescriptorError, match="name must not be empty"):
            CollectionDescriptor(name="", path="/hosts", entity="Host")

    def test_empty_entity_rejected(self):
        """Empty entity fails construction and names the collection."""
        with pytest.raises(InvalidDescriptorError) as exc_info:
            CollectionDescriptor(name="Host", path="/hosts", entity="")
        assert exc_info.value.collection == "Host"
        assert "entity must not be empty" in str(exc_info.value)

    def test_invalid_descriptor_is_value_error(self):
        """InvalidDescriptorError can be caught as ValueError or the base error."""
        with pytest.raises(ValueError):
            CollectionDescriptor(name="", path="/", entity="X")
        with pytest.raises(CollectionGenError):
            CollectionDescriptor(name="", path="/", entity="X")

    def test_args_mismatch_not_validated(self):
        """Args/placeholder mismatch is accepted at construction."""
        descriptor = CollectionDescriptor(name="Host", path="/hosts/%s", entity="Host")
        assert descriptor.path == "/hosts/%s"

    def test_fields_are_frozen(self, location_descriptor):
        """Fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            location_descriptor.name = "Other"  # type: ignore[misc]

    def test_args_are_read_only(self, ram_descriptor):
        """Mappings cannot be mutated after construction."""
        with pytest.raises(TypeError):
            ram_descriptor.args["Extra"] = "string"  # type: ignore[index]

    def test_source_mapping_is_copied(self):
        """Mutating the caller's dict doesn't leak into the descriptor."""
        params = {"search_pattern": "string"}
        descriptor = CollectionDescriptor(
            name="NetworkPool", path="/network_pools", entity="NetworkPool", params=params
        )
        params["type"] = "string"
        assert list(descriptor.params) == ["search_pattern"]

    def test_args_order_preserved(self, ram_descriptor):
        """Argument insertion order is kept."""
        assert list(ram_descriptor.args) == ["LocationID", "ServerModelID"]

    def test_equality(self):
        """Descriptors with the same fields compare equal."""
        first = CollectionDescriptor(name="Host", path="/hosts", entity="Host", args={"id": "string"})
        second = CollectionDescriptor(name="Host", path="/hosts", entity="Host", args={"id": "string"})
        assert first == second


class TestDerivedParam:
    """Test cases for DerivedParam."""

    def test_tuple_order(self):
        """Fields unpack as method, variable, type, wire name."""
        param = DerivedParam("SearchPattern", "searchPattern", "string", "search_pattern")
        method_name, variable_name, param_type, param_name = param
        assert (method_name, variable_name, param_type, param_name) == (
            "SearchPattern",
            "searchPattern",
            "string",
            "search_pattern",
        )
        assert param.variable_name == "searchPattern"
