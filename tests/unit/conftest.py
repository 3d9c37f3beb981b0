"""Pytest configuration for collection generator unit tests."""

from pathlib import Path

import pytest
import yaml

from collection_gen.models import CollectionDescriptor


@pytest.fixture
def location_descriptor():
    """Plain collection with no args or params."""
    return CollectionDescriptor(name="Location", path="/locations", entity="Location")


@pytest.fixture
def ssl_descriptor():
    """Collection with a var prefix override and a reserved-word param."""
    return CollectionDescriptor(
        name="SSLCertificate",
        path="/ssl_certificates",
        entity="SSLCertificate",
        var_prefix="sslCertificate",
        api_url="https://developers.servers.com/api-documentation/v1/#operation/SSLCertificates",
        params={"search_pattern": "string", "type": "string"},
    )


@pytest.fixture
def ram_descriptor():
    """Collection with positional path arguments."""
    return CollectionDescriptor(
        name="RAMOption",
        path="/locations/%d/order_options/server_models/%d/ram",
        entity="RAMOption",
        args={"LocationID": "int64", "ServerModelID": "int64"},
    )


@pytest.fixture
def write_config(tmp_path):
    """Write a config mapping to a YAML file and return its path."""

    def _write(config: dict, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")
        return path

    return _write
