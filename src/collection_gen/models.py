"""Data models for the servers.com collection generator."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .exceptions import InvalidDescriptorError


@dataclass(frozen=True)
class CollectionDescriptor:
    """Declarative shape of one paginated list endpoint."""

    name: str  # "SSLCertificate"
    path: str  # "/locations/%d/order_options/server_models"
    entity: str  # element type, e.g. "Network" for "L2Network"
    plural_name: str | None = None
    var_prefix: str | None = None
    api_url: str | None = None
    args: Mapping[str, str] = field(default_factory=dict)  # {"LocationID": "int64"}
    params: Mapping[str, str] = field(default_factory=dict)  # {"search_pattern": "string"}

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidDescriptorError("name must not be empty")
        if not self.entity:
            raise InvalidDescriptorError("entity must not be empty", collection=self.name)

        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


class DerivedParam(NamedTuple):
    """Naming derived from one query parameter of a collection."""

    method_name: str  # "SearchPattern"
    variable_name: str  # "searchPattern"
    param_type: str  # "string"
    param_name: str  # "search_pattern"


@dataclass(frozen=True)
class CollectionTarget:
    """A descriptor paired with the file name it is generated into."""

    descriptor: CollectionDescriptor
    output: str
