"""Collection source generation for the servers.com Go client."""

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, TemplateError

from .exceptions import InvalidDescriptorError, TemplateRenderError
from .models import CollectionDescriptor, DerivedParam
from .rendering import DEFAULT_TEMPLATE, create_jinja_environment, write_text
from .utils import (
    camelize,
    path_placeholders,
    pluralize,
    to_snake_case,
    to_variable_name,
    uncapitalize,
)


class CollectionGenerator:
    """
    Derive naming metadata from a descriptor and render it into Go source.

    Every accessor is a pure function of the descriptor; only the
    uncapitalized element name is memoized.
    """

    def __init__(
        self,
        descriptor: CollectionDescriptor,
        env: Environment | None = None,
        template_name: str = DEFAULT_TEMPLATE,
    ):
        self.descriptor = descriptor
        self.env = env if env is not None else create_jinja_environment()
        self.template_name = template_name
        self._element_uncapitalized: str | None = None

    def collection_api_url(self) -> str | None:
        return self.descriptor.api_url

    def collection_var_prefix(self) -> str | None:
        return self.descriptor.var_prefix

    def collection_type_name(self) -> str:
        return self.descriptor.name

    def collection_type_name_plural(self) -> str:
        return pluralize(self.descriptor.name, self.descriptor.plural_name)

    def collection_element_type(self) -> str:
        return self.descriptor.entity

    def collection_element_uncapitalized(self) -> str:
        if self._element_uncapitalized is None:
            self._element_uncapitalized = uncapitalize(self.descriptor.entity)
        return self._element_uncapitalized

    def resource_path(self) -> str:
        return self.descriptor.path

    def collection_args_prepared(self) -> list[str]:
        """Go parameter-list fragments, e.g. ``["LocationID int64"]``."""
        return [f"{name} {arg_type}" for name, arg_type in self.descriptor.args.items()]

    def collection_args(self) -> Mapping[str, str]:
        return self.descriptor.args

    def collection_params(self) -> list[DerivedParam]:
        """Setter and field naming for every query parameter, in declaration order."""
        return [
            DerivedParam(
                method_name=camelize(name),
                variable_name=to_variable_name(name),
                param_type=param_type,
                param_name=name,
            )
            for name, param_type in self.descriptor.params.items()
        ]

    def bindings(self) -> dict[str, Any]:
        """Named values exposed to the template."""
        return {
            "collection_api_url": self.collection_api_url(),
            "collection_var_prefix": self.collection_var_prefix(),
            "collection_type_name": self.collection_type_name(),
            "collection_type_name_plural": self.collection_type_name_plural(),
            "collection_element_type": self.collection_element_type(),
            "collection_element_uncapitalized": self.collection_element_uncapitalized(),
            "resource_path": self.resource_path(),
            "collection_args_prepared": self.collection_args_prepared(),
            "collection_args": self.collection_args(),
            "collection_params": self.collection_params(),
        }

    def describe(self) -> dict[str, Any]:
        """Plain-data view of the bindings, for dry runs."""
        data = self.bindings()
        data["collection_args"] = dict(data["collection_args"])
        data["collection_params"] = [param._asdict() for param in data["collection_params"]]
        return data

    def check_args_match_path(self) -> None:
        """Raise if the number of args differs from the path placeholders."""
        placeholders = path_placeholders(self.descriptor.path)
        if len(placeholders) != len(self.descriptor.args):
            raise InvalidDescriptorError(
                f"path '{self.descriptor.path}' has {len(placeholders)} placeholder(s) "
                f"but {len(self.descriptor.args)} arg(s) are declared",
                collection=self.descriptor.name,
            )

    def render(self) -> str:
        try:
            template = self.env.get_template(self.template_name)
            return str(template.render(**self.bindings()))
        except TemplateError as e:
            raise TemplateRenderError(self.descriptor.name, e) from e

    def render_to_file(self, file_path: str | Path) -> Path:
        """Render and write to ``file_path``, overwriting it. OS errors propagate."""
        path = Path(file_path)
        write_text(path, self.render())
        return path


def default_output_name(descriptor: CollectionDescriptor) -> str:
    """File name used when a collection entry doesn't name its output."""
    return f"{to_snake_case(pluralize(descriptor.name, descriptor.plural_name))}_collection.go"
