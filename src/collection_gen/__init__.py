"""servers.com Go collection generator."""

from .cli import main
from .generator import CollectionGenerator
from .models import CollectionDescriptor, DerivedParam
from .utils import camelize, uncapitalize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "main",
    "CollectionDescriptor",
    "CollectionGenerator",
    "DerivedParam",
    "camelize",
    "uncapitalize",
]
