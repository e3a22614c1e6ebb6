"""Services package for launcher-integration."""

from .manifest import ManifestService
from .paths import PathResolver
from .source import SourceService
from .xml_document import XmlDocumentService

__all__ = [
    "ManifestService",
    "PathResolver",
    "SourceService",
    "XmlDocumentService",
]
