"""XML document loading and serialization."""

from .service import ANDROID_NAME, ANDROID_NS, XmlDocument, XmlDocumentService, strip_leading_garbage

__all__ = ["ANDROID_NAME", "ANDROID_NS", "XmlDocument", "XmlDocumentService", "strip_leading_garbage"]
