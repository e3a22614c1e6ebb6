"""Java activity source editing."""

from .service import PACKAGE_STATEMENT, PARENT_CLASS, SourceService, extends_clause

__all__ = ["PACKAGE_STATEMENT", "PARENT_CLASS", "SourceService", "extends_clause"]
