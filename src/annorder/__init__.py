"""annorder package root."""

from annorder.catalog import DeclarationKind, OrderingCatalog, default_catalog
from annorder.exceptions import CatalogConfigError, NeverRaise, NeverThrown
from annorder.invariants import never
from annorder.validator import Diagnostic, DiagnosticKind, OrderValidator, ValidationResult

__all__ = [
    "__version__",
    "CatalogConfigError",
    "DeclarationKind",
    "Diagnostic",
    "DiagnosticKind",
    "NeverRaise",
    "NeverThrown",
    "OrderValidator",
    "OrderingCatalog",
    "ValidationResult",
    "default_catalog",
    "never",
]

__version__ = "0.1.0"
