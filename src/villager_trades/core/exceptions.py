"""
Trade Catalog Exception Classes

Typed errors raised while walking a catalog document. Document errors abandon
the rest of the document; entry errors only skip the offending trade entry.
"""

from typing import Any


class TradeCatalogError(Exception):
    """Base exception for all catalog loading errors."""

    error_code = "TradeCatalogError"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


# --------------------------------------------------------------------------- #
#                       Document-fatal errors                                 #
# --------------------------------------------------------------------------- #


class DocumentError(TradeCatalogError):
    """Raised when a catalog document is too broken to keep walking."""

    error_code = "DocumentError"


class MalformedDocumentError(DocumentError):
    """Raised when a required top-level field is missing or has the wrong type."""

    error_code = "MalformedDocument"

    def __init__(self, message: str, field_name: str | None = None) -> None:
        context = {"field": field_name} if field_name else None
        super().__init__(message, context)
        self.field_name = field_name


class CatalogReadError(MalformedDocumentError):
    """Raised by the document source when a file cannot be read or parsed."""

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.context["source"] = source
        self.source = source


class UnknownProfessionError(DocumentError):
    """Raised when the declared profession does not resolve in the host."""

    error_code = "UnknownProfession"

    def __init__(self, profession: str) -> None:
        super().__init__(f"Invalid profession '{profession}'")
        self.profession = profession


class UnknownTierError(DocumentError):
    """Raised when a tier key is not one of the five known tier names."""

    error_code = "UnknownTier"

    def __init__(self, tier_name: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown tier '{tier_name}'. Known tiers: {', '.join(known)}"
        )
        self.tier_name = tier_name


# --------------------------------------------------------------------------- #
#                        Entry-level errors                                   #
# --------------------------------------------------------------------------- #


class EntryError(TradeCatalogError):
    """Raised for a single trade entry; sibling entries are still processed."""

    error_code = "EntryError"


class NotAnObjectError(EntryError):
    """Raised when a tier list contains something other than a mapping."""

    error_code = "NotAnObject"


class MissingKindError(EntryError):
    """Raised when a trade entry does not declare its ``kind``."""

    error_code = "MissingKind"

    def __init__(self) -> None:
        super().__init__("Trade kind missing")


class UnknownKindError(EntryError):
    """Raised when the declared ``kind`` has no registered converter."""

    error_code = "UnknownKind"

    def __init__(self, kind: Any) -> None:
        super().__init__(f"Unknown trade kind {kind}")
        self.kind = kind


class ConversionError(EntryError):
    """Raised by a converter when an entry is invalid for its kind."""

    error_code = "ConversionError"
