# slot_details/errors.py
from __future__ import annotations


class SlotDetailsError(Exception):
    """Base class for failures the CLI reports to the operator."""


class UsageError(SlotDetailsError):
    """Bad command-line input (missing path, wrong extension)."""


class MissingFieldError(SlotDetailsError):
    def __init__(self, field: str):
        super().__init__(f"Meta field {field!r} is missing from the document")
        self.field = field


class ProviderNotFoundError(SlotDetailsError):
    def __init__(self, provider_name: str | None):
        super().__init__(f"Provider {provider_name} couldn't be found in the provider table")
        self.provider_name = provider_name


class CatalogConfigError(SlotDetailsError):
    """Catalog lookup cannot start: no endpoint URL or no vendor id."""
