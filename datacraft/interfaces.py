"""Core protocols and errors shared by suppliers, factories and loaders."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


class DatacraftError(Exception):
    """Base class for errors raised by the package."""


class SupplierNotFoundError(DatacraftError, LookupError):
    """No supplier factory is registered under the requested name."""


class SpecError(DatacraftError, ValueError):
    """A data spec, or one of its fields, is missing or invalid."""


@runtime_checkable
class ValueSupplier(Protocol):
    """Something that produces a value for each iteration."""

    def next(self, iteration: int) -> Any:
        """Return the value for the given iteration."""


@runtime_checkable
class Loader(Protocol):
    """Resolves field names of a spec to value suppliers."""

    def get(self, name: str) -> ValueSupplier:
        """Return the supplier for the named field."""


@runtime_checkable
class SupplierFactory(Protocol):
    """Builds a value supplier from a field spec."""

    def create(self, spec: Mapping[str, Any], loader: Loader) -> ValueSupplier:
        """Return a supplier configured by the given field spec."""