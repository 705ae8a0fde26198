"""Resolves spec fields to cached value suppliers."""

from __future__ import annotations

from typing import Any, Mapping

from datacraft.interfaces import SpecError, ValueSupplier
from datacraft.registry import Registry


class SpecLoader:
    """Builds and caches a supplier for each field of a data spec."""

    def __init__(self, registry: Registry, spec: Mapping[str, Mapping[str, Any]]) -> None:
        self.registry = registry
        self.spec = spec
        self._cache: dict[str, ValueSupplier] = {}

    def get(self, name: str) -> ValueSupplier:
        """Return the supplier for a field, creating it on first use."""
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        field_spec = self.spec.get(name)
        if field_spec is None:
            raise SpecError(f"spec {name} not found")
        field_type = field_spec.get("type")
        if not isinstance(field_type, str):
            raise SpecError(f"spec {name} does not have a valid type")

        factory = self.registry.get_supplier_factory(field_type)
        supplier = factory.create(field_spec, self)
        self._cache[name] = supplier
        return supplier