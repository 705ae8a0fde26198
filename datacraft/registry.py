"""Registry of supplier factories keyed by type name."""

from __future__ import annotations

from datacraft.interfaces import SupplierFactory, SupplierNotFoundError


class Registry:
    """Maps type names to supplier factories."""

    def __init__(self) -> None:
        self._factories: dict[str, SupplierFactory] = {}

    def register_supplier(self, name: str, factory: SupplierFactory) -> None:
        """Register a factory under a name, replacing any earlier one."""
        self._factories[name] = factory

    def get_supplier_factory(self, name: str) -> SupplierFactory:
        """Return the factory registered under a name."""
        try:
            return self._factories[name]
        except KeyError:
            raise SupplierNotFoundError(
                f"supplier factory '{name}' not found"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._factories