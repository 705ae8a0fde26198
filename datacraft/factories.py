"""Factories for the built-in suppliers and their registration."""

from __future__ import annotations

import math
import random
from typing import Any, Mapping

from datacraft.interfaces import Loader, SpecError
from datacraft.registry import Registry
from datacraft.suppliers import IntegerSupplier, RowNumberSupplier, UuidSupplier

DEFAULT_MIN = -1_000_000_000
DEFAULT_MAX = 1_000_000_000


class UuidSupplierFactory:
    """Creates UUID suppliers."""

    def create(self, spec: Mapping[str, Any], loader: Loader) -> UuidSupplier:
        return UuidSupplier()


class RowNumberSupplierFactory:
    """Creates row number suppliers."""

    def create(self, spec: Mapping[str, Any], loader: Loader) -> RowNumberSupplier:
        return RowNumberSupplier()


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SpecError(f"{key}: unsupported numeric type {type(value).__name__}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SpecError(f"{key}: value {value} is not a finite number")
        return int(value)
    return value


def _as_non_negative_int(key: str, value: Any) -> int:
    number = _as_int(key, value)
    if number < 0:
        raise SpecError(f"{key}: negative value not allowed")
    return number


class IntegerSupplierFactory:
    """Creates random integer suppliers from min, max and seed settings."""

    def create(self, spec: Mapping[str, Any], loader: Loader) -> IntegerSupplier:
        low = _as_int("min", spec["min"]) if "min" in spec else DEFAULT_MIN
        high = _as_int("max", spec["max"]) if "max" in spec else DEFAULT_MAX
        if low >= high:
            raise SpecError(f"min ({low}) must be < max ({high})")
        if "seed" in spec:
            rng = random.Random(_as_non_negative_int("seed", spec["seed"]))
        else:
            rng = random.Random()
        return IntegerSupplier(min_value=low, max_value=high, rng=rng)


def register(registry: Registry) -> None:
    """Register the built-in supplier factories."""
    registry.register_supplier("uuid", UuidSupplierFactory())
    registry.register_supplier("rownum", RowNumberSupplierFactory())
    registry.register_supplier("iteration", RowNumberSupplierFactory())
    registry.register_supplier("integer", IntegerSupplierFactory())