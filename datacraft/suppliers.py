"""Built-in value suppliers."""

from __future__ import annotations

import operator
import random
import uuid
from dataclasses import dataclass, field


class UuidSupplier:
    """Supplies a fresh random UUID string on every call."""

    def next(self, iteration: int) -> str:
        return str(uuid.uuid4())


class RowNumberSupplier:
    """Supplies the iteration number itself."""

    def next(self, iteration: int) -> int:
        # Accept only integer-like iteration counters, normalised to int.
        return operator.index(iteration)


@dataclass
class IntegerSupplier:
    """Supplies random integers between min_value and max_value inclusive."""

    min_value: int
    max_value: int
    rng: random.Random = field(default_factory=random.Random)

    def next(self, iteration: int) -> int:
        return self.rng.randint(self.min_value, self.max_value)