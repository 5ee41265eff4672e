"""
Capability dispatch.

A ``CapabilityDriver`` owns an ordered sequence of variants and invokes one
capability on each of them. It never looks at a variant's concrete type:
behaviour is decided by the variant itself, so adding a variant means one
more ``register`` call and nothing else.
"""

import logging
from typing import Callable, Generic, Iterable, List, Tuple, TypeVar

V = TypeVar("V")
R = TypeVar("R")


class CapabilityDriver(Generic[V, R]):
    """
    Invokes a capability on every registered variant, in insertion order.

    Example:
        >>> driver = CapabilityDriver(lambda shape: shape.area(), [Circle(radius=2.0)])
        >>> driver.register(Square(side=3.0))
        >>> driver.run()
        [12.566370614359172, 9.0]
    """

    def __init__(self, invoke: Callable[[V], R], variants: Iterable[V] = ()) -> None:
        """
        Initialize the driver.

        Args:
            invoke: The capability call made on each variant
            variants: Initial variants, kept in the given order
        """
        self._invoke = invoke
        self._variants: List[V] = list(variants)

    def register(self, variant: V) -> None:
        """Append a variant; it runs after every variant registered before it."""
        self._variants.append(variant)
        logging.debug("Registered variant %s (%d total)", type(variant).__name__, len(self._variants))

    @property
    def variants(self) -> Tuple[V, ...]:
        """Registered variants in insertion order."""
        return tuple(self._variants)

    def run(self) -> List[R]:
        """
        Invoke the capability once per variant.

        Returns:
            One result per variant, in insertion order
        """
        return [self._invoke(variant) for variant in self._variants]

    def __len__(self) -> int:
        return len(self._variants)


__all__ = ["CapabilityDriver"]
