"""
Series and parallel networks for PanelNet.

Contains the ParallelSource and SeriesSource composites. Both fold over
their children: one quantity adds, the other is limited by the weakest
child. Parallel wiring adds currents and shares the lowest voltage;
series wiring adds voltages and shares the lowest current.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .source import Source
from ..utils.constants import (
    VOLTAGE_CEILING, CURRENT_CEILING, WIRING_SERIES, WIRING_PARALLEL, WIRING_TYPES
)
from ..utils.helpers import fold_sum, fold_min

logger = logging.getLogger('PanelNet.networks')


class CompositeSource(Source):
    """
    Source built from an ordered sequence of child sources.

    Children are held by reference and never copied, so the same panel
    or sub-network can appear in several networks, or several times in
    one. The children tuple is fixed at construction, which means a
    composite can never contain itself.

    The base class defines no wiring and cannot be built directly.
    Subclasses choose which quantity is summed; the other one is the
    minimum over children, seeded with the ceiling. With no children
    the summed quantity is 0 and the limited one equals the ceiling.
    """

    summed_quantity = ''
    limited_quantity = ''
    default_ceiling = 0.0

    def __init__(self, sources: Iterable[Source] = (), ceiling: Optional[float] = None):
        """
        Initialize the composite.

        Args:
            sources: Child sources in wiring order
            ceiling: Identity of the minimum fold; class default if None
        """
        if not self.summed_quantity:
            raise TypeError(
                f"{type(self).__name__} does not define a wiring; use ParallelSource or SeriesSource"
            )

        children = tuple(sources)
        for child in children:
            if not isinstance(child, Source):
                raise TypeError(
                    f"{type(self).__name__} children must be sources, got {type(child).__name__}"
                )

        self._children: Tuple[Source, ...] = children
        self.ceiling = self.default_ceiling if ceiling is None else ceiling

        if not children:
            logger.warning(
                f"Empty {type(self).__name__}: {self.limited_quantity} is unconstrained "
                f"({self.ceiling:g}), {self.summed_quantity} is 0"
            )

    @property
    def children(self) -> Tuple[Source, ...]:
        """Child sources in wiring order."""
        return self._children

    @property
    def is_empty(self) -> bool:
        return not self._children

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Source]:
        return iter(self._children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._children)!r})"

    def _aggregate(self, quantity: str) -> float:
        values = (getattr(child, quantity)() for child in self._children)
        if quantity == self.summed_quantity:
            return fold_sum(values)
        return fold_min(values, self.ceiling)

    def current(self) -> float:
        return self._aggregate('current')

    def voltage(self) -> float:
        return self._aggregate('voltage')

    def leaves(self) -> Iterator[Source]:
        for child in self._children:
            yield from child.leaves()

    def nodes(self) -> Iterator[Source]:
        yield self
        for child in self._children:
            yield from child.nodes()

    def depth(self) -> int:
        return 1 + max((child.depth() for child in self._children), default=0)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['children'] = [child.to_dict() for child in self._children]
        return result


class ParallelSource(CompositeSource):
    """Sources wired in parallel: currents add, voltage is the lowest child voltage."""

    summed_quantity = 'current'
    limited_quantity = 'voltage'
    default_ceiling = VOLTAGE_CEILING


class SeriesSource(CompositeSource):
    """Sources wired in series: voltages add, current is the lowest child current."""

    summed_quantity = 'voltage'
    limited_quantity = 'current'
    default_ceiling = CURRENT_CEILING


def series(*sources: Source, ceiling: Optional[float] = None) -> SeriesSource:
    """Wire the given sources in series."""
    return SeriesSource(sources, ceiling=ceiling)


def parallel(*sources: Source, ceiling: Optional[float] = None) -> ParallelSource:
    """Wire the given sources in parallel."""
    return ParallelSource(sources, ceiling=ceiling)


def string_of(source: Source, count: int, wiring: str = WIRING_SERIES,
              ceiling: Optional[float] = None) -> CompositeSource:
    """
    Wire several references to one source together.

    Args:
        source: Panel or network to repeat
        count: Number of references
        wiring: 'series' or 'parallel'
        ceiling: Identity of the minimum fold; class default if None

    Returns:
        SeriesSource or ParallelSource holding count references to source
    """
    if count < 0:
        raise ValueError(f"String length must be non-negative, got {count}")
    if wiring not in WIRING_TYPES:
        raise ValueError(f"Unknown wiring: {wiring}")

    children = [source] * count
    if wiring == WIRING_PARALLEL:
        return ParallelSource(children, ceiling=ceiling)
    return SeriesSource(children, ceiling=ceiling)


def contains_empty_network(source: Source) -> bool:
    """
    Check whether an empty network is wired in anywhere under a source.

    An empty composite contributes its ceiling to the limited quantity,
    which may be hidden by a sibling or leak into the result.
    """
    return any(
        isinstance(node, CompositeSource) and node.is_empty
        for node in source.nodes()
    )
