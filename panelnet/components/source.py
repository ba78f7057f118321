"""
Source contract for PanelNet.

Every element of a network, a single panel or a whole string of them,
supplies a current and a voltage. Composites hold references to other
sources, so any source can appear wherever a source is expected.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator


class Source(ABC):
    """
    Anything that supplies current and voltage.

    Evaluation is a pure function of construction-time state: calling
    current() or voltage() any number of times gives the same result.
    """

    @abstractmethod
    def current(self) -> float:
        """Current this source can deliver, in A."""

    @abstractmethod
    def voltage(self) -> float:
        """Voltage across this source's terminals, in V."""

    def leaves(self) -> Iterator['Source']:
        """Yield the leaf sources under this one, depth first."""
        yield self

    def nodes(self) -> Iterator['Source']:
        """Yield this source and every source under it, depth first."""
        yield self

    def depth(self) -> int:
        """Nesting depth; a leaf has depth 0."""
        return 0

    def to_dict(self) -> Dict[str, Any]:
        """Describe this source and its evaluated ratings."""
        return {
            'type': type(self).__name__,
            'current': self.current(),
            'voltage': self.voltage(),
        }


def power(source: Source) -> float:
    """
    Calculate the power a source delivers.

    Args:
        source: Any panel or composite

    Returns:
        current * voltage in W
    """
    return source.current() * source.voltage()
