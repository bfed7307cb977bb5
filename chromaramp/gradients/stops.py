"""
Gradient stops and the ordered stop set.

A ``StopSet`` is an immutable snapshot: every change produces a new set, so
gradients that share a snapshot never see each other's edits.
"""
from __future__ import annotations
import bisect
import logging
import numbers
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

from boundednumbers.functions import clamp

from ..colors import ColorBase
from ..defaults import DEFAULT_STOP_WEIGHT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stop:
    """
    A gradient control point.

    ``weight`` is clamped to [0, 1]; it sets where, within the segment to
    the next stop, the visual halfway point falls.
    """
    position: float
    color: ColorBase
    weight: float = field(default=DEFAULT_STOP_WEIGHT)

    def __post_init__(self):
        if not isinstance(self.color, ColorBase):
            raise TypeError(f"Stop color must be a ColorBase, got {type(self.color).__name__}")
        object.__setattr__(self, 'position', float(self.position))
        object.__setattr__(self, 'weight', clamp(float(self.weight), 0.0, 1.0))

    def moved_to(self, position: float) -> Stop:
        """Return a copy of this stop at ``position``."""
        if position == self.position:
            return self
        return replace(self, position=position)


class NormalizeMode(str, Enum):
    """How ``StopSet.from_stops`` brings positions into [0, 1]."""
    NORMALIZE = "normalize"
    TRUNCATE = "truncate"


def as_normalize_mode(mode: Union[NormalizeMode, str]) -> NormalizeMode:
    if isinstance(mode, NormalizeMode):
        return mode
    try:
        return NormalizeMode(str(mode).lower())
    except ValueError:
        raise ValueError(f"Unknown normalize mode: {mode!r}") from None


def _keyed(stops: Iterable[Stop]) -> Dict[float, Stop]:
    """Key stops by position; later duplicates overwrite earlier ones."""
    keyed: Dict[float, Stop] = {}
    for stop in stops:
        if not isinstance(stop, Stop):
            raise TypeError(f"Expected Stop, got {type(stop).__name__}")
        keyed[stop.position] = stop
    return keyed


class StopSet:
    """
    Stops ordered by ascending, unique position.

    Lookups are binary searches over the sorted positions.
    """
    __slots__ = ('_positions', '_stops')

    def __init__(self, stops: Iterable[Stop] = ()):
        keyed = _keyed(stops)
        self._positions: Tuple[float, ...] = tuple(sorted(keyed))
        self._stops: Tuple[Stop, ...] = tuple(keyed[p] for p in self._positions)

    @classmethod
    def from_stops(
        cls,
        stops: Sequence[Stop],
        mode: Union[NormalizeMode, str] = NormalizeMode.NORMALIZE,
    ) -> StopSet:
        """
        Build a stop set from an arbitrary stop list.

        - no stops: empty set
        - one stop: that stop, moved to 0.0
        - NORMALIZE: positions rescaled so the smallest lands on 0.0 and the
          largest on 1.0
        - TRUNCATE: stops outside [0, 1] are dropped, then the outermost
          survivors are copied to 0.0 and 1.0 if those are missing; if
          nothing survives the set is empty
        """
        mode = as_normalize_mode(mode)
        stops = list(stops)

        if not stops:
            return cls()
        if len(stops) == 1:
            (only,) = _keyed(stops).values()
            return cls([only.moved_to(0.0)])

        keyed = _keyed(stops)
        if mode is NormalizeMode.NORMALIZE:
            result = cls._normalized(stops, keyed)
        else:
            result = cls._truncated(keyed)
        logger.debug("Built %d stops from %d (%s)", len(result), len(stops), mode.value)
        return result

    @classmethod
    def _normalized(cls, stops: List[Stop], keyed: Dict[float, Stop]) -> StopSet:
        offset = min(keyed)
        span = max(keyed) - offset
        if span == 0.0:
            logger.warning(
                "All %d stops share position %r; keeping only the last one", len(stops), offset
            )
            return cls([keyed[offset].moved_to(0.0)])
        # division keeps the largest key at exactly 1.0
        return cls(stop.moved_to((stop.position - offset) / span) for stop in stops)

    @classmethod
    def _truncated(cls, keyed: Dict[float, Stop]) -> StopSet:
        kept = {p: s for p, s in keyed.items() if 0.0 <= p <= 1.0}
        if not kept:
            logger.debug("Truncation dropped all %d stops", len(keyed))
            return cls()

        first, last = min(kept), max(kept)
        if first > 0.0:
            kept[0.0] = kept[first].moved_to(0.0)
        if last < 1.0:
            kept[1.0] = kept[last].moved_to(1.0)
        return cls(kept.values())

    # ------------------ SNAPSHOT EDITS ------------------
    def with_stop(self, stop: Stop) -> StopSet:
        """New set with ``stop`` inserted, replacing any stop at the same position."""
        return StopSet(self._stops + (stop,))

    def without(self, position: float) -> StopSet:
        """New set without the stop keyed exactly at ``position``."""
        if position not in self:
            return self
        return StopSet(s for s in self._stops if s.position != position)

    # ------------------ LOOKUP ------------------
    def lower_bound(self, position: float) -> int:
        """Index of the first stop whose position is >= ``position``."""
        return bisect.bisect_left(self._positions, position)

    @property
    def positions(self) -> Tuple[float, ...]:
        return self._positions

    def as_dict(self) -> Dict[float, Stop]:
        return dict(zip(self._positions, self._stops))

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, numbers.Real):
            return False
        i = self.lower_bound(position)
        return i < len(self._positions) and self._positions[i] == position

    def __getitem__(self, index: int) -> Stop:
        return self._stops[index]

    def __iter__(self) -> Iterator[Stop]:
        return iter(self._stops)

    def __len__(self) -> int:
        return len(self._stops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopSet):
            return NotImplemented
        return self._stops == other._stops

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        return f"StopSet({list(self._stops)!r})"
