"""Accumulator for the values collected during a prompt run."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union

logger = logging.getLogger(__name__)

ResultValue = Union[str, int, float, bool, None]
ResultView = Mapping[str, Any]


class ResultAccumulator:
    """Mapping of field names to collected values for one prompt run.

    Only the dispatcher writes to the accumulator. Everything else sees the
    read-only view returned by :meth:`snapshot`.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})

    def set(self, name: str, value: Any) -> None:
        if name in self._values:
            logger.debug("Overwriting result '%s'", name)
        self._values[name] = value

    def update(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self.set(name, value)

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def snapshot(self) -> ResultView:
        """Return a read-only copy of the current values."""

        return MappingProxyType(dict(self._values))

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values!r})"


__all__ = ["ResultAccumulator", "ResultValue", "ResultView"]
