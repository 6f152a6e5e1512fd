"""Importance levels attached to relayed log entries.

Purpose
-------
Classify submissions so the debounce scheduler knows which entries may be
dropped under load and which must survive until the next flush.

Contents
--------
* :class:`Importance` closed enum with ordinal helpers.
* :data:`IMPORTANCE_COUNT` static number of levels used for bound checks.

System Role
-----------
Shared by the validator (ordinal range check) and the scheduler (the
``UNIMPORTANT`` drop rule).
"""

from __future__ import annotations

from enum import Enum


class Importance(Enum):
    """Ordered importance levels; ``UNIMPORTANT`` is always ordinal ``0``."""

    UNIMPORTANT = 0
    NORMAL = 1
    IMPORTANT = 2

    @property
    def ordinal(self) -> int:
        """Return the wire ordinal of the level."""

        return self.value

    @property
    def droppable(self) -> bool:
        """Return ``True`` when entries of this level may be silently dropped."""

        return self is Importance.UNIMPORTANT

    @classmethod
    def default(cls) -> "Importance":
        """Level assigned when a submission omits the importance field."""
        return cls.NORMAL

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Importance":
        """Return the level for ``ordinal``.

        Examples
        --------
        >>> Importance.from_ordinal(0)
        <Importance.UNIMPORTANT: 0>
        >>> Importance.from_ordinal(7)
        Traceback (most recent call last):
        ...
        ValueError: Unsupported importance ordinal: 7
        """
        try:
            return cls(ordinal)
        except ValueError as exc:
            raise ValueError(f"Unsupported importance ordinal: {ordinal}") from exc

    @classmethod
    def from_name(cls, name: str) -> "Importance":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown importance level: {name!r}") from exc


IMPORTANCE_COUNT: int = len(Importance)
"""Number of importance levels; valid ordinals are ``0 .. IMPORTANCE_COUNT - 1``."""


__all__ = ["IMPORTANCE_COUNT", "Importance"]
