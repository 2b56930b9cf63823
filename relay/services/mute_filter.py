"""Mute-aware split of a recipient set."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MuteSplit:
    """Push-bound and persistence-bound views of one recipient set.

    Muted recipients are dropped from ``push_eligible`` only; ``persist``
    is always the full set so they still get an in-app record.
    """

    push_eligible: frozenset[str]
    persist: frozenset[str]
    muted_count: int = 0


def split(recipients: Iterable[str], muted: Iterable[str] = ()) -> MuteSplit:
    """Split recipients into push-eligible and persisted subsets."""
    everyone = frozenset(recipients)
    silenced = everyone & frozenset(muted)
    return MuteSplit(
        push_eligible=everyone - silenced,
        persist=everyone,
        muted_count=len(silenced),
    )
