"""Sub-test group scoping.

A run is either at the top level or inside exactly one sub-test group.
Groups do not nest: a group folds into a single unit of its parent, and
there is no defined way to fold a group into another group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from testtally.counter import ResultCounter
from testtally.outcomes import NestedGroupError, UsageError


logger = logging.getLogger(__name__)


@dataclass
class SubtestGroup:
    """State of the open sub-test group."""

    name: str
    unit_name: str = ""
    counter: ResultCounter = field(default_factory=ResultCounter)


@dataclass(frozen=True)
class TopLevel:
    """No group is open; results count toward the session totals."""


@dataclass(frozen=True)
class InGroup:
    """A group is open; results count toward ``group.counter``."""

    group: SubtestGroup


class ScopeStack:
    """Tracks whether execution is inside a sub-test group."""

    def __init__(self) -> None:
        self.current: TopLevel | InGroup = TopLevel()

    @property
    def active(self) -> bool:
        return isinstance(self.current, InGroup)

    @property
    def group(self) -> SubtestGroup | None:
        if isinstance(self.current, InGroup):
            return self.current.group
        return None

    @property
    def group_success(self) -> int:
        group = self.group
        return group.counter.success if group else 0

    @property
    def group_count(self) -> int:
        group = self.group
        return group.counter.total if group else 0

    def begin(self, label: str) -> SubtestGroup:
        """Open a group named ``label``.

        Raises:
            NestedGroupError: If a group is already open.
        """
        if isinstance(self.current, InGroup):
            raise NestedGroupError(
                f"Cannot begin sub-test group {label!r} inside open group {self.current.group.name!r}"
            )
        group = SubtestGroup(name=label)
        self.current = InGroup(group)
        logger.debug("Opened sub-test group %r", label)
        return group

    def set_unit_name(self, label: str) -> bool:
        """Label the next result inside the open group. Returns False outside a group."""
        group = self.group
        if group is None:
            return False
        group.unit_name = label
        return True

    def end(self) -> SubtestGroup:
        """Close the open group and return its final state.

        Raises:
            UsageError: If no group is open.
        """
        if not isinstance(self.current, InGroup):
            raise UsageError("Cannot end a sub-test group: no group is open")
        group = self.current.group
        self.current = TopLevel()
        logger.debug(
            "Closed sub-test group %r (%d/%d passed)",
            group.name,
            group.counter.success,
            group.counter.total,
        )
        return group

    def reset(self) -> None:
        self.current = TopLevel()
