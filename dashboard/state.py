"""View-state snapshot and the pure reducer that advances it.

A refresh cycle is ``Idle -> Loading -> (Success | Failed) -> Idle``.
``reduce`` never mutates its input; every transition returns a new
``ViewState`` so the page never observes a half-applied update.

Overlapping refreshes are last-write-wins by default: whichever cycle
completes last decides what is on screen, even if it was issued first.
Passing ``discard_stale=True`` drops completions from any cycle other than
the most recently started one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from api.models import Incident, Summary


@dataclass(frozen=True)
class ViewState:
    summary: Summary | None = None
    incidents: tuple[Incident, ...] = ()
    loading: bool = True
    generation: int = 0  # id of the most recently started refresh


@dataclass(frozen=True)
class RefreshStarted:
    generation: int


@dataclass(frozen=True)
class RefreshSucceeded:
    generation: int
    summary: Summary
    incidents: tuple[Incident, ...]


@dataclass(frozen=True)
class RefreshFailed:
    generation: int
    error: str


Event = RefreshStarted | RefreshSucceeded | RefreshFailed

INITIAL_STATE = ViewState()


def reduce(state: ViewState, event: Event, *, discard_stale: bool = False) -> ViewState:
    if isinstance(event, RefreshStarted):
        return replace(state, loading=True, generation=event.generation)

    if discard_stale and event.generation != state.generation:
        return state

    if isinstance(event, RefreshSucceeded):
        return replace(
            state,
            summary=event.summary,
            incidents=tuple(event.incidents),
            loading=False,
        )
    if isinstance(event, RefreshFailed):
        # keep the last good summary/incidents on screen
        return replace(state, loading=False)

    raise TypeError(f"unknown event: {event!r}")
