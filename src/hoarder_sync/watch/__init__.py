"""Reactive local-edit propagation and periodic scheduling."""

from hoarder_sync.watch.debounce import DebouncedTask
from hoarder_sync.watch.poller import LocalEditPoller
from hoarder_sync.watch.propagator import NotePropagator
from hoarder_sync.watch.scheduler import PeriodicSync

__all__ = ["DebouncedTask", "LocalEditPoller", "NotePropagator", "PeriodicSync"]
