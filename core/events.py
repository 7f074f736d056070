import logging
from dataclasses import dataclass
from typing import Callable, List

logger = logging.getLogger("community.events")

# kinds whose views live under /projects
PROJECT_SCOPED = {"project", "like", "subscription", "feed"}


@dataclass(frozen=True)
class ResourceChanged:
    """Emitted after a mutation commits.

    ``resource_id`` is the id of the project or idea whose views went stale,
    not the id of the like/subscription/feed row.
    """
    kind: str
    resource_id: int | None
    action: str

    @property
    def views(self) -> List[str]:
        root = "projects" if self.kind in PROJECT_SCOPED else "ideas"
        if self.resource_id is None:
            return [root]
        return [root, f"{root}/{self.resource_id}"]


Listener = Callable[[ResourceChanged], None]


class EventBus:
    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: ResourceChanged) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # the write is already committed; a failing listener must not surface to the caller
                logger.exception("Listener %r failed for %s", listener, event)


event_bus = EventBus()


def emit(kind: str, resource_id: int | None, action: str) -> ResourceChanged:
    event = ResourceChanged(kind=kind, resource_id=resource_id, action=action)
    event_bus.emit(event)
    return event


def log_stale_views(event: ResourceChanged) -> None:
    logger.info("%s %s %s -> stale views %s", event.kind, event.resource_id, event.action, event.views)
