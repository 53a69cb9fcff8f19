"""Handler decorator that fires hooks before forwarding records."""

from collections.abc import Sequence

from hooklog.hooks.base import Hook
from hooklog.hooks.dispatcher import HookDispatcher, HookFailureStats
from hooklog.hooks.registry import HookRegistry
from hooklog.record import Attr, Record

from .base import Context, Handler


class HookHandler:
    """Wraps an inner handler and fires matching hooks for every record.

    For each record, hooks whose levels contain the record's level fire in
    registration order, each on its own copy of the record, and any error
    they raise is absorbed. The original record is then forwarded to the
    inner handler, whose outcome (return or exception) is the outcome of
    :meth:`handle`.

    Handlers derived through :meth:`with_attrs` and :meth:`with_group` share
    this handler's registry, so a hook added to either is seen by both.
    """

    def __init__(
        self,
        inner: Handler,
        *hooks: Hook,
        registry: HookRegistry | None = None,
        log_failures: bool = False,
    ):
        """Initialize the hook handler.

        Args:
            inner: Handler that receives every record after the hooks
            *hooks: Initial hooks, registered in order
            registry: Existing registry to share instead of creating one
            log_failures: Log hook failures as diagnostic messages
        """
        self._inner = inner
        self._registry = registry if registry is not None else HookRegistry()
        for hook in hooks:
            self._registry.add(hook)
        self._dispatcher = HookDispatcher(self._registry, log_failures=log_failures)

    @classmethod
    def _derive(cls, parent: "HookHandler", inner: Handler) -> "HookHandler":
        derived = cls.__new__(cls)
        derived._inner = inner
        derived._registry = parent._registry
        derived._dispatcher = parent._dispatcher
        return derived

    @property
    def inner(self) -> Handler:
        return self._inner

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    @property
    def hooks(self) -> tuple[Hook, ...]:
        return self._registry.snapshot()

    @property
    def failures(self) -> HookFailureStats:
        return self._dispatcher.failures

    def add_hook(self, hook: Hook) -> None:
        """Register ``hook`` after all existing hooks."""
        self._registry.add(hook)

    def enabled(self, ctx: Context, level: int) -> bool:
        return self._inner.enabled(ctx, level)

    def handle(self, ctx: Context, record: Record) -> None:
        self._dispatcher.dispatch(record)
        self._inner.handle(ctx, record)

    def with_attrs(self, attrs: Sequence[Attr]) -> "HookHandler":
        return self._derive(self, self._inner.with_attrs(attrs))

    def with_group(self, name: str) -> "HookHandler":
        return self._derive(self, self._inner.with_group(name))
