"""Work deferred until the current request's writes are committed."""

from collections.abc import Awaitable, Callable

import logfire

Hook = Callable[[], Awaitable[object]]


class AfterCommit:
    """Hooks that run once the request transaction has committed.

    The persistence layer owns one instance per request and runs it after
    a successful commit. When the request fails the hooks are dropped, so
    side effects such as emails never describe a change that did not land.
    """

    def __init__(self) -> None:
        self._hooks: list[Hook] = []

    def add(self, hook: Hook) -> None:
        self._hooks.append(hook)

    def __len__(self) -> int:
        return len(self._hooks)

    async def run(self) -> None:
        """Run and clear the queued hooks, in the order they were added."""
        hooks, self._hooks = self._hooks, []
        if hooks:
            logfire.debug("Running after-commit hooks", count=len(hooks))
        for hook in hooks:
            await hook()

    def discard(self) -> None:
        if self._hooks:
            logfire.info("Dropping after-commit hooks", count=len(self._hooks))
        self._hooks = []
