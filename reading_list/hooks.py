# reading_list/hooks.py
"""
Lifecycle hook dispatcher.

Callbacks are attached to a named hook with an optional priority and
run in priority order (then attachment order) when the hook fires.
The application fires ``init`` once at startup and ``rest_api_init``
right after it, before serving requests.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, List, Tuple

from typing_extensions import Literal


logger = logging.getLogger(__name__)

HookName = Literal["init", "rest_api_init"]
Callback = Callable[..., Any]


class HookDispatcher:
    def __init__(self) -> None:
        self._actions: DefaultDict[str, List[Tuple[int, int, Callback]]] = defaultdict(list)
        self._seq = 0
        self._fired: DefaultDict[str, int] = defaultdict(int)

    def add_action(self, hook: HookName, callback: Callback, priority: int = 10) -> None:
        self._actions[hook].append((priority, self._seq, callback))
        self._seq += 1

    def do_action(self, hook: HookName, *args: Any) -> None:
        callbacks = sorted(self._actions.get(hook, []), key=lambda item: (item[0], item[1]))
        logger.debug("Firing %s (%d callbacks)", hook, len(callbacks))
        for _, _, callback in callbacks:
            callback(*args)
        self._fired[hook] += 1

    def did_action(self, hook: HookName) -> int:
        return self._fired[hook]
