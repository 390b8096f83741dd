# shelves/smart/context.py
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from shelves.sa.store import RecordStore

@dataclass(frozen=True)
class ShelfContext:
    """What a resolver needs to read: the store and the read fan-out width."""
    store: RecordStore
    max_workers: int = 8

    def gather(self, tasks: Mapping[Any, Callable[[], Any]]) -> Dict[Any, Any]:
        """Run independent reads concurrently and return their results by key.

        Results are collected only once every task has finished. If any task
        failed, its exception is raised and no partial result is returned.
        """
        if not tasks:
            return {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(tasks))) as executor:
            futures = {key: executor.submit(task) for key, task in tasks.items()}
        return {key: future.result() for key, future in futures.items()}
