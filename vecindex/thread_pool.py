"""A fixed-size worker pool with bounded queueing, and process-wide build/search pools."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

logger = logging.getLogger(__name__)

_TASK_QUEUE_FACTOR = 16


class ThreadPool:
    """Runs submitted callables on a fixed number of threads.

    At most ``num_threads * 16`` tasks wait in the queue; further submissions
    block until room frees up.
    """

    _global_lock = threading.Lock()
    _global_build_size = 0
    _global_search_size = 0
    _global_build_pool: ThreadPool | None = None
    _global_search_pool: ThreadPool | None = None

    def __init__(self, num_threads: int) -> None:
        if num_threads <= 0:
            raise ValueError("num_threads must be positive")
        self._num_threads = num_threads
        self._executor = ThreadPoolExecutor(max_workers=num_threads)
        self._slots = threading.BoundedSemaphore(
            num_threads + num_threads * _TASK_QUEUE_FACTOR
        )

    def push(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Schedule ``func(*args, **kwargs)`` and return its future."""
        self._slots.acquire()
        try:
            future = self._executor.submit(func, *args, **kwargs)
        except BaseException:
            self._slots.release()
            raise
        future.add_done_callback(lambda _f: self._slots.release())
        return future

    def size(self) -> int:
        return self._num_threads

    def shutdown(self) -> None:
        """Wait for queued tasks to finish and stop the threads."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    @classmethod
    def _init_size(cls, attr: str, num_threads: int) -> None:
        if num_threads <= 0:
            logger.error("num_threads should be bigger than 0")
            return
        with cls._global_lock:
            if getattr(cls, attr) == 0:
                setattr(cls, attr, num_threads)

    @staticmethod
    def init_global_build_thread_pool(num_threads: int) -> None:
        """Set the size of the global build pool unless it is already set."""
        ThreadPool._init_size("_global_build_size", num_threads)
        logger.warning(
            "Global Build ThreadPool has already been initialized with threads num: %d",
            ThreadPool._global_build_size,
        )

    @staticmethod
    def init_global_search_thread_pool(num_threads: int) -> None:
        """Set the size of the global search pool unless it is already set."""
        ThreadPool._init_size("_global_search_size", num_threads)
        logger.warning(
            "Global Search ThreadPool has already been initialized with threads num: %d",
            ThreadPool._global_search_size,
        )

    @classmethod
    def _global_pool(cls, size_attr: str, pool_attr: str, label: str) -> ThreadPool:
        if getattr(cls, size_attr) == 0:
            cls._init_size(size_attr, os.cpu_count() or 1)
            logger.warning(
                "Global %s ThreadPool has not been initialized yet, init it with threads num: %d",
                label,
                getattr(cls, size_attr),
            )
        with cls._global_lock:
            pool = getattr(cls, pool_attr)
            if pool is None:
                pool = ThreadPool(getattr(cls, size_attr))
                setattr(cls, pool_attr, pool)
            return pool

    @staticmethod
    def get_global_build_thread_pool() -> ThreadPool:
        """Return the process-wide build pool, creating it on first use."""
        return ThreadPool._global_pool("_global_build_size", "_global_build_pool", "Build")

    @staticmethod
    def get_global_search_thread_pool() -> ThreadPool:
        """Return the process-wide search pool, creating it on first use."""
        return ThreadPool._global_pool(
            "_global_search_size", "_global_search_pool", "Search"
        )