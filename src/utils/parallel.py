"""Parallel processing utilities for independent batch work."""

import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any, Callable, Dict, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ParallelProcessor:
    """
    Manages parallel processing with ProcessPoolExecutor.

    Worker functions must be module-level (picklable) and should return a
    dict. A worker that raises yields an error dict instead of aborting the
    batch:

        {'status': 'error', 'item': <item>, 'error': <message>, 'error_type': ...}

    Results are returned in input order.

    Usage:
        def worker_func(args):
            num_topics, seed = args
            return {'status': 'success', 'num_topics': num_topics}

        processor = ParallelProcessor(max_workers=4)
        results = processor.process_batch(
            items=[(2, 42), (4, 42)],
            worker_func=worker_func,
        )
    """

    def __init__(
        self,
        max_workers: Optional[int] = None,
        max_tasks_per_child: int = 50
    ):
        """
        Initialize parallel processor.

        Args:
            max_workers: Number of parallel workers (default: auto-determine)
            max_tasks_per_child: Restart workers after N tasks (default: 50)
        """
        self.max_workers = max_workers
        self.max_tasks_per_child = max_tasks_per_child

    def should_use_parallel(self, num_items: int, max_workers: Optional[int] = None) -> bool:
        """
        Determine if parallel processing is beneficial.

        Args:
            num_items: Number of items to process
            max_workers: Max workers requested (None or 1 means sequential)

        Returns:
            True if should use parallel processing
        """
        return max_workers is not None and max_workers > 1 and num_items > 1

    def process_batch(
        self,
        items: List[T],
        worker_func: Callable[[T], Dict[str, Any]],
        progress_callback: Optional[Callable[[int, Dict[str, Any]], None]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Apply worker_func to every item.

        Args:
            items: List of items to process
            worker_func: Function to apply to each item (receives item as arg)
            progress_callback: Optional callback for progress updates (receives count, result)

        Returns:
            List of results from worker_func, in the same order as items
        """
        if self.max_workers is None:
            max_workers = min(os.cpu_count() or 4, len(items))
        else:
            max_workers = self.max_workers

        if not self.should_use_parallel(len(items), max_workers):
            return self._process_sequential(items, worker_func, progress_callback)

        return self._process_parallel(items, worker_func, progress_callback, max_workers)

    def _process_sequential(
        self,
        items: List[T],
        worker_func: Callable,
        progress_callback: Optional[Callable],
    ) -> List[Dict[str, Any]]:
        """Process items sequentially."""
        results = []

        for idx, item in enumerate(items, 1):
            logger.debug(f"[{idx}/{len(items)}] Processing: {item}")

            try:
                result = worker_func(item)
            except Exception as e:
                logger.error(f"Task failed with exception: {item} - {e}")
                result = self._error_result(item, str(e), 'exception')
            results.append(result)

            if progress_callback:
                progress_callback(idx, result)

        return results

    def _process_parallel(
        self,
        items: List[T],
        worker_func: Callable,
        progress_callback: Optional[Callable],
        max_workers: int
    ) -> List[Dict[str, Any]]:
        """Process items in a process pool, collecting results by input position."""
        results: List[Optional[Dict[str, Any]]] = [None] * len(items)

        with ProcessPoolExecutor(
            max_workers=max_workers,
            max_tasks_per_child=self.max_tasks_per_child
        ) as executor:
            future_to_index = {
                executor.submit(worker_func, item): idx
                for idx, item in enumerate(items)
            }

            completed_count = 0
            for future in as_completed(future_to_index):
                completed_count += 1
                idx = future_to_index[future]
                item = items[idx]

                try:
                    result = future.result()
                except Exception as e:
                    logger.error(f"Task failed with exception: {item} - {e}")
                    result = self._error_result(item, str(e), 'exception')

                results[idx] = result
                logger.debug(
                    f"[{completed_count}/{len(items)}] {result.get('status', 'unknown').upper()}"
                )

                if progress_callback:
                    progress_callback(completed_count, result)

        return results

    @staticmethod
    def _error_result(item: Any, message: str, error_type: str) -> Dict[str, Any]:
        return {
            'status': 'error',
            'item': item,
            'error': message,
            'error_type': error_type,
        }
