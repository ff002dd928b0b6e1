"""Scoped ownership of tensors allocated during a pipeline run.

Every tensor tracked by a TensorScope is released exactly once, when the
caller releases it or when the scope exits, whichever comes first.
"""

import logging
import threading
from typing import Dict, Optional

import torch

logger = logging.getLogger(__name__)


class TensorLedger:
    """Counts tensor allocations and releases across pipeline runs."""

    def __init__(self):
        self._lock = threading.Lock()
        self.allocated = 0
        self.released = 0

    def record_allocation(self):
        with self._lock:
            self.allocated += 1

    def record_release(self):
        with self._lock:
            self.released += 1

    @property
    def outstanding(self) -> int:
        return self.allocated - self.released

    @property
    def balanced(self) -> bool:
        return self.allocated == self.released


class TensorScope:
    """Context manager that owns the tensors of one pipeline run."""

    def __init__(self, ledger: Optional[TensorLedger] = None):
        self._ledger = ledger or TensorLedger()
        self._live: Dict[int, object] = {}

    @property
    def ledger(self) -> TensorLedger:
        return self._ledger

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release_all()
        return False

    def track(self, tensor):
        """Take ownership of a freshly allocated tensor and return it."""
        key = id(tensor)
        if key in self._live:
            raise RuntimeError("Tensor is already tracked by this scope")
        self._live[key] = tensor
        self._ledger.record_allocation()
        return tensor

    def release(self, tensor):
        """Release a tracked tensor. Releasing twice is an error."""
        if self._live.pop(id(tensor), None) is None:
            raise RuntimeError("Tensor was already released or never tracked")
        self.dispose(tensor)
        self._ledger.record_release()

    def release_all(self):
        while self._live:
            _, tensor = self._live.popitem()
            self.dispose(tensor)
            self._ledger.record_release()

    @property
    def live_count(self) -> int:
        return len(self._live)

    @staticmethod
    def dispose(tensor):
        """Free a tensor's storage even if a caller still holds a reference."""
        if not isinstance(tensor, torch.Tensor):
            return
        try:
            # Outputs produced under inference_mode are inference tensors
            with torch.inference_mode():
                tensor.untyped_storage().resize_(0)
        except RuntimeError:
            logger.debug("Tensor storage could not be resized; leaving it to the GC")
