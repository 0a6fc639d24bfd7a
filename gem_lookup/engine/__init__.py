"""Engine components: normalise → schedule → dispatch."""

from .dispatcher import Dispatcher
from .fetcher import Fetcher
from .normalizer import normalize
from .scheduler import BatchPlan, BatchScheduler, schedule

__all__ = [
    "BatchPlan",
    "BatchScheduler",
    "Dispatcher",
    "Fetcher",
    "normalize",
    "schedule",
]
