"""Services layer - Application orchestration.

Available services:
- DistanceBatchService: Queries a destination against several sources
"""

from .batch_service import DistanceBatchService, mark_nearest

__all__ = ["DistanceBatchService", "mark_nearest"]
