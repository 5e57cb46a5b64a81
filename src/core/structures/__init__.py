"""
Структуры данных общего назначения.
"""

from src.core.structures.priority_queue import (
    DEFAULT_PRIORITY_RANK,
    PriorityQueue,
    priority_rank,
)

__all__ = [
    "DEFAULT_PRIORITY_RANK",
    "PriorityQueue",
    "priority_rank",
]
