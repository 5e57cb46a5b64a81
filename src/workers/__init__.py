"""
Фоновые обработчики сообщений.
"""

from .worker_thread import ThreadWorkerHandle, WorkerThread

__all__ = [
    "WorkerThread",
    "ThreadWorkerHandle",
]
