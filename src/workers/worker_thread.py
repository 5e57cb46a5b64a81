"""
WorkerThread — фоновый обработчик сообщений

WorkerThread управляет жизненным циклом (run/terminate/restart) и владеет
собственным handle фонового потока. Каждый экземпляр независим: общего
состояния между экземплярами нет.

Handle (ThreadWorkerHandle) — threading.Thread + queue.Queue:
- Сообщения обрабатываются последовательно вызовом target(message)
- Результат передаётся в on_message, исключение — в on_error (или в лог)
- terminate() отбрасывает ожидающие сообщения; текущее сообщение дорабатывается
"""

import logging
import queue
import threading
from typing import Any, Callable, Optional

from src.core.dates import get_current_utc_time_in_millisec

logger = logging.getLogger(__name__)

MessageHandler = Callable[[Any], Any]
ResultListener = Callable[[Any], None]
ErrorListener = Callable[[BaseException], None]

# Маркер остановки в очереди сообщений
_STOP = object()


# =============================================================================
# THREAD HANDLE
# =============================================================================


class ThreadWorkerHandle:
    """Фоновый поток с очередью входящих сообщений."""

    def __init__(
        self,
        target: MessageHandler,
        on_message: Optional[ResultListener] = None,
        on_error: Optional[ErrorListener] = None,
        name: Optional[str] = None,
        join_timeout_sec: float = 5.0,
    ):
        self._target = target
        self._on_message = on_message
        self._on_error = on_error
        self._join_timeout_sec = join_timeout_sec
        self._inbox: "queue.Queue[Any]" = queue.Queue()
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._loop, name=name, daemon=True)
        self._thread.start()

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def post_message(self, message: Any) -> None:
        self._inbox.put(message)

    def terminate(self) -> None:
        self._stopped.set()
        self._inbox.put(_STOP)
        if self._thread is not threading.current_thread():
            self._thread.join(self._join_timeout_sec)

    def _loop(self) -> None:
        while True:
            message = self._inbox.get()
            if message is _STOP or self._stopped.is_set():
                break
            try:
                result = self._target(message)
                if self._on_message is not None:
                    self._on_message(result)
            except Exception as e:
                if self._on_error is not None:
                    self._on_error(e)
                else:
                    logger.exception("Worker %s failed to handle message", self._thread.name)


HandleFactory = Callable[..., Any]


# =============================================================================
# WORKER THREAD
# =============================================================================


class WorkerThread:
    """
    Обёртка жизненного цикла фонового обработчика.

    Временные метки — epoch миллисекунды.
    """

    def __init__(
        self,
        target: Optional[MessageHandler] = None,
        worker_id: Optional[str] = None,
        on_message: Optional[ResultListener] = None,
        on_error: Optional[ErrorListener] = None,
        handle_factory: HandleFactory = ThreadWorkerHandle,
    ):
        """
        Args:
            target: Обработчик сообщения, вызывается в фоновом потоке
            worker_id: Идентификатор обработчика
            on_message: Получатель результатов target
            on_error: Получатель исключений target
            handle_factory: Фабрика handle (target, on_message=, on_error=, name=)
        """
        self.id = worker_id
        self.target = target
        self.on_message = on_message
        self.on_error = on_error
        self.is_active = False
        self.created_timestamp: Optional[int] = None
        self.terminated_timestamp: Optional[int] = None
        self._handle_factory = handle_factory
        self._handle: Optional[Any] = None

    def run(self) -> bool:
        """
        Запуск фонового обработчика.

        Returns:
            True если запущен; False если уже работает

        Raises:
            RuntimeError: Не задан target
        """
        if self.target is None:
            raise RuntimeError("failed to start worker thread - missing target")
        if self._handle is not None:
            logger.warning("Worker %s is already running", self.id)
            return False

        self.created_timestamp = get_current_utc_time_in_millisec()
        self._handle = self._handle_factory(
            self.target,
            on_message=self.on_message,
            on_error=self.on_error,
            name=f"worker-{self.id}" if self.id else None,
        )
        self.is_active = True
        self.terminated_timestamp = None
        logger.debug("Worker %s started", self.id)
        return True

    def post_message(self, message: Any) -> bool:
        """
        Отправка сообщения обработчику.

        Raises:
            RuntimeError: Обработчик не запущен
        """
        if self._handle is None:
            raise RuntimeError("failed to post message - worker thread non-existent")
        self._handle.post_message(message)
        return True

    def terminate(self) -> bool:
        """
        Остановка обработчика.

        Returns:
            True если обработчик был запущен и остановлен, иначе False
        """
        if self._handle is None:
            return False

        self.terminated_timestamp = get_current_utc_time_in_millisec()
        self._handle.terminate()
        self._handle = None
        self.is_active = False
        logger.debug("Worker %s terminated", self.id)
        return True

    def restart(self) -> bool:
        """terminate() + run(); False если обработчик не был запущен."""
        return self.run() if self.terminate() else False

    @property
    def time_active(self) -> int:
        """
        Время работы (ms) с последнего run().

        После terminate() — длительность завершённого запуска; 0 если run() не вызывался.
        """
        if self.created_timestamp is None:
            return 0
        end = self.terminated_timestamp
        if end is None:
            end = get_current_utc_time_in_millisec()
        return end - self.created_timestamp
