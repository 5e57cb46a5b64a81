"""
InvoiceLedger — журнал счетов пользователя с приоритетами

Упорядоченное мультимножество Order на базе PriorityQueue:
- Min-first: меньший priority обслуживается раньше
- priority=None — уровень по умолчанию, после всех числовых приоритетов
- Равные приоритеты выдаются в порядке добавления

Fail-soft политика: payload, не прошедший order контракт, и невалидный
priority отбрасываются с WARNING в лог, без исключений. Один повреждённый
счёт не блокирует восстановление всего журнала.

Формат хранения (JSON): [{"lineItem": {...order...}, "priority": 2}, ...].
Гидрация и живые изменения используют один путь вставки (enqueue).
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from src.core.contracts import is_invoice_entry, is_order
from src.core.structures import PriorityQueue

from .order import Order

logger = logging.getLogger(__name__)

OrderLike = Union[Order, Mapping]


def is_valid_priority(priority: Any) -> bool:
    """
    Проверка значения приоритета.

    Returns:
        True для None и конечных int/float (bool не является приоритетом)
    """
    if priority is None:
        return True
    if isinstance(priority, bool):
        return False
    if isinstance(priority, int):
        # int конечен при любой величине; float(int) может дать OverflowError
        return True
    return isinstance(priority, float) and math.isfinite(priority)


class InvoiceLedger:
    """
    Журнал счетов с приоритетами.

    Принадлежит одному User; внешняя синхронизация не предусмотрена
    (однопоточная модель мутаций).
    """

    def __init__(self) -> None:
        self._queue: PriorityQueue[Order] = PriorityQueue()

    @property
    def size(self) -> int:
        """Количество счетов в журнале."""
        return self._queue.size

    def __len__(self) -> int:
        return self._queue.size

    def __iter__(self) -> Iterator[Order]:
        """Обход в порядке выдачи; журнал не изменяется."""
        return iter(self._queue)

    def entries(self) -> List[Tuple[Order, Optional[float]]]:
        """Пары (order, priority) в порядке выдачи."""
        return self._queue.entries()

    def enqueue(self, entry: OrderLike, priority: Optional[float] = None) -> bool:
        """
        Добавление счёта.

        Args:
            entry: Order (добавляется как есть) или JSON payload заказа
                   (проверяется контрактом, из него строится новый Order)
            priority: Приоритет; None = уровень по умолчанию

        Returns:
            True если счёт добавлен, False если отброшен
        """
        if not is_valid_priority(priority):
            logger.warning("Invoice rejected: invalid priority %r", priority)
            return False

        if isinstance(entry, Order):
            order = entry
        elif is_order(entry):
            try:
                order = Order.model_validate(entry)
            except ValidationError as e:
                logger.warning(
                    "Invoice rejected: order payload failed model validation (%d errors)",
                    e.error_count(),
                )
                return False
        else:
            logger.warning(
                "Invoice rejected: payload does not match order contract (id=%r)",
                entry.get("id") if isinstance(entry, Mapping) else None,
            )
            return False

        self._queue.enqueue(order, priority)
        return True

    def dequeue(self) -> Optional[Order]:
        """Извлечение следующего счёта; None если журнал пуст."""
        return self._queue.dequeue()

    def peek(self) -> Optional[Order]:
        """Следующий счёт без извлечения; None если журнал пуст."""
        return self._queue.peek()

    def clear(self) -> None:
        self._queue.clear()

    def hydrate(self, entries: Any) -> int:
        """
        Восстановление журнала из сохранённого списка.

        Каждая запись проходит тот же путь, что и живой enqueue().

        Args:
            entries: [{"lineItem": {...}, "priority": number?}, ...]

        Returns:
            Количество принятых счетов
        """
        if entries is None:
            return 0
        if not isinstance(entries, (list, tuple)):
            logger.warning("Invoice history ignored: expected a list, got %s", type(entries).__name__)
            return 0

        accepted = 0
        for index, entry in enumerate(entries):
            if not is_invoice_entry(entry):
                logger.warning("Invoice entry #%d skipped: malformed entry", index)
                continue
            if self.enqueue(entry["lineItem"], entry.get("priority")):
                accepted += 1

        if accepted < len(entries):
            logger.info("Invoice history hydrated: %d of %d entries accepted", accepted, len(entries))
        return accepted

    def to_json(self) -> List[Dict[str, Any]]:
        """
        Сериализация в формат хранения, в порядке выдачи.

        priority опускается для записей уровня по умолчанию.
        """
        result: List[Dict[str, Any]] = []
        for order, priority in self._queue.entries():
            record: Dict[str, Any] = {"lineItem": order.to_json()}
            if priority is not None:
                record["priority"] = priority
            result.append(record)
        return result

    @classmethod
    def from_json(cls, entries: Any) -> "InvoiceLedger":
        ledger = cls()
        ledger.hydrate(entries)
        return ledger
