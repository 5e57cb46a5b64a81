"""
PriorityQueue — стабильная очередь с приоритетами

Binary heap (heapq) с вторичным ключом sequence:
- Меньшее значение priority обслуживается раньше (min-first)
- priority=None — уровень по умолчанию, обслуживается после всех числовых
- Равные приоритеты сохраняют порядок вставки (stability)

ИНВАРИАНТЫ:
1. dequeue() возвращает элементы в неубывающем порядке priority
2. При равных priority порядок выдачи == порядок enqueue
3. Операции на пустой очереди возвращают None, исключений нет
"""

import heapq
import itertools
from typing import Final, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]
Rank = Tuple[int, Number]

# Ранг уровня по умолчанию: после любого числового приоритета
DEFAULT_PRIORITY_RANK: Final[Rank] = (1, 0)


# (rank, sequence, priority, item); sequence уникален, item никогда не сравнивается
_HeapEntry = Tuple[Rank, int, Optional[Number], T]


def priority_rank(priority: Optional[Number]) -> Rank:
    """
    Ранг приоритета для сравнения в куче.

    Args:
        priority: Числовой приоритет или None

    Returns:
        (0, priority) для числа, DEFAULT_PRIORITY_RANK для None.
        Значение не приводится к float: int и float сравниваются точно.
    """
    if priority is None:
        return DEFAULT_PRIORITY_RANK
    return (0, priority)


class PriorityQueue(Generic[T]):
    """
    Стабильная min-first очередь с приоритетами.

    Сложность: enqueue/dequeue O(log n), peek O(1), упорядоченная итерация O(n log n).
    """

    def __init__(self) -> None:
        self._heap: List[_HeapEntry] = []
        # Монотонный счётчик; не сбрасывается при clear()
        self._counter = itertools.count()

    @property
    def size(self) -> int:
        """Текущее количество элементов."""
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, item: T, priority: Optional[Number] = None) -> None:
        """
        Добавление элемента.

        Args:
            item: Элемент очереди
            priority: Приоритет (None = уровень по умолчанию)
        """
        entry = (priority_rank(priority), next(self._counter), priority, item)
        heapq.heappush(self._heap, entry)

    def dequeue(self) -> Optional[T]:
        """
        Извлечение элемента с наименьшим приоритетом.

        Returns:
            Элемент, либо None если очередь пуста
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[3]

    def peek(self) -> Optional[T]:
        """Следующий элемент без извлечения (None если пусто)."""
        if not self._heap:
            return None
        return self._heap[0][3]

    def clear(self) -> None:
        self._heap.clear()

    def entries(self) -> List[Tuple[T, Optional[Number]]]:
        """
        Снимок содержимого в порядке выдачи.

        Returns:
            Список пар (item, priority); очередь не изменяется
        """
        return [(entry[3], entry[2]) for entry in sorted(self._heap, key=lambda e: (e[0], e[1]))]

    def __iter__(self) -> Iterator[T]:
        for item, _ in self.entries():
            yield item
