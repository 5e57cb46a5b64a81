"""
Тесты для PriorityQueue

Проверяет:
1. Порядок выдачи min-first
2. Стабильность при равных приоритетах
3. Уровень по умолчанию (priority=None) после всех числовых
4. Fail-soft поведение пустой очереди
5. Неразрушающий обход
"""

import random

import pytest

from src.core.structures import DEFAULT_PRIORITY_RANK, PriorityQueue, priority_rank


def drain(queue: PriorityQueue) -> list:
    result = []
    while not queue.is_empty():
        result.append(queue.dequeue())
    return result


# =============================================================================
# ORDERING
# =============================================================================


class TestPriorityQueueOrdering:
    """Порядок выдачи"""

    def test_dequeue_min_first(self) -> None:
        """Меньший priority выдаётся раньше"""
        queue = PriorityQueue()
        queue.enqueue("c", 3)
        queue.enqueue("a", 1)
        queue.enqueue("b", 2)

        assert drain(queue) == ["a", "b", "c"]

    def test_equal_priorities_preserve_insertion_order(self) -> None:
        """Равные приоритеты — FIFO"""
        queue = PriorityQueue()
        for item in ["first", "second", "third"]:
            queue.enqueue(item, 5)

        assert drain(queue) == ["first", "second", "third"]

    def test_default_priority_after_numeric(self) -> None:
        """priority=None выдаётся после любого числового приоритета"""
        queue = PriorityQueue()
        queue.enqueue("x")
        queue.enqueue("y", 1_000_000)
        queue.enqueue("z")

        assert drain(queue) == ["y", "x", "z"]

    def test_negative_and_float_priorities(self) -> None:
        queue = PriorityQueue()
        queue.enqueue("c", 0.5)
        queue.enqueue("b", 0)
        queue.enqueue("a", -1.5)

        assert drain(queue) == ["a", "b", "c"]

    def test_items_are_never_compared(self) -> None:
        """Несравнимые элементы (dict) с равным приоритетом не вызывают TypeError"""
        queue = PriorityQueue()
        queue.enqueue({"id": 1}, 1)
        queue.enqueue({"id": 2}, 1)

        assert drain(queue) == [{"id": 1}, {"id": 2}]

    def test_large_ints_keep_exact_order(self) -> None:
        """Целые за пределами точности float не сливаются в один ранг"""
        queue = PriorityQueue()
        queue.enqueue("big", 2**53 + 1)
        queue.enqueue("small", 2**53)
        queue.enqueue("huge", 10**400)
        queue.enqueue("default")

        assert drain(queue) == ["small", "big", "huge", "default"]

    def test_int_and_float_compared_exactly(self) -> None:
        queue = PriorityQueue()
        queue.enqueue("float", 2.0**53)
        queue.enqueue("int", 2**53 + 1)

        assert drain(queue) == ["float", "int"]

    @pytest.mark.parametrize("seed", [1, 7, 42, 2026])
    def test_random_sequences_match_stable_sort(self, seed: int) -> None:
        """Выдача == стабильная сортировка по (rank, порядок вставки)"""
        rng = random.Random(seed)
        inserted = []
        queue = PriorityQueue()
        for index in range(200):
            priority = rng.choice([None, 0, 1, 2, 3, -1, 2.5])
            inserted.append((index, priority))
            queue.enqueue(index, priority)

        expected = [
            index for index, priority in sorted(inserted, key=lambda e: (priority_rank(e[1]), e[0]))
        ]
        assert drain(queue) == expected


# =============================================================================
# EMPTY QUEUE / CLEAR
# =============================================================================


class TestPriorityQueueEmpty:
    """Пустая очередь не выбрасывает исключений"""

    def test_empty_queue(self) -> None:
        queue = PriorityQueue()
        assert queue.size == 0
        assert len(queue) == 0
        assert queue.is_empty()
        assert queue.dequeue() is None
        assert queue.peek() is None

    def test_clear(self) -> None:
        queue = PriorityQueue()
        queue.enqueue("a", 1)
        queue.enqueue("b")

        queue.clear()

        assert queue.size == 0
        assert queue.dequeue() is None

    def test_fifo_after_clear(self) -> None:
        """После clear() стабильность сохраняется"""
        queue = PriorityQueue()
        queue.enqueue("old", 1)
        queue.clear()
        queue.enqueue("a", 1)
        queue.enqueue("b", 1)

        assert drain(queue) == ["a", "b"]


# =============================================================================
# VIEWS
# =============================================================================


class TestPriorityQueueViews:
    """peek / entries / iteration"""

    def test_peek_does_not_remove(self) -> None:
        queue = PriorityQueue()
        queue.enqueue("b", 2)
        queue.enqueue("a", 1)

        assert queue.peek() == "a"
        assert queue.size == 2
        assert queue.dequeue() == "a"

    def test_entries_non_destructive(self) -> None:
        queue = PriorityQueue()
        queue.enqueue("c")
        queue.enqueue("a", 1)
        queue.enqueue("b", 1)

        assert queue.entries() == [("a", 1), ("b", 1), ("c", None)]
        assert list(queue) == ["a", "b", "c"]
        assert queue.size == 3

    def test_default_rank(self) -> None:
        assert priority_rank(None) == DEFAULT_PRIORITY_RANK
        assert priority_rank(3) == (0, 3)
        assert priority_rank(10**400) < DEFAULT_PRIORITY_RANK
