"""
Тесты для InvoiceLedger — журнала счетов с приоритетами

Проверяет:
1. Порядок выдачи min-first и стабильность
2. Fail-soft отбрасывание невалидных payload и приоритетов (с логированием)
3. Владение: Order добавляется как есть, dict копируется в новый Order
4. Гидрацию из формата хранения и повторную гидрацию из to_json()
5. clear() и операции на пустом журнале
"""

import json
import logging
import random

import pytest

from src.core.domain import InvoiceLedger, Order, is_valid_priority

LEDGER_LOGGER = "src.core.domain.invoice_ledger"


def ids(ledger: InvoiceLedger) -> list:
    return [order.id for order in ledger]


def drain_ids(ledger: InvoiceLedger) -> list:
    result = []
    while ledger.size:
        result.append(ledger.dequeue().id)
    return result


# =============================================================================
# ORDERING
# =============================================================================


class TestLedgerOrdering:
    """Порядок выдачи"""

    def test_hydration_literal_example(self) -> None:
        """B(1), A(2), C(по умолчанию) → B, A, C"""
        ledger = InvoiceLedger.from_json(
            [
                {"lineItem": {"id": "A"}, "priority": 2},
                {"lineItem": {"id": "B"}, "priority": 1},
                {"lineItem": {"id": "C"}},
            ]
        )

        assert drain_ids(ledger) == ["B", "A", "C"]

    def test_equal_priority_is_stable(self) -> None:
        ledger = InvoiceLedger()
        for order_id in ["first", "second", "third"]:
            ledger.enqueue({"id": order_id}, 1)

        assert drain_ids(ledger) == ["first", "second", "third"]

    def test_default_tier_is_fifo(self) -> None:
        ledger = InvoiceLedger()
        ledger.enqueue({"id": "late-1"})
        ledger.enqueue({"id": "urgent"}, 0)
        ledger.enqueue({"id": "late-2"})

        assert drain_ids(ledger) == ["urgent", "late-1", "late-2"]

    def test_large_int_priorities_exact_order(self) -> None:
        ledger = InvoiceLedger()
        ledger.enqueue({"id": "big"}, 2**53 + 1)
        ledger.enqueue({"id": "small"}, 2**53)

        assert drain_ids(ledger) == ["small", "big"]

    @pytest.mark.parametrize("seed", [3, 11, 99])
    def test_dequeue_non_decreasing_priority(self, seed: int) -> None:
        """Выдача в неубывающем порядке priority, равные — в порядке вставки"""
        rng = random.Random(seed)
        ledger = InvoiceLedger()
        priorities = {}
        for index in range(100):
            priority = rng.randint(0, 5)
            order_id = f"o-{index}"
            priorities[order_id] = (priority, index)
            ledger.enqueue({"id": order_id}, priority)

        drained = drain_ids(ledger)
        keys = [priorities[order_id] for order_id in drained]
        assert keys == sorted(keys)


# =============================================================================
# ENQUEUE VALIDATION
# =============================================================================


class TestLedgerEnqueue:
    """Валидация при добавлении"""

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "no id"},
            {"id": ""},
            {"id": 42},
            {"id": "A", "currency": "usd"},
            {"id": "A", "items": [{"sku": "X", "quantity": 0, "unitPrice": 1.0}]},
            "order-A",
            None,
            ["id", "A"],
        ],
    )
    def test_malformed_payload_leaves_size_unchanged(self, payload) -> None:
        ledger = InvoiceLedger()
        ledger.enqueue({"id": "existing"})

        assert ledger.enqueue(payload, 1) is False
        assert ledger.size == 1

    @pytest.mark.parametrize("priority", [True, "1", float("nan"), float("inf"), [1]])
    def test_invalid_priority_rejected(self, priority) -> None:
        ledger = InvoiceLedger()

        assert ledger.enqueue({"id": "A"}, priority) is False
        assert ledger.size == 0

    def test_rejection_is_logged(self, caplog) -> None:
        ledger = InvoiceLedger()

        with caplog.at_level(logging.WARNING, logger=LEDGER_LOGGER):
            ledger.enqueue({"name": "no id"})

        assert "Invoice rejected" in caplog.text

    def test_order_instance_inserted_as_is(self) -> None:
        order = Order(id="A")
        ledger = InvoiceLedger()

        assert ledger.enqueue(order, 1) is True
        assert ledger.peek() is order

    def test_raw_payload_is_copied(self) -> None:
        """Журнал не разделяет изменяемый dict вызывающего кода"""
        payload = {"id": "A", "items": [{"sku": "SKU-1", "quantity": 2, "unitPrice": 5.0}]}
        ledger = InvoiceLedger()
        ledger.enqueue(payload)

        payload["id"] = "Z"
        payload["items"][0]["quantity"] = 99

        stored = ledger.peek()
        assert stored.id == "A"
        assert stored.items[0].quantity == 2

    def test_valid_priority_values(self) -> None:
        assert is_valid_priority(None)
        assert is_valid_priority(0)
        assert is_valid_priority(-3)
        assert is_valid_priority(1.5)
        assert not is_valid_priority(False)
        assert is_valid_priority(10**400)
        assert not is_valid_priority(-float("inf"))


# =============================================================================
# EMPTY / CLEAR
# =============================================================================


class TestLedgerEmpty:
    """Операции на пустом журнале не выбрасывают исключений"""

    def test_dequeue_empty_returns_none(self) -> None:
        ledger = InvoiceLedger()
        assert ledger.dequeue() is None
        assert ledger.peek() is None
        assert len(ledger) == 0

    def test_clear(self) -> None:
        ledger = InvoiceLedger()
        ledger.enqueue({"id": "A"}, 1)
        ledger.enqueue({"id": "B"})

        ledger.clear()

        assert ledger.size == 0
        assert ledger.dequeue() is None


# =============================================================================
# HYDRATION / SERIALIZATION
# =============================================================================


class TestLedgerHydration:
    """Гидрация и формат хранения"""

    def test_hydrate_skips_corrupt_entries(self) -> None:
        """Повреждённые записи не блокируют восстановление остальных"""
        ledger = InvoiceLedger()
        accepted = ledger.hydrate(
            [
                {"lineItem": {"id": "A"}, "priority": 1},
                "garbage",
                {"priority": 2},
                {"lineItem": {"name": "missing id"}},
                {"lineItem": {"id": "B"}, "priority": True},
                {"lineItem": {"id": "C"}, "priority": None},
            ]
        )

        assert accepted == 2
        assert ids(ledger) == ["A", "C"]

    def test_hydrate_accepts_oversized_int_priority(self) -> None:
        """Целый priority вне диапазона float не прерывает восстановление"""
        raw = '[{"lineItem": {"id": "A"}, "priority": 1}, {"lineItem": {"id": "B"}, "priority": ' + "9" * 400 + "}]"

        ledger = InvoiceLedger.from_json(json.loads(raw))

        assert ledger.size == 2
        assert drain_ids(ledger) == ["A", "B"]

    @pytest.mark.parametrize("entries", [None, "[]", {"lineItem": {"id": "A"}}, 5])
    def test_hydrate_ignores_non_list(self, entries) -> None:
        ledger = InvoiceLedger()
        assert ledger.hydrate(entries) == 0
        assert ledger.size == 0

    def test_to_json_shape(self) -> None:
        ledger = InvoiceLedger()
        ledger.enqueue({"id": "C"})
        ledger.enqueue({"id": "A"}, 2)

        assert ledger.to_json() == [
            {"lineItem": {"id": "A", "items": []}, "priority": 2},
            {"lineItem": {"id": "C", "items": []}},
        ]

    def test_to_json_is_non_destructive(self) -> None:
        ledger = InvoiceLedger()
        ledger.enqueue({"id": "A"}, 1)
        ledger.to_json()
        assert ledger.size == 1

    def test_rehydration_preserves_order(self) -> None:
        """from_json(to_json()) выдаёт тот же порядок, что и исходный журнал"""
        live = InvoiceLedger()
        for order_id, priority in [
            ("a", 3),
            ("b", None),
            ("c", 1),
            ("d", 3),
            ("e", None),
            ("f", 1),
            ("g", 0.5),
        ]:
            live.enqueue({"id": order_id}, priority)

        restored = InvoiceLedger.from_json(live.to_json())

        assert restored.entries() == live.entries()
        assert drain_ids(restored) == drain_ids(live)
