"""Fixed sample data for each demo.

Anything that depends on the current time takes it as a parameter so
callers (and tests) decide what "now" is.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

from recordbook.domain.model.finance import PaymentChannel, Transaction
from recordbook.domain.model.inventory_record import InventoryRecord
from recordbook.domain.model.patient import Patient, Prescription
from recordbook.domain.model.stock import ElectronicItem, GroceryItem


def patients() -> list[Patient]:
    return [
        Patient(1, "Alice Johnson", 34, "Female"),
        Patient(2, "Bob Smith", 45, "Male"),
        Patient(3, "Carol Lee", 29, "Female"),
    ]


def prescriptions() -> list[Prescription]:
    return [
        Prescription(1, 1, "Amoxicillin", date(2025, 1, 10)),
        Prescription(2, 1, "Ibuprofen", date(2025, 3, 5)),
        Prescription(3, 2, "Lisinopril", date(2025, 2, 20)),
        Prescription(4, 3, "Metformin", date(2025, 4, 1)),
        Prescription(5, 2, "Atorvastatin", date(2025, 5, 12)),
    ]


def inventory_records(now: datetime) -> list[InventoryRecord]:
    return [
        InventoryRecord(1, "Laptop", 10, now),
        InventoryRecord(2, "Keyboard", 25, now),
        InventoryRecord(3, "Mouse", 50, now),
        InventoryRecord(4, "Monitor", 15, now),
        InventoryRecord(5, "Headset", 30, now),
    ]


def electronic_items() -> list[ElectronicItem]:
    return [
        ElectronicItem(1, "Laptop", 10, "Dell", 24),
        ElectronicItem(2, "Smartphone", 15, "Samsung", 12),
    ]


def grocery_items(today: date) -> list[GroceryItem]:
    return [
        GroceryItem(1, "Apples", 50, today + timedelta(days=10)),
        GroceryItem(2, "Milk", 30, today + timedelta(days=5)),
    ]


SAVINGS_ACCOUNT_NUMBER = "ACC1001"
SAVINGS_OPENING_BALANCE = Decimal("1000")


def transaction_batch(now: datetime) -> list[tuple[Transaction, PaymentChannel]]:
    return [
        (Transaction(1, now, Decimal("150"), "Groceries"), PaymentChannel.MOBILE_MONEY),
        (Transaction(2, now, Decimal("200"), "Utilities"), PaymentChannel.BANK_TRANSFER),
        (Transaction(3, now, Decimal("100"), "Entertainment"), PaymentChannel.CRYPTO_WALLET),
    ]
