"""Composition root — wires concrete implementations to the handlers.

This is the only place in the codebase that knows about *all* layers.
Seed data and file locations are passed in explicitly; nothing here
reads the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from recordbook.application.finance import FinanceHandler
from recordbook.application.grading import StudentResultProcessor
from recordbook.application.healthcare import HealthSystemHandler
from recordbook.application.inventory_log import InventoryLogHandler
from recordbook.application.warehouse import WarehouseManager
from recordbook.domain.model.finance import Account, AccountType
from recordbook.domain.model.patient import Patient, Prescription
from recordbook.domain.model.stock import ElectronicItem, GroceryItem
from recordbook.infrastructure import seed
from recordbook.infrastructure.persistence.in_memory import (
    KeyedRepository,
    ListRepository,
    StockRepository,
)
from recordbook.infrastructure.persistence.json_snapshot_store import (
    JsonInventorySnapshot,
)
from recordbook.infrastructure.persistence.student_file import FlatFileStudentStore


@dataclass(frozen=True)
class Settings:
    """File locations, relative to the working directory by default."""

    inventory_file: Path = Path("inventory.json")
    students_file: Path = Path("students.txt")
    report_file: Path = Path("report.txt")


def health_system(
    patients: list[Patient] | None = None,
    prescriptions: list[Prescription] | None = None,
) -> HealthSystemHandler:
    return HealthSystemHandler(
        patient_repo=ListRepository(seed.patients() if patients is None else patients),
        prescription_repo=ListRepository(
            seed.prescriptions() if prescriptions is None else prescriptions
        ),
    )


def inventory_log(settings: Settings) -> InventoryLogHandler:
    """An empty log bound to ``settings.inventory_file``."""
    return InventoryLogHandler(
        repo=ListRepository(),
        snapshot=JsonInventorySnapshot(settings.inventory_file),
    )


def student_processor(settings: Settings) -> StudentResultProcessor:
    return StudentResultProcessor(
        FlatFileStudentStore(settings.students_file, settings.report_file)
    )


def warehouse(
    today: date,
    electronics: list[ElectronicItem] | None = None,
    groceries: list[GroceryItem] | None = None,
) -> WarehouseManager:
    return WarehouseManager(
        electronics=StockRepository(
            seed.electronic_items() if electronics is None else electronics
        ),
        groceries=StockRepository(
            seed.grocery_items(today) if groceries is None else groceries
        ),
    )


def finance(
    account_number: str = seed.SAVINGS_ACCOUNT_NUMBER,
    opening_balance: Decimal = seed.SAVINGS_OPENING_BALANCE,
    account_type: AccountType = AccountType.SAVINGS,
) -> FinanceHandler:
    return FinanceHandler(
        account=Account(account_number, opening_balance, account_type),
        transaction_repo=KeyedRepository(entity_name="Transaction"),
    )


def now() -> datetime:
    return datetime.now().replace(microsecond=0)
