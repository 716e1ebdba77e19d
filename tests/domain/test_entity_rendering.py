"""Console rendering of each record type."""

from datetime import date, datetime

from recordbook.domain.model.inventory_record import InventoryRecord
from recordbook.domain.model.patient import Patient, Prescription
from recordbook.domain.model.stock import ElectronicItem, GroceryItem


class TestRendering:

    def test_patient(self):
        assert str(Patient(1, "Alice Johnson", 34, "Female")) == (
            "Patient { Id = 1, Name = Alice Johnson, Age = 34, Gender = Female }"
        )

    def test_prescription(self):
        assert str(Prescription(3, 2, "Lisinopril", date(2025, 2, 20))) == (
            "Prescription { Id = 3, PatientId = 2, Medication = Lisinopril, "
            "DateIssued = 2025-02-20 }"
        )

    def test_inventory_record(self):
        record = InventoryRecord(1, "Laptop", 10, datetime(2025, 1, 1, 9, 30))
        assert str(record) == "ID: 1, Name: Laptop, Qty: 10, Added: 2025-01-01 09:30:00"

    def test_electronic_item(self):
        assert str(ElectronicItem(1, "Laptop", 10, "Dell", 24)) == (
            "[Electronic] ID: 1, Name: Laptop, Brand: Dell, Warranty: 24 months, Qty: 10"
        )

    def test_grocery_item(self):
        assert str(GroceryItem(1, "Apples", 50, date(2025, 1, 11))) == (
            "[Grocery] ID: 1, Name: Apples, Expiry: 2025-01-11, Qty: 50"
        )
