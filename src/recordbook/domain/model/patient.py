"""Patient and Prescription records for the healthcare tracker.

Both are immutable: once issued, a prescription never changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:

    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return (
            f"Patient {{ Id = {self.id}, Name = {self.name}, "
            f"Age = {self.age}, Gender = {self.gender} }}"
        )


@dataclass(frozen=True)
class Prescription:
    """A medication issued to a patient, referenced by ``patient_id``."""

    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return (
            f"Prescription {{ Id = {self.id}, PatientId = {self.patient_id}, "
            f"Medication = {self.medication_name}, "
            f"DateIssued = {self.date_issued:%Y-%m-%d} }}"
        )
