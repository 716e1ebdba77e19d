"""Application service: patient and prescription tracking.

Prescriptions are grouped by patient through a derived index that must
be rebuilt after the prescription repository changes.
"""

from __future__ import annotations

import logging

from recordbook.domain.model.patient import Patient, Prescription
from recordbook.domain.repository.index import GroupIndex
from recordbook.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class HealthSystemHandler:

    def __init__(
        self,
        patient_repo: Repository[Patient],
        prescription_repo: Repository[Prescription],
    ) -> None:
        self._patient_repo = patient_repo
        self._prescription_repo = prescription_repo
        self._prescription_map: GroupIndex[int, Prescription] = GroupIndex(
            lambda prescription: prescription.patient_id
        )

    def build_prescription_map(self) -> None:
        self._prescription_map.rebuild(self._prescription_repo.list_all())
        logger.info(
            "Prescription map built for %d patients", len(self._prescription_map)
        )

    def list_patients(self) -> list[Patient]:
        return self._patient_repo.list_all()

    def get_patient(self, patient_id: int) -> Patient | None:
        return self._patient_repo.find(lambda patient: patient.id == patient_id)

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        """Return the patient's prescriptions as of the last map build."""
        return self._prescription_map.get(patient_id)

    @property
    def prescription_map(self) -> GroupIndex[int, Prescription]:
        return self._prescription_map
