"""Integration tests for the healthcare tracker."""

from datetime import date

from recordbook.application.healthcare import HealthSystemHandler
from recordbook.domain.model.patient import Prescription
from recordbook.infrastructure import seed
from recordbook.infrastructure.persistence.in_memory import ListRepository


def _setup():
    prescription_repo = ListRepository(seed.prescriptions())
    handler = HealthSystemHandler(ListRepository(seed.patients()), prescription_repo)
    handler.build_prescription_map()
    return handler, prescription_repo


class TestPrescriptionMap:

    def test_prescriptions_for_patient(self):
        handler, _ = _setup()
        assert [p.medication_name for p in handler.prescriptions_for(2)] == [
            "Lisinopril",
            "Atorvastatin",
        ]

    def test_unknown_patient_gets_empty_list(self):
        handler, _ = _setup()
        assert handler.prescriptions_for(99) == []

    def test_map_reflects_contents_only_after_rebuild(self):
        handler, prescription_repo = _setup()
        prescription_repo.add(Prescription(6, 3, "Insulin", date(2025, 6, 1)))
        assert len(handler.prescriptions_for(3)) == 1

        handler.build_prescription_map()
        assert [p.id for p in handler.prescriptions_for(3)] == [4, 6]

    def test_removed_prescriptions_drop_out_on_rebuild(self):
        handler, prescription_repo = _setup()
        prescription_repo.remove(4)
        handler.build_prescription_map()
        assert 3 not in handler.prescription_map
        assert handler.prescriptions_for(3) == []

    def test_rebuild_twice_is_identical(self):
        handler, _ = _setup()
        first = handler.prescription_map.as_dict()
        handler.build_prescription_map()
        assert handler.prescription_map.as_dict() == first


class TestPatients:

    def test_list_patients(self):
        handler, _ = _setup()
        assert [p.name for p in handler.list_patients()] == [
            "Alice Johnson",
            "Bob Smith",
            "Carol Lee",
        ]

    def test_get_patient(self):
        handler, _ = _setup()
        assert handler.get_patient(3).age == 29
        assert handler.get_patient(42) is None
