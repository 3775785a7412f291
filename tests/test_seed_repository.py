"""
Tests for the JSON seed data repository.
"""

import json
import logging
from decimal import Decimal

import pytest

from parkinvoice.adapters.seed_repository import SeedDataRepository
from parkinvoice.domain.exceptions import DataSourceError, ScheduleCoverageError
from parkinvoice.services.invoice_service import InvoiceService


def _write(tmp_path, data):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


GAPPY_FACILITY = {
    "id": "pf009",
    "weekdayPrices": [{"startHour": 0, "endHour": 20, "pricePerHour": "1.00"}],
    "weekendPrices": [{"startHour": 0, "endHour": 24, "pricePerHour": "1.00"}],
}


class TestBundledSeedData:
    """The bundled seed file carries the reference tariff table."""

    def test_reference_facility_is_loaded(self):
        repository = SeedDataRepository.from_file()

        profile = repository.get_rate_profile("pf001")

        assert profile is not None
        assert profile.coverage_problems() == []
        assert [e.price_per_hour for e in profile.weekday_prices] == [
            Decimal("0.50"), Decimal("2.50"), Decimal("1.50"),
        ]

    def test_invoices_from_seed_data(self):
        repository = SeedDataRepository.from_file()
        service = InvoiceService(
            session_source=repository,
            rate_profile_source=repository,
            customer_source=repository,
        )

        result = service.get_invoices("pf001")

        assert [(i.customer_id, i.amount) for i in result] == [
            ("c001", Decimal("3.00")),
            ("c002", Decimal("47.20")),
            ("c003", Decimal("1.50")),
        ]

    def test_customers_and_sessions_are_loaded(self):
        repository = SeedDataRepository.from_file()

        customer = repository.get_customer("c001")

        assert customer is not None
        assert customer.is_contracted("pf002")
        assert repository.get_customer("c003") is None
        assert [s.session_id for s in repository.get_sessions("pf002")] == ["s004"]


class TestSeedFileErrors:
    def test_missing_file_raises_error(self, tmp_path):
        with pytest.raises(DataSourceError, match="not found"):
            SeedDataRepository.from_file(tmp_path / "missing.json")

    def test_invalid_json_raises_error(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataSourceError, match="Invalid JSON"):
            SeedDataRepository.from_file(path)

    def test_invalid_tariff_raises_error(self, tmp_path):
        path = _write(tmp_path, {
            "facilities": [{
                "id": "pf009",
                "weekdayPrices": [{"startHour": 5, "endHour": 2, "pricePerHour": "1.00"}],
            }],
        })

        with pytest.raises(DataSourceError, match="Invalid seed data"):
            SeedDataRepository.from_file(path)

    def test_invalid_timestamp_raises_error(self, tmp_path):
        path = _write(tmp_path, {
            "sessions": [{"customerId": "c1", "facilityId": "pf001", "start": "yesterday", "end": "today"}],
        })

        with pytest.raises(DataSourceError):
            SeedDataRepository.from_file(path)


class TestCoverageCheckOnLoad:
    def test_gap_is_logged(self, tmp_path, caplog):
        path = _write(tmp_path, {"facilities": [GAPPY_FACILITY]})

        with caplog.at_level(logging.WARNING):
            repository = SeedDataRepository.from_file(path)

        assert repository.get_rate_profile("pf009") is not None
        assert "weekday hour 20 is not covered" in caplog.text

    def test_gap_raises_in_strict_mode(self, tmp_path):
        path = _write(tmp_path, {"facilities": [GAPPY_FACILITY]})

        with pytest.raises(ScheduleCoverageError) as exc_info:
            SeedDataRepository.from_file(path, strict=True)

        assert exc_info.value.hour == 20

    def test_naive_timestamps_are_utc(self, tmp_path):
        path = _write(tmp_path, {
            "sessions": [{
                "customerId": "c1",
                "facilityId": "pf001",
                "start": "2025-04-24T10:01:00",
                "end": "2025-04-24T11:01:00",
            }],
        })

        session = SeedDataRepository.from_file(path).get_sessions("pf001")[0]

        assert session.start.hour == 10
        assert session.start.timezone_name == "UTC"
