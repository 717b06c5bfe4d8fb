"""Tests for ItineraryService."""

import logging
from unittest.mock import patch

from src.domain.errors import DisconnectedRouteError, InternalError
from src.domain.models import Ticket
from src.services import ItineraryService

LOGGER_NAME = "src.services.itinerary_service"


class TestItineraryService:
    def test_returns_itinerary(self):
        service = ItineraryService()

        result = service.reconstruct([Ticket("LAX", "DXB"), Ticket("JFK", "LAX")])

        assert result.unwrap().as_list() == ["JFK", "LAX", "DXB"]

    def test_returns_error_as_value(self):
        service = ItineraryService()

        result = service.reconstruct([Ticket("JFK", "LAX"), Ticket("DXB", "SFO")])

        assert isinstance(result.error, DisconnectedRouteError)

    def test_logs_success(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        service = ItineraryService()

        service.reconstruct([Ticket("JFK", "LAX")])

        record = next(r for r in caplog.records if r.message == "Itinerary reconstructed")
        assert record.origin == "JFK"
        assert record.destination == "LAX"
        assert record.stops == 2

    def test_logs_failure_as_warning(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        service = ItineraryService()

        service.reconstruct([])

        record = next(r for r in caplog.records if r.levelno == logging.WARNING)
        assert record.error_type == "NoTicketsProvidedError"

    def test_unexpected_exception_becomes_internal_error(self, caplog):
        service = ItineraryService()

        with patch(
            "src.services.itinerary_service.reconstruct_itinerary",
            side_effect=RuntimeError("boom"),
        ):
            result = service.reconstruct([Ticket("JFK", "LAX")])

        assert isinstance(result.error, InternalError)
        assert result.error.message == "internal server error"
        assert isinstance(result.error.cause, RuntimeError)
        assert any(r.exc_info for r in caplog.records)
