"""Tests for domain models and the error taxonomy."""

import pytest

from src.domain import (
    CircularRouteError,
    DisconnectedRouteError,
    DuplicateRouteError,
    ErrorType,
    InternalError,
    InvalidTicketError,
    Itinerary,
    MalformedRequestError,
    NoStartingPointError,
    NoTicketsProvidedError,
    ReconstructionResult,
    Ticket,
)


class TestTicket:
    def test_structural_equality(self):
        assert Ticket("JFK", "LAX") == Ticket("JFK", "LAX")
        assert Ticket("JFK", "LAX") != Ticket("LAX", "JFK")

    def test_is_immutable(self):
        ticket = Ticket("JFK", "LAX")
        with pytest.raises(AttributeError):
            ticket.source = "SFO"  # type: ignore[misc]

    def test_from_pair(self):
        assert Ticket.from_pair(["JFK", "LAX"]) == Ticket("JFK", "LAX")

    def test_from_pair_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Ticket.from_pair(["JFK"])

    @pytest.mark.parametrize(
        "source, destination, valid",
        [("JFK", "LAX", True), ("", "LAX", False), ("JFK", " ", False)],
    )
    def test_is_valid(self, source, destination, valid):
        assert Ticket(source, destination).is_valid is valid


class TestItinerary:
    def test_properties(self):
        itinerary = Itinerary(cities=("JFK", "LAX", "DXB"))

        assert itinerary.origin == "JFK"
        assert itinerary.final_destination == "DXB"
        assert itinerary.num_legs == 2
        assert itinerary.legs == (Ticket("JFK", "LAX"), Ticket("LAX", "DXB"))
        assert itinerary.as_list() == ["JFK", "LAX", "DXB"]


class TestReconstructionResult:
    def test_success(self):
        itinerary = Itinerary(cities=("A", "B"))
        result = ReconstructionResult.success(itinerary)

        assert result.is_success
        assert result.unwrap() is itinerary

    def test_failure_unwrap_raises_carried_error(self):
        error = NoStartingPointError()
        result = ReconstructionResult.failure(error)

        assert not result.is_success
        with pytest.raises(NoStartingPointError):
            result.unwrap()

    def test_requires_exactly_one_side(self):
        with pytest.raises(ValueError):
            ReconstructionResult()


@pytest.mark.parametrize(
    "error, code, error_type",
    [
        (MalformedRequestError("invalid JSON format"), 400, ErrorType.VALIDATION),
        (InvalidTicketError("bad", index=0), 400, ErrorType.VALIDATION),
        (NoTicketsProvidedError(), 400, ErrorType.VALIDATION),
        (DuplicateRouteError("duplicate route from JFK", source="JFK"), 400, ErrorType.VALIDATION),
        (NoStartingPointError(), 400, ErrorType.BUSINESS),
        (CircularRouteError(city="A"), 400, ErrorType.BUSINESS),
        (DisconnectedRouteError(visited=2, expected=3), 400, ErrorType.BUSINESS),
        (InternalError(), 500, ErrorType.INTERNAL),
    ],
)
def test_error_payload(error, code, error_type):
    assert error.to_payload() == {
        "code": code,
        "message": error.message,
        "type": error_type.value,
    }


def test_payload_hides_cause():
    error = InternalError(cause=RuntimeError("secret detail"))

    assert "secret detail" not in str(error.to_payload())
    assert "secret detail" in str(error)
