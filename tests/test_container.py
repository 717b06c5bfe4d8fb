import pytest

from src.config import AppConfig
from src.container import Container
from src.ports.itinerary import ItineraryReconstructorPort
from src.services import ItineraryService


def test_default_container_resolves_service():
    container = Container.create_default(AppConfig())

    service = container.resolve(ItineraryReconstructorPort)

    assert isinstance(service, ItineraryService)
    assert container.resolve(ItineraryReconstructorPort) is service


def test_unregistered_type_raises():
    container = Container(config=AppConfig())

    with pytest.raises(KeyError):
        container.resolve(ItineraryReconstructorPort)


def test_register_override_replaces_cached_singleton():
    container = Container.create_default(AppConfig())
    container.resolve(ItineraryReconstructorPort)
    replacement = object()

    container.register(ItineraryReconstructorPort, lambda: replacement)

    assert container.resolve(ItineraryReconstructorPort) is replacement


def test_non_singleton_creates_new_instances():
    container = Container(config=AppConfig())
    container.register(ItineraryReconstructorPort, ItineraryService, singleton=False)

    assert container.resolve(ItineraryReconstructorPort) is not container.resolve(
        ItineraryReconstructorPort
    )
