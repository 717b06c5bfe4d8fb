"""FastAPI dependencies resolving services and config from the app container."""

from __future__ import annotations

from fastapi import Request

from ..config import AppConfig
from ..container import Container
from ..ports.itinerary import ItineraryReconstructorPort


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_app_config(request: Request) -> AppConfig:
    return get_container(request).config


def get_itinerary_service(request: Request) -> ItineraryReconstructorPort:
    return get_container(request).resolve(ItineraryReconstructorPort)
