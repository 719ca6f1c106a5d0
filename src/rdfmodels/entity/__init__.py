"""Entities: discovery, live attribute access and write-back."""

from rdfmodels.entity.discovery import (
    EntityFactory,
    Sighting,
    read_from,
    read_from_async,
    read_one,
    read_one_async,
    scan,
)
from rdfmodels.entity.entity import Entity
from rdfmodels.entity.writer import project, write_to, write_to_async

__all__ = [
    "Entity",
    "EntityFactory",
    "Sighting",
    "scan",
    "read_from",
    "read_one",
    "read_from_async",
    "read_one_async",
    "project",
    "write_to",
    "write_to_async",
]
