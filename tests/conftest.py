"""Shared fixtures."""

from __future__ import annotations

import pytest

from housegen.core.footprint import generate_footprint
from housegen.models import Category, ModelDocument, create_default_document
from housegen.phases.walls import WallBuilder


@pytest.fixture
def document() -> ModelDocument:
    return create_default_document()


@pytest.fixture
def level1(document):
    return document.require_level("Level 1")


@pytest.fixture
def level2(document):
    return document.require_level("Level 2")


@pytest.fixture
def wall_type(document):
    return document.catalog.resolve("Generic - 200mm", "Basic Wall", Category.WALL)


@pytest.fixture
def walls(document, level1, level2, wall_type):
    segments = generate_footprint(10000, 5000)
    return WallBuilder().build(document, segments, level1, level2, wall_type)
