"""Service fixtures wired to in-memory doubles."""

from __future__ import annotations

import pytest

from tests.fakes import FlakyMetadataStore, FlakyObjectStore, MockVisionOracle, analysis
from wardrobe.core.config import AppSettings
from wardrobe.services import build_services


@pytest.fixture
def object_store():
    return FlakyObjectStore()


@pytest.fixture
def metadata_store():
    return FlakyMetadataStore()


@pytest.fixture
def oracle():
    return MockVisionOracle(default_analysis=analysis(category="shirt", name=""))


@pytest.fixture
def settings():
    settings = AppSettings()
    settings.scan.batch_size = 3
    settings.scan.max_iterations = 50
    return settings


@pytest.fixture
def services(settings, object_store, metadata_store, oracle):
    return build_services(settings, object_store, metadata_store, oracle)
