"""Mock providers for testing."""

from .admission import MockAdmissionProvider
from .cache import MockCacheProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAdmissionProvider",
    "MockCacheProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
