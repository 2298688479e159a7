"""Infrastructure providers."""

# Import bases
from .admission import AdmissionProvider
from .cache import CacheProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .admission import ProdAdmissionProvider  # noqa: F401
from .cache import ProdCacheProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AdmissionProvider",
    "CacheProvider",
    "PersistenceProvider",
    "ProdAdmissionProvider",
    "ProdCacheProvider",
    "ProdPersistenceProvider",
]
