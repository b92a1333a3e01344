from .loader import load_config
from .models import (
    CacheConfig,
    GenerationDefaults,
    GitHubConfig,
    RepoDeckConfig,
    StorageConfig,
)

__all__ = [
    "CacheConfig",
    "GenerationDefaults",
    "GitHubConfig",
    "RepoDeckConfig",
    "StorageConfig",
    "load_config",
]
