from typing import Literal

from pydantic import BaseModel, Field


class GitHubConfig(BaseModel):
    token_env: str = "GITHUB_TOKEN"
    timeout: int = Field(default=30, ge=1)
    max_files: int = Field(default=100, ge=1)
    max_commits: int = Field(default=50, ge=1)


class CacheConfig(BaseModel):
    enabled: bool = True
    directory: str = ".repodeck/cache"
    ttl_hours: int = Field(default=24, ge=0)


class StorageConfig(BaseModel):
    base_dir: str = ".repodeck/presentations"
    create_index: bool = True


class GenerationDefaults(BaseModel):
    mode: Literal["ted", "imrad"] = "ted"
    language: Literal["ja", "en", "zh"] = "ja"
    duration: Literal[3, 5] = 3


class RepoDeckConfig(BaseModel):
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    defaults: GenerationDefaults = Field(default_factory=GenerationDefaults)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
