import os

from pydantic import BaseModel, Field, field_validator


# Helper functions for parsing environment variables
def get_str_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)

def get_int_env(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, str(default)))
    except ValueError:
        return default

def get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key, str(default)).lower()
    return value in ("true", "1", "yes")


def detect_logical_cores() -> int:
    """Number of logical execution units visible to this process."""
    return os.cpu_count() or 1


# Default factory functions
def default_workers() -> int:
    workers = get_int_env("PARALLEL_WORKERS", 0)
    if workers < 1:
        return detect_logical_cores()
    return workers

def default_thread_name_prefix() -> str:
    return get_str_env("PARALLEL_THREAD_PREFIX", "range-worker")

def default_log_level() -> str:
    return get_str_env("LOG_LEVEL", "INFO")

def default_log_dir() -> str:
    return get_str_env("LOG_DIR", "logs")

def default_max_size_mb() -> int:
    return get_int_env("LOG_MAX_SIZE_MB", 10)

def default_backup_count() -> int:
    return get_int_env("LOG_BACKUP_COUNT", 5)

def default_use_color() -> bool:
    return get_bool_env("LOG_USE_COLOR", True)

def default_log_to_file() -> bool:
    return get_bool_env("LOG_TO_FILE", False)


class ParallelConfig(BaseModel):
    """Worker pool sizing."""
    workers: int = Field(default_factory=default_workers)
    thread_name_prefix: str = Field(default_factory=default_thread_name_prefix)

    @field_validator("workers")
    @classmethod
    def _at_least_one(cls, value: int) -> int:
        if value < 1:
            raise ValueError("workers must be at least 1")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default_factory=default_log_level)
    log_dir: str = Field(default_factory=default_log_dir)
    max_size_mb: int = Field(default_factory=default_max_size_mb)
    backup_count: int = Field(default_factory=default_backup_count)
    use_color: bool = Field(default_factory=default_use_color)
    log_to_file: bool = Field(default_factory=default_log_to_file)


class AppConfig(BaseModel):
    """Application configuration."""
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Create a singleton config instance
config = AppConfig()
