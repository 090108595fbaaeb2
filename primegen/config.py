# primegen/config.py
# Environment-driven settings, read once per call of load_settings().
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

EXECUTORS = ("process", "thread")

@dataclass(frozen=True)
class Settings:
    concurrency: int = 5
    executor: str = "process"
    max_attempts: Optional[int] = None   # None => unbounded search
    log_level: str = "WARNING"
    api_max_bits: int = 4096
    api_max_count: int = 64

def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw, 10)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")

def load_settings() -> Settings:
    concurrency = _env_int("PRIMEGEN_CONCURRENCY", 5)
    if concurrency < 1:
        raise ValueError("PRIMEGEN_CONCURRENCY must be >= 1")
    executor = (os.getenv("PRIMEGEN_EXECUTOR", "process") or "process").strip().lower()
    if executor not in EXECUTORS:
        raise ValueError(f"PRIMEGEN_EXECUTOR must be one of {EXECUTORS}, got {executor!r}")
    max_attempts = _env_int("PRIMEGEN_MAX_ATTEMPTS", 0)
    if max_attempts < 0:
        raise ValueError("PRIMEGEN_MAX_ATTEMPTS must be >= 0")
    return Settings(
        concurrency=concurrency,
        executor=executor,
        max_attempts=max_attempts or None,
        log_level=(os.getenv("PRIMEGEN_LOG_LEVEL", "WARNING") or "WARNING").strip().upper(),
        api_max_bits=_env_int("PRIMEGEN_API_MAX_BITS", 4096),
        api_max_count=_env_int("PRIMEGEN_API_MAX_COUNT", 64),
    )
