from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SnmpProfile:
    community: str = "public"
    version: str = "2c"
    timeout_s: int = 5
    retries: int = 1
    # wall-clock budget for one walk process, independent of -t/-r
    hard_timeout_s: float = 12.0


def _env_float(name: str, default: float) -> float:
    v = (os.getenv(name) or "").strip()
    if not v:
        return default
    try:
        return float(v)
    except ValueError:
        raise SystemExit(f"{name} must be a number, got {v!r}")


def _env_int(name: str, default: int) -> int:
    v = (os.getenv(name) or "").strip()
    if not v:
        return default
    try:
        return int(v)
    except ValueError:
        raise SystemExit(f"{name} must be an integer, got {v!r}")


def load_profile_from_env() -> SnmpProfile:
    return SnmpProfile(
        community=os.getenv("LMC_SNMP_COMMUNITY") or "public",
        version=os.getenv("LMC_SNMP_VERSION") or "2c",
        timeout_s=_env_int("LMC_SNMP_TIMEOUT", 5),
        retries=_env_int("LMC_SNMP_RETRIES", 1),
        hard_timeout_s=_env_float("LMC_SNMP_HARD_TIMEOUT", 12.0),
    )
