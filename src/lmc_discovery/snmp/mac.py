from __future__ import annotations

import re
from typing import Optional

_HEX12_RE = re.compile(r"^[0-9a-f]{12}$")
_ENUM_RE = re.compile(r"\((\d+)\)\s*$")
_INT_RE = re.compile(r"(\d+)")


def mac_from_dec_oid(suffix: str) -> Optional[str]:
    """`170.187.204.221.238.1` -> `aa:bb:cc:dd:ee:01`; None unless 6 octets."""
    parts = (suffix or "").strip(".").split(".")
    if len(parts) != 6:
        return None
    try:
        octets = [int(p) for p in parts]
    except ValueError:
        return None
    if any(b < 0 or b > 255 for b in octets):
        return None
    return ":".join(f"{b:02x}" for b in octets)


def mac_from_hex_str(text: str) -> Optional[str]:
    """`AA BB CC DD EE 01` / `aa:bb:..` / `aabbccddee01` -> canonical form."""
    h = re.sub(r"[:\s]", "", text or "").lower()
    if not _HEX12_RE.match(h):
        return None
    return ":".join(h[i:i + 2] for i in range(0, 12, 2))


def clean_value(v: str) -> str:
    if ":" in v:
        v = v.split(":", 1)[1].strip()
    return v.strip().strip('"')


def int_value(v: str) -> Optional[int]:
    # enum renderings look like "band5(2)"; the number in parens is the value
    m = _ENUM_RE.search(v or "")
    if m:
        return int(m.group(1))
    m = _INT_RE.search(clean_value(v or ""))
    return int(m.group(1)) if m else None
