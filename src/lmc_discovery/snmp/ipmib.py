from __future__ import annotations

import re
from typing import Dict, Optional

from lmc_discovery.snmp.bridge import oid_suffix
from lmc_discovery.snmp.client import iter_bindings
from lmc_discovery.snmp.mac import mac_from_hex_str

# ipNetToMediaTable: ipNetToMediaPhysAddress
# Each row's OID ends with ifIndex.a.b.c.d, the value is the MAC as hex.
IPNETTOMEDIA_PHYSADDRESS_OID = "1.3.6.1.2.1.4.22.1.2"

_HEX_VALUE_RE = re.compile(r"^(?:Hex-STRING:\s*)?([0-9A-Fa-f: ]+)$")


def _parse_ipv4(parts) -> Optional[str]:
    if len(parts) != 4:
        return None
    try:
        a, b, c, d = (int(p) for p in parts)
    except ValueError:
        return None
    if not all(0 <= x <= 255 for x in (a, b, c, d)):
        return None
    return f"{a}.{b}.{c}.{d}"


def parse_arp(text: str) -> Dict[str, str]:
    """MAC -> IPv4 from the ARP table. A MAC seen twice keeps the later IP."""
    out: Dict[str, str] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, IPNETTOMEDIA_PHYSADDRESS_OID)
        if suffix is None:
            continue
        parts = suffix.split(".")
        # first component is the ifIndex
        ip = _parse_ipv4(parts[1:]) if len(parts) == 5 else None
        m = _HEX_VALUE_RE.match(val.strip())
        if not ip or not m:
            continue
        mac = mac_from_hex_str(m.group(1))
        if mac:
            out[mac] = ip
    return out
