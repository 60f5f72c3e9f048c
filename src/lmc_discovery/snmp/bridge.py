from __future__ import annotations

import re
from typing import Dict, Optional

from lmc_discovery.snmp.client import iter_bindings
from lmc_discovery.snmp.mac import mac_from_dec_oid

DOT1D_TP_FDB_PORT = "1.3.6.1.2.1.17.4.3.1.2"  # dot1dTpFdbPort
DOT1D_BASEPORT_IFINDEX = "1.3.6.1.2.1.17.1.4.1.2"  # dot1dBasePortIfIndex

_INTEGER_RE = re.compile(r"^(?:INTEGER:\s*)?(\d+)\s*$")


def oid_suffix(oid: str, root: str) -> Optional[str]:
    """Return the index part of `oid` below `root`, or None if not under it."""
    prefix = root + "."
    if not oid.startswith(prefix):
        return None
    return oid[len(prefix):] or None


def integer_value(val: str) -> Optional[int]:
    m = _INTEGER_RE.match(val.strip())
    return int(m.group(1)) if m else None


def parse_fdb_ports(text: str) -> Dict[str, int]:
    """MAC -> bridge port from a dot1dTpFdbPort walk (index = 6 MAC octets)."""
    out: Dict[str, int] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, DOT1D_TP_FDB_PORT)
        port = integer_value(val)
        if suffix is None or port is None:
            continue
        mac = mac_from_dec_oid(suffix)
        if mac:
            out[mac] = port
    return out


def parse_baseport_ifindex(text: str) -> Dict[int, int]:
    out: Dict[int, int] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, DOT1D_BASEPORT_IFINDEX)
        ifindex = integer_value(val)
        if suffix is None or ifindex is None or not suffix.isdigit():
            continue
        out[int(suffix)] = ifindex
    return out
