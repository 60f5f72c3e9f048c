from __future__ import annotations

from typing import Dict

from lmc_discovery.snmp.bridge import integer_value, oid_suffix
from lmc_discovery.snmp.client import iter_bindings
from lmc_discovery.snmp.mac import mac_from_dec_oid

DOT1Q_TP_FDB_PORT = "1.3.6.1.2.1.17.7.1.2.2.1.2"  # dot1qTpFdbPort


def parse_qbridge_fdb_ports(text: str) -> Dict[str, int]:
    """MAC -> bridge port from a dot1qTpFdbPort walk (index = vlan + 6 octets).

    A MAC learned in several VLANs keeps the port of the first line seen.
    Walk output is OID-ascending, so that is the lowest VLAN.
    """
    out: Dict[str, int] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, DOT1Q_TP_FDB_PORT)
        port = integer_value(val)
        if suffix is None or port is None:
            continue
        vlan, _, mac_part = suffix.partition(".")
        if not vlan.isdigit():
            continue
        mac = mac_from_dec_oid(mac_part)
        if mac and mac not in out:
            out[mac] = port
    return out
