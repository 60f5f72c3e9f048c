from __future__ import annotations

from typing import Dict

from lmc_discovery.snmp.bridge import parse_fdb_ports
from lmc_discovery.snmp.qbridge import parse_qbridge_fdb_ports


def load_mac_to_bridge_port(fdb_text: str, qfdb_text: str) -> Dict[str, int]:
    """MAC -> bridge port.

    Strategy:
      1) classic BRIDGE-MIB dot1dTpFdbPort.
      2) only if that produced nothing, Q-BRIDGE-MIB dot1qTpFdbPort. Many
         VLAN-aware switches leave the classic table empty.
    """
    macs = parse_fdb_ports(fdb_text)
    if macs:
        return macs
    return parse_qbridge_fdb_ports(qfdb_text)
