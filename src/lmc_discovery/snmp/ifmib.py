from typing import Dict

from lmc_discovery.snmp.bridge import oid_suffix
from lmc_discovery.snmp.client import iter_bindings
from lmc_discovery.snmp.mac import clean_value

IFNAME_OID = "1.3.6.1.2.1.31.1.1.1.1"


def parse_ifnames(text: str) -> Dict[int, str]:
    names: Dict[int, str] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, IFNAME_OID)
        if suffix is None or not suffix.isdigit():
            continue
        name = clean_value(val).strip()
        if name:
            names[int(suffix)] = name
    return names
