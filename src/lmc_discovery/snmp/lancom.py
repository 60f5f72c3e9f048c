"""LANCOM enterprise MIB: WLAN client tables of LCOS-LX access points.

Both tables are indexed by the client MAC as six decimal OID components.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from lmc_discovery.snmp.bridge import oid_suffix
from lmc_discovery.snmp.client import iter_bindings
from lmc_discovery.snmp.mac import clean_value, int_value, mac_from_dec_oid

LCOS_LX_WLAN_CLIENT_TABLE = "1.3.6.1.4.1.2356.13.1.3.4.1.1"  # .{col}.{mac}
LCOS_LX_WLAN_CLIENT_SSID = "1.3.6.1.4.1.2356.13.1.3.32.1.3"  # .{mac}

COL_CHANNEL = 2
COL_BAND = 3

# Only these two codes are known; anything else is rendered without a band.
BAND_LABELS = {1: "2.4G", 2: "5G"}


@dataclass
class WlanClient:
    mac: str
    channel: Optional[int] = None
    band: Optional[int] = None

    @property
    def band_label(self) -> Optional[str]:
        if self.band is None:
            return None
        return BAND_LABELS.get(self.band)


def parse_wlan_clients(text: str) -> Dict[str, WlanClient]:
    clients: Dict[str, WlanClient] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, LCOS_LX_WLAN_CLIENT_TABLE)
        if suffix is None:
            continue
        col, _, mac_part = suffix.partition(".")
        if not col.isdigit():
            continue
        mac = mac_from_dec_oid(mac_part)
        if not mac:
            continue
        client = clients.setdefault(mac, WlanClient(mac=mac))
        n = int_value(val)
        if n is None:
            continue
        if int(col) == COL_CHANNEL:
            client.channel = n
        elif int(col) == COL_BAND:
            client.band = n
    return clients


def parse_client_ssids(text: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for oid, val in iter_bindings(text):
        suffix = oid_suffix(oid, LCOS_LX_WLAN_CLIENT_SSID)
        if suffix is None:
            continue
        mac = mac_from_dec_oid(suffix)
        ssid = clean_value(val).strip()
        if mac and ssid:
            out[mac] = ssid
    return out
