from __future__ import annotations

import asyncio
import re
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from lmc_discovery.config import SnmpProfile
from lmc_discovery.snmp.bridge import DOT1D_BASEPORT_IFINDEX, DOT1D_TP_FDB_PORT, parse_baseport_ifindex
from lmc_discovery.snmp.client import SnmpWalker
from lmc_discovery.snmp.fdb import load_mac_to_bridge_port
from lmc_discovery.snmp.ifmib import IFNAME_OID, parse_ifnames
from lmc_discovery.snmp.ipmib import IPNETTOMEDIA_PHYSADDRESS_OID, parse_arp
from lmc_discovery.snmp.lancom import (
    LCOS_LX_WLAN_CLIENT_SSID,
    LCOS_LX_WLAN_CLIENT_TABLE,
    parse_client_ssids,
    parse_wlan_clients,
)
from lmc_discovery.snmp.qbridge import DOT1Q_TP_FDB_PORT
from lmc_discovery.snmp.system import SYSDESCR_OID, parse_sysdescr

SOURCE_BRIDGE = "bridge"
SOURCE_WLAN = "wlan-clients"

NO_RESPONSE = "no response"


@dataclass
class ClientTableEntry:
    mac: str
    bridge_port: int
    port_name: str
    ip: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"mac": self.mac, "bridgePort": self.bridge_port, "portName": self.port_name, "ip": self.ip}


@dataclass
class ClientTableResult:
    entries: List[ClientTableEntry] = field(default_factory=list)
    source: str = SOURCE_BRIDGE

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def count_with_ip(self) -> int:
        return sum(1 for e in self.entries if e.ip)

    @property
    def has_mac_table(self) -> bool:
        return len(self.entries) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "count": self.count,
            "countWithIp": self.count_with_ip,
            "hasMacTable": self.has_mac_table,
            "source": self.source,
        }


@dataclass
class ConnectivityResult:
    ok: bool
    sys_descr: str

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": self.ok, "sysDescr": self.sys_descr}


_NUM_SPLIT_RE = re.compile(r"(\d+)")


def port_sort_key(name: str):
    """Case-insensitive, numeric-aware key: "Port 2" < "Port 10"."""
    # re.split with a group alternates text/digits, so positions always
    # compare str with str and int with int
    parts = _NUM_SPLIT_RE.split(name or "")
    return [int(p) if i % 2 else p.casefold() for i, p in enumerate(parts)]


def sort_entries(entries: List[ClientTableEntry]) -> List[ClientTableEntry]:
    return sorted(entries, key=lambda e: port_sort_key(e.port_name))


def join_bridge_entries(
    mac_to_bp: Dict[str, int],
    bp_to_ifindex: Dict[int, int],
    ifnames: Dict[int, str],
    mac_to_ip: Dict[str, str],
) -> List[ClientTableEntry]:
    entries: List[ClientTableEntry] = []
    for mac, bp in mac_to_bp.items():
        ifindex = bp_to_ifindex.get(bp)
        name = ifnames.get(ifindex) if ifindex else None
        entries.append(
            ClientTableEntry(mac=mac, bridge_port=bp, port_name=name or f"Port {bp}", ip=mac_to_ip.get(mac))
        )
    return sort_entries(entries)


def wlan_port_name(ssid: Optional[str], band_label: Optional[str], channel: Optional[int]) -> str:
    name = f"WLAN: {ssid}" if ssid else "WLAN"
    if band_label:
        name += f" ({band_label})"
    # channel 0 means "not reported"
    if channel:
        name += f" CH{channel}"
    return name


async def _resolve_bridge(walker: SnmpWalker) -> ClientTableResult:
    fdb, qfdb, baseport, ifname, arp = await walker.walk_many(
        [DOT1D_TP_FDB_PORT, DOT1Q_TP_FDB_PORT, DOT1D_BASEPORT_IFINDEX, IFNAME_OID, IPNETTOMEDIA_PHYSADDRESS_OID]
    )
    entries = join_bridge_entries(
        load_mac_to_bridge_port(fdb.text, qfdb.text),
        parse_baseport_ifindex(baseport.text),
        parse_ifnames(ifname.text),
        parse_arp(arp.text),
    )
    return ClientTableResult(entries=entries, source=SOURCE_BRIDGE)


async def _resolve_wlan(walker: SnmpWalker) -> ClientTableResult:
    clients_res, ssid_res, arp_res = await walker.walk_many(
        [LCOS_LX_WLAN_CLIENT_TABLE, LCOS_LX_WLAN_CLIENT_SSID, IPNETTOMEDIA_PHYSADDRESS_OID]
    )
    clients = parse_wlan_clients(clients_res.text)
    ssids = parse_client_ssids(ssid_res.text)
    mac_to_ip = parse_arp(arp_res.text)

    entries = [
        ClientTableEntry(
            mac=c.mac,
            bridge_port=0,
            port_name=wlan_port_name(ssids.get(c.mac), c.band_label, c.channel),
            ip=mac_to_ip.get(c.mac),
        )
        for c in clients.values()
    ]
    return ClientTableResult(entries=sort_entries(entries), source=SOURCE_WLAN)


async def resolve_mac_table(host: str, profile: SnmpProfile) -> ClientTableResult:
    """Build the client table for `host`.

    Bridge-MIB first; if that yields no entries, the LANCOM WLAN client
    table. An empty result from both is returned as-is (source "wlan-clients").
    """
    walker = SnmpWalker(host, profile)
    result = await _resolve_bridge(walker)
    if result.has_mac_table:
        return result
    print(f"[lmc] bridge tables empty for {host}; trying WLAN client table", file=sys.stderr)
    return await _resolve_wlan(walker)


async def probe_connectivity(host: str, profile: SnmpProfile) -> ConnectivityResult:
    res = await SnmpWalker(host, profile).walk(SYSDESCR_OID)
    descr = parse_sysdescr(res.text)
    if descr is not None:
        return ConnectivityResult(ok=True, sys_descr=descr)
    return ConnectivityResult(ok=False, sys_descr=res.text.strip()[:200] or NO_RESPONSE)


def get_mac_table(host: str, profile: SnmpProfile) -> ClientTableResult:
    return asyncio.run(resolve_mac_table(host, profile))


def check_connectivity(host: str, profile: SnmpProfile) -> ConnectivityResult:
    return asyncio.run(probe_connectivity(host, profile))
