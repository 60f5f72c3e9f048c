from lmc_discovery.snmp.bridge import parse_baseport_ifindex, parse_fdb_ports
from lmc_discovery.snmp.client import iter_bindings
from lmc_discovery.snmp.fdb import load_mac_to_bridge_port
from lmc_discovery.snmp.ifmib import parse_ifnames
from lmc_discovery.snmp.ipmib import parse_arp
from lmc_discovery.snmp.lancom import parse_client_ssids, parse_wlan_clients
from lmc_discovery.snmp.qbridge import parse_qbridge_fdb_ports
from lmc_discovery.snmp.system import parse_sysdescr

from walk_fixtures import (
    ARP,
    BASEPORT_IFINDEX,
    FDB_PORT,
    IFNAME,
    QFDB_PORT,
    SYSDESCR,
    WLAN_CLIENTS,
    WLAN_SSIDS,
)


def test_iter_bindings_skips_noise():
    text = "\n".join([
        ".1.3.6.1.2.1.1.5.0 = STRING: sw1",
        "",
        "Timeout: No Response from 10.0.0.1",
        "1.3.6.1.2.1.1.6.0 = STRING: lab",
    ])
    assert list(iter_bindings(text)) == [
        ("1.3.6.1.2.1.1.5.0", "STRING: sw1"),
        ("1.3.6.1.2.1.1.6.0", "STRING: lab"),
    ]


def test_parse_fdb_ports():
    assert parse_fdb_ports(FDB_PORT) == {
        "aa:bb:cc:dd:ee:01": 1,
        "aa:bb:cc:dd:ee:02": 2,
        "aa:bb:cc:dd:ee:09": 5,
    }


def test_parse_fdb_ports_ignores_other_subtrees_and_types():
    text = "\n".join([
        ".1.3.6.1.2.1.17.4.3.1.1.170.187.204.221.238.1 = Hex-STRING: AA BB CC DD EE 01",
        ".1.3.6.1.2.1.17.4.3.1.2.170.187.204.221.238 = INTEGER: 4",
        ".1.3.6.1.2.1.17.4.3.1.2.170.187.204.221.238.5 = STRING: \"x\"",
        ".1.3.6.1.2.1.17.4.3.1.2.170.187.204.221.238.6 = INTEGER: 6",
    ])
    assert parse_fdb_ports(text) == {"aa:bb:cc:dd:ee:06": 6}


def test_qbridge_first_vlan_wins():
    assert parse_qbridge_fdb_ports(QFDB_PORT) == {
        "aa:bb:cc:dd:ee:03": 3,
        "aa:bb:cc:dd:ee:04": 12,
    }


def test_fdb_prefers_classic_table():
    assert load_mac_to_bridge_port(FDB_PORT, QFDB_PORT) == parse_fdb_ports(FDB_PORT)


def test_fdb_falls_back_to_qbridge():
    assert load_mac_to_bridge_port("", QFDB_PORT)["aa:bb:cc:dd:ee:03"] == 3


def test_parse_baseport_ifindex():
    assert parse_baseport_ifindex(BASEPORT_IFINDEX) == {1: 10, 2: 2}


def test_parse_ifnames_quoted_and_unquoted():
    assert parse_ifnames(IFNAME) == {2: "GigabitEthernet1/0/2", 10: "GigabitEthernet1/0/10", 24: "Vlan1"}


def test_parse_arp():
    assert parse_arp(ARP) == {"aa:bb:cc:dd:ee:01": "192.168.1.20", "00:1a:2b:3c:4d:5e": "192.168.1.254"}


def test_parse_arp_requires_ipv4_index():
    text = ".1.3.6.1.2.1.4.22.1.2.24.192.168.1 = Hex-STRING: AA BB CC DD EE 01"
    assert parse_arp(text) == {}


def test_parse_wlan_clients():
    clients = parse_wlan_clients(WLAN_CLIENTS)
    assert list(clients) == ["00:11:22:33:44:55", "00:11:22:33:44:56", "00:11:22:33:44:57"]
    guest = clients["00:11:22:33:44:55"]
    assert (guest.channel, guest.band, guest.band_label) == (36, 2, "5G")
    assert clients["00:11:22:33:44:56"].band_label == "2.4G"
    # unknown band codes stay opaque
    assert clients["00:11:22:33:44:57"].band == 7
    assert clients["00:11:22:33:44:57"].band_label is None


def test_parse_client_ssids():
    assert parse_client_ssids(WLAN_SSIDS) == {"00:11:22:33:44:55": "Guest"}


def test_parse_sysdescr():
    assert parse_sysdescr(SYSDESCR) == "Device XYZ"
    assert parse_sysdescr(".1.3.6.1.2.1.1.1.0 = STRING: LANCOM LX-6500") == "LANCOM LX-6500"
    assert parse_sysdescr("") is None
