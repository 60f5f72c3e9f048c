import pytest

from lmc_discovery.snmp.mac import clean_value, int_value, mac_from_dec_oid, mac_from_hex_str


def test_mac_from_dec_oid_basic():
    assert mac_from_dec_oid("170.187.204.221.238.1") == "aa:bb:cc:dd:ee:01"
    assert mac_from_dec_oid("0.17.34.51.68.85") == "00:11:22:33:44:55"


def test_mac_from_dec_oid_every_octet_value():
    for n in range(256):
        mac = mac_from_dec_oid(".".join([str(n)] * 6))
        assert mac == ":".join([f"{n:02x}"] * 6)


@pytest.mark.parametrize("suffix", ["1.2.3.4.5", "1.2.3.4.5.6.7", "", "1.2.3.x.5.6", "1.2.3.4.5.256"])
def test_mac_from_dec_oid_rejects(suffix):
    assert mac_from_dec_oid(suffix) is None


@pytest.mark.parametrize(
    "text",
    ["AA BB CC DD EE 01", "aa:bb:cc:dd:ee:01", "aabbccddee01", "AABBCCDDEE01", " AA:BB CC:DD EE:01 "],
)
def test_mac_from_hex_str_separators_and_case(text):
    assert mac_from_hex_str(text) == "aa:bb:cc:dd:ee:01"


@pytest.mark.parametrize("text", ["AA BB CC DD EE", "AA BB CC DD EE 01 02", "zz bb cc dd ee 01", ""])
def test_mac_from_hex_str_rejects(text):
    assert mac_from_hex_str(text) is None


def test_clean_value():
    assert clean_value('STRING: "Guest"') == "Guest"
    assert clean_value("STRING: Gi1/0/1") == "Gi1/0/1"
    assert clean_value("42") == "42"


def test_int_value():
    assert int_value("INTEGER: 36") == 36
    assert int_value("36") == 36
    assert int_value("INTEGER: band5(2)") == 2
    assert int_value('STRING: "n/a"') is None
