import re

# Both end up as argv of the walk tool; anything outside these sets is
# rejected before a process is spawned.
_HOST_RE = re.compile(r"[A-Za-z0-9.\-]+")
_COMMUNITY_RE = re.compile(r"[\w\-@.!#%&*+=]+", re.ASCII)

SNMP_VERSIONS = ("1", "2c")


def valid_host(host: str) -> bool:
    return bool(host) and _HOST_RE.fullmatch(host) is not None


def valid_community(community: str) -> bool:
    return bool(community) and _COMMUNITY_RE.fullmatch(community) is not None


def valid_version(version: str) -> bool:
    return version in SNMP_VERSIONS
