from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from lmc_discovery.config import SnmpProfile
from lmc_discovery.resolver import probe_connectivity, resolve_mac_table
from lmc_discovery.util.net import valid_community, valid_host, valid_version

TYPE_MAC_TABLE = "mac-table"
TYPE_TEST = "test"
REQUEST_TYPES = (TYPE_MAC_TABLE, TYPE_TEST)


class RequestError(ValueError):
    """Rejected resolution request; nothing was sent to the device."""


@dataclass(frozen=True)
class SnmpRequest:
    host: str
    community: str = "public"
    version: str = "2c"
    type: str = TYPE_MAC_TABLE

    def profile(self, base: Optional[SnmpProfile] = None) -> SnmpProfile:
        return replace(base or SnmpProfile(), community=self.community, version=self.version)


def parse_request(payload: Mapping[str, Any]) -> SnmpRequest:
    host = payload.get("host")
    community = payload.get("community", "public")
    version = payload.get("version", "2c")
    req_type = payload.get("type", TYPE_MAC_TABLE)

    if not isinstance(host, str) or not valid_host(host):
        raise RequestError("invalid host address")
    if not isinstance(community, str) or not valid_community(community):
        raise RequestError("invalid community string")
    if not isinstance(version, str) or not valid_version(version):
        raise RequestError("version must be 1 or 2c")
    if req_type not in REQUEST_TYPES:
        raise RequestError(f"unknown request type: {req_type!r}")

    return SnmpRequest(host=host, community=community, version=version, type=req_type)


async def run_request(req: SnmpRequest, profile: Optional[SnmpProfile] = None):
    p = req.profile(profile)
    if req.type == TYPE_TEST:
        return await probe_connectivity(req.host, p)
    return await resolve_mac_table(req.host, p)


async def handle_request(payload: Mapping[str, Any], profile: Optional[SnmpProfile] = None) -> Dict[str, Any]:
    """Validate `payload`, run it and return the JSON-ready result.

    Raises RequestError for rejected input. Device-side problems never
    raise; they show up as empty tables or ok=False.
    """
    req = parse_request(payload)
    result = await run_request(req, profile)
    return result.to_dict()
