import argparse
import asyncio
import sys
from dataclasses import replace

from lmc_discovery.config import load_profile_from_env
from lmc_discovery.export.dot_export import export_dot
from lmc_discovery.export.json_export import export_json, to_json
from lmc_discovery.graph.build import build_client_graph
from lmc_discovery.report.summary import print_summary
from lmc_discovery.request import REQUEST_TYPES, TYPE_MAC_TABLE, RequestError, parse_request, run_request


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lmc-discovery", description="List clients behind a switch or LANCOM AP via SNMP")
    p.add_argument("--host", required=True, help="Device management IP or hostname")
    p.add_argument("--community", default=None, help="SNMP community (or env LMC_SNMP_COMMUNITY, default public)")
    p.add_argument("--version", dest="snmp_version", default=None, help="SNMP version: 1 or 2c (or env LMC_SNMP_VERSION)")
    p.add_argument("--type", dest="req_type", default=TYPE_MAC_TABLE, choices=REQUEST_TYPES)
    p.add_argument("--timeout", type=int, default=None, help="Per-request SNMP timeout seconds passed to the walk tool")
    p.add_argument("--retries", type=int, default=None, help="SNMP retries passed to the walk tool")
    p.add_argument("--hard-timeout", type=float, default=None, help="Kill a walk after this many seconds")
    p.add_argument("--out", default=None, help="Also write the JSON result here")
    p.add_argument("--dot", default=None, help="Write a port/client graph in DOT format (mac-table only)")
    p.add_argument("--summary", action="store_true", help="Print a client table to stderr")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    profile = load_profile_from_env()
    overrides = {}
    if args.timeout is not None:
        overrides["timeout_s"] = args.timeout
    if args.retries is not None:
        overrides["retries"] = args.retries
    if args.hard_timeout is not None:
        overrides["hard_timeout_s"] = args.hard_timeout
    if overrides:
        profile = replace(profile, **overrides)

    payload = {
        "host": args.host,
        "community": args.community or profile.community,
        "version": args.snmp_version or profile.version,
        "type": args.req_type,
    }
    try:
        req = parse_request(payload)
    except RequestError as e:
        raise SystemExit(f"[lmc] {e}")

    result = asyncio.run(run_request(req, profile))

    print(to_json(result))
    if args.out:
        export_json(result, args.out)

    if req.type == TYPE_MAC_TABLE:
        if args.dot:
            export_dot(build_client_graph(req.host, result), args.dot)
        if args.summary:
            print_summary(result, out=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
