import sys


def print_summary(result, out=None):
    out = out or sys.stdout
    print(f"\n--- Client table (source: {result.source}) ---", file=out)
    header = f"{'PORT':<32} {'BP':>4} {'MAC':<18} {'IP':<16}"
    print(header, file=out)
    print("-" * len(header), file=out)

    for e in result.entries:
        # keep MAC/IP aligned even with long SSID-based port names
        port = e.port_name[:30] + "…" if len(e.port_name) > 31 else e.port_name
        print(f"{port:<32} {e.bridge_port:>4} {e.mac:<18} {e.ip or '-':<16}", file=out)

    print(f"\nClients: {result.count} (with IP: {result.count_with_ip})", file=out)
