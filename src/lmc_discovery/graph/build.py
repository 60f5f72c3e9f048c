from __future__ import annotations

import networkx as nx

from lmc_discovery.resolver import ClientTableResult


def build_client_graph(host: str, result: ClientTableResult) -> nx.Graph:
    """Device -> port -> client graph for one client table.

    Node ids are namespaced ("device:", "port:", "client:") so a port
    name can never collide with a MAC or the host.
    """
    g = nx.Graph(host=host, source=result.source)
    dev = f"device:{host}"
    g.add_node(dev, kind="device", label=host)

    for e in result.entries:
        port = f"port:{e.port_name}"
        if port not in g:
            g.add_node(port, kind="port", label=e.port_name, bridge_port=e.bridge_port)
            g.add_edge(dev, port)

        client = f"client:{e.mac}"
        g.add_node(client, kind="client", label=e.mac, mac=e.mac, ip=e.ip or "")
        g.add_edge(port, client)

    return g
