import os


def _esc(s) -> str:
    return str(s).replace("\\", "\\\\").replace('"', '\\"')


def _label(attrs: dict) -> str:
    lbl = attrs.get("label") or ""
    ip = attrs.get("ip") or ""
    if attrs.get("kind") == "client" and ip:
        return f"{_esc(lbl)}\\n{_esc(ip)}"
    return _esc(lbl)


def export_dot(g, path):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("graph lmc {\n")

        for n, attrs in g.nodes(data=True):
            shape = "box" if attrs.get("kind") == "device" else "ellipse"
            f.write(f'  "{_esc(n)}" [label="{_label(attrs)}", shape={shape}];\n')

        for u, v in g.edges():
            f.write(f'  "{_esc(u)}" -- "{_esc(v)}";\n')

        f.write("}\n")
