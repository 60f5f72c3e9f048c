import json
from pathlib import Path

from lmc_discovery.resolver import ClientTableResult, ConnectivityResult


def to_json(result, indent: int = 2) -> str:
    return json.dumps(result.to_dict(), indent=indent)


def export_json(result, path: str) -> None:
    """Write a ClientTableResult / ConnectivityResult in its wire shape."""
    if not isinstance(result, (ClientTableResult, ConnectivityResult)):
        raise TypeError(f"cannot export {type(result)!r}")
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(to_json(result) + "\n", encoding="utf-8")
