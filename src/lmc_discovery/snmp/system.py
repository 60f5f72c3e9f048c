import re
from typing import Optional

SYSDESCR_OID = "1.3.6.1.2.1.1.1.0"

_STRING_RE = re.compile(r'STRING:\s*"?([^\n"]+)"?\s*$', re.MULTILINE)


def parse_sysdescr(text: str) -> Optional[str]:
    m = _STRING_RE.search(text or "")
    if not m:
        return None
    return m.group(1).strip()
