from __future__ import annotations

import asyncio
import os
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from lmc_discovery.config import SnmpProfile

_LINE_RE = re.compile(r"^\s*\.?((?P<oid>[0-9]+(?:\.[0-9]+)*))\s*=\s*(?P<rest>.*)$")

STATUS_OK = "ok"
STATUS_TIMEOUT = "timeout"
STATUS_FAILED = "failed"
STATUS_ERROR = "error"


def _debug_enabled() -> bool:
    v = (os.getenv("LMC_SNMP_DEBUG") or os.getenv("LMC_DEBUG") or "").strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def _dbg(msg: str) -> None:
    if _debug_enabled():
        print(f"[lmc][snmp-debug] {msg}", file=sys.stderr)


@dataclass(frozen=True)
class WalkResult:
    """Outcome of one walk.

    `text` is only non-empty for status "ok"; every other status carries the
    reason instead so callers can tell "no response" apart from "no rows".
    """

    oid: str
    text: str = ""
    status: str = STATUS_OK
    reason: str = ""
    returncode: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def iter_bindings(text: str) -> Iterator[Tuple[str, str]]:
    """Yield (oid, rest) for every `<OID> = <rest>` line of walk output."""
    for line in (text or "").splitlines():
        line = line.strip()
        if not line:
            continue
        m = _LINE_RE.match(line)
        if not m:
            _dbg(f"unmatched line: {line}")
            continue
        yield m.group("oid"), m.group("rest")


class SnmpWalker:
    """SNMP v1/v2c walker implemented via the Net-SNMP walk CLIs.

    v1 uses `snmpwalk` (GETNEXT), everything else `snmpbulkwalk`. Each call
    spawns exactly one process. Failures never raise: they come back as a
    WalkResult with empty text.
    """

    def __init__(self, host: str, profile: SnmpProfile) -> None:
        self.host = host
        self.profile = profile

    def command(self, oid: str) -> List[str]:
        p = self.profile
        tool = "snmpwalk" if p.version == "1" else "snmpbulkwalk"
        return [
            tool,
            "-v", p.version,
            "-c", p.community,
            "-On",
            "-t", str(p.timeout_s),
            "-r", str(p.retries),
            self.host,
            oid,
        ]

    def _masked(self, cmd: List[str]) -> str:
        out = list(cmd)
        if "-c" in out:
            out[out.index("-c") + 1] = "****"
        return " ".join(out)

    async def walk(self, oid: str) -> WalkResult:
        cmd = self.command(oid)
        _dbg(f"cmd: {self._masked(cmd)}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            print(f"[lmc] WARN: cannot run {cmd[0]} for {self.host} {oid}: {e}", file=sys.stderr)
            return WalkResult(oid=oid, status=STATUS_ERROR, reason=f"{type(e).__name__}: {e}")

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.profile.hard_timeout_s)
        except asyncio.TimeoutError:
            await self._kill(proc)
            print(
                f"[lmc] WARN: walk {self.host} {oid} exceeded {self.profile.hard_timeout_s}s; killed",
                file=sys.stderr,
            )
            return WalkResult(oid=oid, status=STATUS_TIMEOUT, reason=f"no result within {self.profile.hard_timeout_s}s")

        out = (stdout or b"").decode("utf-8", errors="ignore")
        err = (stderr or b"").decode("utf-8", errors="ignore").strip()

        _dbg(f"returncode: {proc.returncode} oid={oid}")
        if err:
            _dbg(f"stderr: {err}")

        if proc.returncode != 0:
            print(f"[lmc] WARN: walk {self.host} {oid} failed ({proc.returncode}): {err}", file=sys.stderr)
            return WalkResult(oid=oid, status=STATUS_FAILED, reason=err, returncode=proc.returncode)

        return WalkResult(oid=oid, text=out, returncode=proc.returncode)

    async def _kill(self, proc) -> None:
        try:
            proc.kill()
        except ProcessLookupError:
            return
        # drain so the pipe transports close while the loop is still running;
        # bounded in case the kill did not take
        try:
            await asyncio.wait_for(proc.communicate(), timeout=1.0)
        except asyncio.TimeoutError:
            _dbg(f"process {proc.pid} did not exit after kill")

    async def walk_many(self, oids: Iterable[str]) -> List[WalkResult]:
        """Issue all walks together; resume once every one has finished."""
        return list(await asyncio.gather(*(self.walk(oid) for oid in oids)))
