from __future__ import annotations

import asyncio
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_FORMAT = '%aN,%aE,"%cD"'


class GitCommandError(RuntimeError):
    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.git_args = list(args)
        self.returncode = returncode
        self.stderr = stderr
        msg = (stderr or "").strip().splitlines()[-1:] or [""]
        super().__init__(f"git {' '.join(args)} failed with exit code {returncode}: {msg[0]}")


async def run_git(args: list[str], cwd: Path, timeout_s: float | None = None) -> tuple[int, str, str]:
    proc = await asyncio.create_subprocess_exec(
        "git",
        *args,
        cwd=str(cwd),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        out, err = await asyncio.wait_for(proc.communicate(), timeout=timeout_s)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        raise
    return proc.returncode or 0, out.decode("utf-8", errors="replace"), err.decode("utf-8", errors="replace")


def file_log_args(path: str | Path) -> list[str]:
    return ["log", "--all", "--follow", f"--format={LOG_FORMAT}", "--", str(path)]


async def get_file_log(path: str | Path, cwd: Path, timeout_s: float | None = None) -> str:
    """
    Return raw `git log` rows for one file, newest commit first, following
    renames across all refs. Raises GitCommandError on a non-zero exit.
    """
    args = file_log_args(path)
    logger.debug("running git %s in %s", " ".join(args), cwd)
    code, out, err = await run_git(args, cwd=cwd, timeout_s=timeout_s)
    if code != 0:
        raise GitCommandError(args, code, err)
    return out
