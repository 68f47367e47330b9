"""Invocation of the external recipe updater (``boulder recipe update``)."""

from __future__ import annotations

import logging
import subprocess
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import UpdaterError

if TYPE_CHECKING:
    from .recipe.types import UpdateCommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateResult:
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_update(
    command: UpdateCommand,
    cwd: str | Path,
    executable: str = "boulder",
    timeout: float | None = None,
) -> UpdateResult:
    """Run the updater in ``cwd``, streaming its stdout to the log.

    Stdout lines are logged as they arrive; stderr is collected and returned.
    A child that outlives ``timeout`` is killed and reported with its return code.

    Raises:
        UpdaterError: If the updater cannot be started
    """
    argv = command.argv(executable)
    logger.debug("Running %s in %s", argv, cwd)
    try:
        proc = subprocess.Popen(
            argv,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise UpdaterError(f"Failed to run {executable}: {e}") from e

    # Drain stderr on the side so a chatty child cannot block on a full pipe
    stderr_chunks: list[str] = []
    drain = threading.Thread(target=lambda: stderr_chunks.append(proc.stderr.read()), daemon=True)
    drain.start()

    timer = None
    if timeout is not None:
        timer = threading.Timer(timeout, proc.kill)
        timer.start()
    try:
        for line in proc.stdout:
            logger.info("%s", line.rstrip("\n"))
        returncode = proc.wait()
    finally:
        if timer is not None:
            timer.cancel()
        proc.stdout.close()
        drain.join()
        proc.stderr.close()

    return UpdateResult(returncode=returncode, stderr="".join(stderr_chunks))
