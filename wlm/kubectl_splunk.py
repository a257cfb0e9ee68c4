import logging
import shlex
import shutil
import subprocess
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from wlm.config import RunConfig, SplunkSettings

logger = logging.getLogger(__name__)

PREREQUISITES = {
    "kubectl": "kubectl could not be found. Please install it and ensure it's in your PATH.",
    "kubectl-splunk": "kubectl-splunk could not be found. "
                      "Please install it from PyPI using 'pip install kubectl-splunk'.",
}

Runner = Callable[[Sequence[str]], Tuple[int, str]]
Spawner = Callable[[Sequence[str]], object]


class PrerequisiteError(RuntimeError):
    """A required executable is not on PATH."""

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool


class CommandError(RuntimeError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, output: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output
        super().__init__(f"Command failed with exit code {returncode}: {shlex.join(self.cmd)}")


def ensure_prerequisites(which: Callable[[str], Optional[str]] = None) -> None:
    which = which or shutil.which
    for tool, message in PREREQUISITES.items():
        if not which(tool):
            raise PrerequisiteError(tool, message)


def run_command(cmd: Sequence[str]) -> Tuple[int, str]:
    """
    Run a command to completion and return (returncode, combined stdout/stderr).
    No timeout is applied.
    """
    proc = subprocess.run(
        list(cmd),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    return proc.returncode, proc.stdout


def spawn_command(cmd: Sequence[str]) -> subprocess.Popen:
    """
    Start a command and return without waiting for it.

    The child is never polled: its exit status and output are discarded, and
    nothing guarantees it has finished (or even started) by any later point.
    """
    return subprocess.Popen(
        list(cmd),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class KubectlSplunk:
    """
    Builds and runs `kubectl splunk` (exec and rest modes) and `kubectl top`
    invocations for a single pod.
    """

    def __init__(self, config: RunConfig, settings: SplunkSettings = None,
                 runner: Runner = None, spawner: Spawner = None):
        self.config = config
        self.settings = settings or SplunkSettings()
        self.runner = runner or run_command
        self.spawner = spawner or spawn_command

    def exec_argv(self, command: Sequence[str]) -> List[str]:
        verbosity = ["-" + "v" * self.settings.verbosity] if self.settings.verbosity else []
        return [
            "kubectl", "splunk",
            *verbosity,
            "--namespace", self.config.namespace,
            "--selector", self.config.selector,
            "-P", self.config.pod,
            "exec",
            *command,
        ]

    def rest_argv(self, method: str, endpoint: str, data: Dict[str, str] = None) -> List[str]:
        fields = []
        for key, value in (data or {}).items():
            fields += ["--data", f"{key}={value}"]
        return [
            "kubectl", "splunk",
            "--namespace", self.config.namespace,
            "rest", method.upper(), endpoint,
            *fields,
        ]

    def top_argv(self) -> List[str]:
        return ["kubectl", "top", "pod", self.config.pod, "-n", self.config.namespace]

    def _run(self, cmd: List[str]) -> str:
        logger.debug("Running: %s", shlex.join(cmd))
        code, out = self.runner(cmd)
        if code != 0:
            raise CommandError(cmd, code, out)
        return out

    def exec(self, command: Sequence[str]) -> str:
        return self._run(self.exec_argv(command))

    def exec_background(self, command: Sequence[str]) -> None:
        cmd = self.exec_argv(command)
        logger.debug("Spawning: %s", shlex.join(cmd))
        self.spawner(cmd)

    def rest(self, method: str, endpoint: str, data: Dict[str, str] = None) -> str:
        return self._run(self.rest_argv(method, endpoint, data))

    def top(self) -> str:
        return self._run(self.top_argv())
