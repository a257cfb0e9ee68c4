import logging
import sys
from typing import List, Optional

import typer

from wlm.config import RunConfig, SplunkSettings
from wlm.kubectl_splunk import CommandError, KubectlSplunk, PrerequisiteError
from wlm.logging import setup_logger
from wlm.sequencer import Sequencer
from wlm.tools import Toolset

logger = logging.getLogger("wlm")

USAGE_ERROR_EXIT_CODE = 2

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def build_sequencer(config: RunConfig, settings: SplunkSettings) -> Sequencer:
    kubectl = KubectlSplunk(config, settings)
    return Sequencer(config, Toolset(kubectl))


@app.command()
def main(pod: str = typer.Option(..., "-p", "--pod", help="Splunk pod name (required)"),
         namespace: str = typer.Option("default", "-n", "--namespace", help="Kubernetes namespace"),
         cpu_limit: str = typer.Option("500m", "-c", "--cpu-limit", help="CPU limit for the Splunk pod"),
         memory_limit: str = typer.Option("1Gi", "-m", "--memory-limit",
                                          help="Memory limit for the Splunk pod")):
    """
    Enable Splunk workload management on a pod, exercise two workload pools
    with test searches, report resource usage, then clean everything up.
    """
    config = RunConfig(pod=pod, namespace=namespace, cpu_limit=cpu_limit, memory_limit=memory_limit)
    try:
        settings = SplunkSettings.from_env()
    except ValueError as e:
        logger.error("Error: %s", e)
        raise typer.Exit(code=1)

    try:
        build_sequencer(config, settings).run()
    except CommandError as e:
        logger.error("Error: %s", e)
        if e.output.strip():
            logger.error(e.output.rstrip())
        raise typer.Exit(code=1)
    except PrerequisiteError as e:
        logger.error("Error: %s", e)
        raise typer.Exit(code=1)


def run(argv: Optional[List[str]] = None) -> int:
    """
    Invoke the CLI and return its exit status.

    Typer prints usage and exits with 2 on a bad command line; that is
    reported as 1 here.
    """
    setup_logger("wlm")
    try:
        app(args=argv, prog_name="run_wlm_demo")
    except SystemExit as e:
        if e.code is None:
            return 0
        if not isinstance(e.code, int):
            return 1
        return 1 if e.code == USAGE_ERROR_EXIT_CODE else e.code
    return 0


if __name__ == "__main__":
    sys.exit(run())
