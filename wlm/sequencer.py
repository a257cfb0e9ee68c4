import logging
import time
from typing import Callable

from tqdm import tqdm

from wlm.config import RunConfig
from wlm.kubectl_splunk import ensure_prerequisites
from wlm.logging import console
from wlm.tools import Toolset
from wlm.workload import DEMO_POOLS, DEMO_RULES, DEMO_SEARCHES

logger = logging.getLogger(__name__)

SEARCH_WAIT_SECONDS = 60


class Sequencer:
    """
    Runs the workload-management demo against one pod as a single linear
    sequence. The first failing command aborts the run: nothing after it
    executes and nothing already created is rolled back.
    """

    def __init__(self, config: RunConfig, tools: Toolset,
                 sleep: Callable[[float], None] = None,
                 check_prerequisites: Callable[[], None] = ensure_prerequisites):
        self.config = config
        self.tools = tools
        self.sleep = sleep or time.sleep
        self.check_prerequisites = check_prerequisites

    def run(self) -> None:
        self.check_prerequisites()

        logger.info("Starting Splunk management operations on pod: %s in namespace: %s",
                    self.config.pod, self.config.namespace)

        # limits are reported but not applied to the pod
        logger.info("Setting pod resource limits (cpu=%s, memory=%s)...",
                    self.config.cpu_limit, self.config.memory_limit)

        logger.info("Enabling Workload Management in Splunk...")
        self.tools.enable_workload_management()

        self._create_workload_objects()
        self._run_test_searches()
        self._wait_for_searches()
        self._collect_resource_usage()

        logger.info("Verifying Workload Management status...")
        self._show(self.tools.workload_management_status())

        self._cleanup()

        logger.info("Splunk management operations completed successfully.")

    def _create_workload_objects(self) -> None:
        logger.info("Creating workload pools...")
        for pool in DEMO_POOLS:
            self.tools.create_pool(pool)

        logger.info("Creating workload rules...")
        for rule in DEMO_RULES:
            self.tools.create_rule(rule)

    def _run_test_searches(self) -> None:
        logger.info("Running test searches to generate workload...")
        for search in DEMO_SEARCHES:
            self.tools.launch_search(search)

    def _wait_for_searches(self) -> None:
        """
        Fixed delay standing in for search completion. The searches may still
        be running, or may never have started, when this returns.
        """
        logger.info("Allowing searches to run for %d seconds...", SEARCH_WAIT_SECONDS)
        for _ in tqdm(range(SEARCH_WAIT_SECONDS), desc="Waiting for searches", unit="s"):
            self.sleep(1)

    def _collect_resource_usage(self) -> None:
        logger.info("Collecting resource usage data...")
        self._show(self.tools.resource_usage())

        logger.info("Fetching detailed CPU and memory usage...")
        self._show(self.tools.top_processes())

    def _cleanup(self) -> None:
        logger.info("Cleaning up created workload pools and rules...")
        for rule in DEMO_RULES:
            self.tools.delete_rule(rule.name)
        for pool in DEMO_POOLS:
            self.tools.delete_pool(pool.name)

        logger.info("Disabling Workload Management...")
        self.tools.disable_workload_management()

    @staticmethod
    def _show(output: str) -> None:
        if output.strip():
            console.print(output.rstrip(), markup=False, highlight=False)
