from wlm.kubectl_splunk import KubectlSplunk
from wlm.workload import (
    DemoSearch,
    POOLS_ENDPOINT,
    RULES_ENDPOINT,
    WorkloadPool,
    WorkloadRule,
    pool_path,
    rule_path,
)


class Toolset:
    """
    One method per cluster action of the demo. Synchronous methods return the
    command's captured output and raise CommandError on a non-zero exit.
    """
    def __init__(self, kubectl: KubectlSplunk):
        self.kubectl = kubectl

    @property
    def splunk_bin(self) -> str:
        return self.kubectl.settings.splunk_bin

    def enable_workload_management(self) -> str:
        return self.kubectl.exec(
            ["enable", "workload-management", "--accept-license", "--answer-yes", "--no-prompt"]
        )

    def create_pool(self, pool: WorkloadPool) -> str:
        return self.kubectl.rest("POST", POOLS_ENDPOINT, pool.fields())

    def create_rule(self, rule: WorkloadRule) -> str:
        return self.kubectl.rest("POST", RULES_ENDPOINT, rule.fields())

    def launch_search(self, search: DemoSearch) -> None:
        """
        Start a search inside the pod and return immediately.
        Whether the search succeeds, or finishes at all, is never observed.
        """
        self.kubectl.exec_background([
            self.splunk_bin, "search", search.query,
            "-app", "search",
            "-auth", self.kubectl.settings.auth,
        ])

    def resource_usage(self) -> str:
        return self.kubectl.top()

    def top_processes(self, count: int = 5) -> str:
        return self.kubectl.exec(["ps", "aux", "--sort=-%cpu", "|", "head", "-n", str(count)])

    def workload_management_status(self) -> str:
        return self.kubectl.exec([self.splunk_bin, "show", "workload-management-status"])

    def delete_rule(self, name: str) -> str:
        return self.kubectl.rest("DELETE", rule_path(name))

    def delete_pool(self, name: str) -> str:
        return self.kubectl.rest("DELETE", pool_path(name))

    def disable_workload_management(self) -> str:
        return self.kubectl.exec(
            [self.splunk_bin, "disable", "workload-management", "--answer-yes", "--no-prompt"]
        )
