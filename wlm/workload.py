from dataclasses import dataclass
from typing import Dict, List

POOLS_ENDPOINT = "/services/workload/pools"
RULES_ENDPOINT = "/services/workload/rules"


@dataclass(frozen=True)
class WorkloadPool:
    """
    A named resource-weight bucket. Weights are relative shares.
    """
    name: str
    cpu_weight: int
    mem_weight: int

    def fields(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "cpu_weight": str(self.cpu_weight),
            "mem_weight": str(self.mem_weight),
        }


@dataclass(frozen=True)
class WorkloadRule:
    """
    Routes searches matching search_filter into workload_pool.
    """
    name: str
    workload_pool: str
    search_filter: str

    def fields(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "workload_pool": self.workload_pool,
            "search_filter": self.search_filter,
        }


@dataclass(frozen=True)
class DemoSearch:
    index: str
    limit: int = 10000

    @property
    def query(self) -> str:
        return f"search index={self.index} | head {self.limit}"


def pool_path(name: str) -> str:
    return f"{POOLS_ENDPOINT}/{name}"


def rule_path(name: str) -> str:
    return f"{RULES_ENDPOINT}/{name}"


HIGH_PRIORITY_POOL = WorkloadPool("high_priority_pool", cpu_weight=80, mem_weight=80)
LOW_PRIORITY_POOL = WorkloadPool("low_priority_pool", cpu_weight=20, mem_weight=20)

DEMO_POOLS: List[WorkloadPool] = [HIGH_PRIORITY_POOL, LOW_PRIORITY_POOL]

DEMO_RULES: List[WorkloadRule] = [
    WorkloadRule("high_priority_rule", HIGH_PRIORITY_POOL.name, "(index=critical_data)"),
    WorkloadRule("low_priority_rule", LOW_PRIORITY_POOL.name, "(index=non_critical_data)"),
]

# high priority first, matching rule order
DEMO_SEARCHES: List[DemoSearch] = [
    DemoSearch("critical_data"),
    DemoSearch("non_critical_data"),
]
