from wlm.workload import (
    DEMO_POOLS,
    DEMO_RULES,
    DEMO_SEARCHES,
    DemoSearch,
    WorkloadPool,
    WorkloadRule,
    pool_path,
    rule_path,
)


def test_pool_fields_are_strings():
    pool = WorkloadPool("p", cpu_weight=80, mem_weight=70)
    assert pool.fields() == {"name": "p", "cpu_weight": "80", "mem_weight": "70"}


def test_rule_fields():
    rule = WorkloadRule("r", "p", "(index=x)")
    assert rule.fields() == {"name": "r", "workload_pool": "p", "search_filter": "(index=x)"}


def test_demo_pools_and_rules():
    assert [(p.name, p.cpu_weight, p.mem_weight) for p in DEMO_POOLS] == [
        ("high_priority_pool", 80, 80),
        ("low_priority_pool", 20, 20),
    ]
    assert [(r.name, r.workload_pool, r.search_filter) for r in DEMO_RULES] == [
        ("high_priority_rule", "high_priority_pool", "(index=critical_data)"),
        ("low_priority_rule", "low_priority_pool", "(index=non_critical_data)"),
    ]


def test_every_rule_targets_a_demo_pool():
    names = {p.name for p in DEMO_POOLS}
    assert all(r.workload_pool in names for r in DEMO_RULES)


def test_search_query():
    assert DemoSearch("critical_data").query == "search index=critical_data | head 10000"
    assert DemoSearch("x", limit=5).query == "search index=x | head 5"
    assert [s.index for s in DEMO_SEARCHES] == ["critical_data", "non_critical_data"]


def test_delete_paths():
    assert pool_path("low_priority_pool") == "/services/workload/pools/low_priority_pool"
    assert rule_path("high_priority_rule") == "/services/workload/rules/high_priority_rule"
