import pytest

from wlm.config import RunConfig, SplunkSettings
from wlm.kubectl_splunk import KubectlSplunk


class Recorder:
    """
    Stands in for subprocess: records every run/spawn/sleep in call order.
    `fail_on` is the 0-based index of the synchronous call that exits non-zero.
    """
    def __init__(self, fail_on: int = None, returncode: int = 1):
        self.events = []
        self.fail_on = fail_on
        self.returncode = returncode
        self.nb_runs = 0

    def runner(self, cmd):
        self.events.append(("run", list(cmd)))
        idx = self.nb_runs
        self.nb_runs += 1
        if idx == self.fail_on:
            return self.returncode, "boom\n"
        return 0, ""

    def spawner(self, cmd):
        self.events.append(("spawn", list(cmd)))

    def sleep(self, secs):
        self.events.append(("sleep", secs))

    def kinds(self):
        return [kind for kind, _ in self.events]

    def commands(self):
        return [cmd for kind, cmd in self.events if kind != "sleep"]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def config():
    return RunConfig(pod="cm-0", namespace="splunk-ns")


@pytest.fixture
def kubectl(config, recorder):
    return KubectlSplunk(config, SplunkSettings(), runner=recorder.runner, spawner=recorder.spawner)


@pytest.fixture
def make_recorder():
    return Recorder
