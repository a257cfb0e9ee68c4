import os
from dataclasses import dataclass

from dotenv import load_dotenv

CLUSTER_MANAGER_SELECTOR = "app.kubernetes.io/name=cluster-manager"


@dataclass(frozen=True)
class RunConfig:
    pod: str
    namespace: str = "default"
    cpu_limit: str = "500m"  # accepted, never applied
    memory_limit: str = "1Gi"  # accepted, never applied
    selector: str = CLUSTER_MANAGER_SELECTOR


@dataclass(frozen=True)
class SplunkSettings:
    auth: str = "admin:changeme"
    splunk_home: str = "/opt/splunk"
    verbosity: int = 3

    @property
    def splunk_bin(self) -> str:
        return f"{self.splunk_home.rstrip('/')}/bin/splunk"

    @classmethod
    def from_env(cls) -> "SplunkSettings":
        """
        Read settings from the environment, loading a .env file first if present.
        """
        load_dotenv()
        verbosity = os.getenv("KUBECTL_SPLUNK_VERBOSITY", str(cls.verbosity))
        try:
            verbosity = int(verbosity)
        except ValueError:
            raise ValueError(f"KUBECTL_SPLUNK_VERBOSITY must be an integer, got: {verbosity!r}")
        return cls(
            auth=os.getenv("SPLUNK_AUTH", cls.auth),
            splunk_home=os.getenv("SPLUNK_HOME", cls.splunk_home),
            verbosity=max(0, verbosity),
        )
