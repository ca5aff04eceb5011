"""Command-line entry point for galera-init."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from galera_init.adapters.environment import read_environment
from galera_init.adapters.filesystem_config_writer import FilesystemConfigWriter
from galera_init.adapters.logging_adapter import StdlibLoggingAdapter
from galera_init.adapters.ports import ReadinessOraclePort, TopologyLookupPort
from galera_init.adapters.signal_cancellation import signal_cancellation
from galera_init.domain.bootstrap import DetectionPolicy
from galera_init.domain.exceptions import GaleraInitError, PollCancelledError
from galera_init.domain.settings import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_STATE_DIR,
    InitSettings,
)
from galera_init.domain.topology import DEFAULT_CLUSTER_DOMAIN
from galera_init.log import init_logging
from galera_init.usecases.init_coordinator import InitCoordinator
from galera_init.usecases.predecessor_poller import PredecessorReadinessPoller

app = typer.Typer(
    help="Initialize a MariaDB Galera node before the database starts.",
    add_completion=False,
)


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogTimeFormat(str, Enum):
    EPOCH = "epoch"
    MILLIS = "millis"
    NANO = "nano"
    ISO8601 = "iso8601"
    RFC3339 = "rfc3339"
    RFC3339NANO = "rfc3339nano"


class OracleKind(str, Enum):
    POD = "pod"
    MARIADB = "mariadb"


class PolicyOption(str, Enum):
    MARKER_FILE = DetectionPolicy.MARKER_FILE.value
    ANY_ENTRY = DetectionPolicy.ANY_ENTRY.value


# ------------------------------------------------------------------------------
# Wiring
# ------------------------------------------------------------------------------


def build_lookup(
    topology_file: Optional[Path], kube_context: Optional[str]
) -> TopologyLookupPort:
    """Return the descriptor lookup: a manifest file or the Kubernetes API."""
    if topology_file is not None:
        from galera_init.adapters.file_topology_lookup import FileTopologyLookup

        return FileTopologyLookup(topology_file)

    from galera_init.adapters.kubernetes_client import load_kubernetes_config
    from galera_init.adapters.kubernetes_topology_lookup import (
        KubernetesTopologyLookup,
    )

    load_kubernetes_config(kube_context)
    return KubernetesTopologyLookup()


def build_oracle(
    settings: InitSettings, kube_context: Optional[str]
) -> ReadinessOraclePort:
    """Return the readiness oracle selected in the settings."""
    if settings.oracle == "mariadb":
        from galera_init.adapters.pymysql_readiness_oracle import (
            MariaDBReadinessOracle,
        )

        return MariaDBReadinessOracle(
            password=settings.root_password,
            port=settings.mariadb_port,
            connect_timeout=settings.connect_timeout,
        )

    from galera_init.adapters.kubernetes_client import load_kubernetes_config
    from galera_init.adapters.kubernetes_pod_oracle import (
        KubernetesPodReadinessOracle,
    )

    load_kubernetes_config(kube_context)
    return KubernetesPodReadinessOracle(namespace=settings.mariadb_namespace)


def build_coordinator(
    settings: InitSettings,
    topology_file: Optional[Path] = None,
    kube_context: Optional[str] = None,
    render_only: bool = False,
) -> InitCoordinator:
    """Wire the coordinator and its adapters from settings.

    With render_only no readiness oracle is built, so a dry run needs no
    access to the Kubernetes API or the database beyond the descriptor.
    """
    logger = StdlibLoggingAdapter()
    poller = None
    if not render_only:
        poller = PredecessorReadinessPoller(
            oracle=build_oracle(settings, kube_context),
            interval=settings.poll_interval,
            timeout=settings.poll_timeout,
            logger=logger,
        )
    return InitCoordinator(
        settings=settings,
        lookup=build_lookup(topology_file, kube_context),
        writer=FilesystemConfigWriter(settings.config_dir),
        poller=poller,
        logger=logger,
    )


# ------------------------------------------------------------------------------
# Command
# ------------------------------------------------------------------------------


@app.command()
def main(
    mariadb_name: str = typer.Option(
        ..., "--mariadb-name", help="The name of the MariaDB to be initialized"
    ),
    mariadb_namespace: str = typer.Option(
        ..., "--mariadb-namespace", help="The namespace of the MariaDB to be initialized"
    ),
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        help="The directory that contains MariaDB configuration files",
    ),
    state_dir: Path = typer.Option(
        DEFAULT_STATE_DIR,
        "--state-dir",
        help="The directory that contains MariaDB state files",
    ),
    oracle: OracleKind = typer.Option(
        OracleKind.POD,
        "--oracle",
        help="How joiners check the previous Pod: pod status or a direct MariaDB probe",
    ),
    detection_policy: PolicyOption = typer.Option(
        PolicyOption.MARKER_FILE,
        "--detection-policy",
        help="How the state directory is classified as already initialized",
    ),
    poll_interval: float = typer.Option(
        1.0, "--poll-interval", help="Seconds between readiness checks"
    ),
    poll_timeout: Optional[float] = typer.Option(
        None, "--poll-timeout", help="Seconds to wait for the previous Pod (default: no limit)"
    ),
    cluster_domain: str = typer.Option(
        DEFAULT_CLUSTER_DOMAIN, "--cluster-domain", help="Kubernetes cluster DNS domain"
    ),
    topology_file: Optional[Path] = typer.Option(
        None,
        "--topology-file",
        help="Read the MariaDB resource from a manifest instead of the Kubernetes API",
    ),
    kube_context: Optional[str] = typer.Option(
        None, "--kube-context", help="Kubeconfig context used outside a cluster"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the rendered config and exit without writing"
    ),
    log_level: LogLevel = typer.Option(LogLevel.INFO, "--log-level", help="Log level to use"),
    log_time_format: LogTimeFormat = typer.Option(
        LogTimeFormat.EPOCH, "--log-time-format", help="Log time format to use"
    ),
    log_dev: bool = typer.Option(False, "--log-dev", help="Enable development logs"),
) -> None:
    """Render the Galera config and gate startup on the previous Pod."""
    logger = init_logging(
        level=log_level.value,
        development=log_dev,
        time_format=log_time_format.value,
    )
    logger.info("Starting init")

    try:
        env = read_environment()
        settings = InitSettings(
            pod_name=env.pod_name,
            root_password=env.root_password,
            mariadb_name=mariadb_name,
            mariadb_namespace=mariadb_namespace,
            config_dir=config_dir,
            state_dir=state_dir,
            oracle=oracle.value,
            detection_policy=DetectionPolicy(detection_policy.value),
            poll_interval=poll_interval,
            poll_timeout=poll_timeout,
            cluster_domain=cluster_domain,
        )
        coordinator = build_coordinator(
            settings, topology_file, kube_context, render_only=dry_run
        )

        if dry_run:
            _, config = coordinator.render_config()
            typer.echo(config.decode("utf-8"), nl=False)
            return

        with signal_cancellation() as cancel_event:
            outcome = coordinator.run(cancel_event)
    except PollCancelledError as e:
        logger.info("Init cancelled: %s", e)
        raise typer.Exit(code=1)
    except GaleraInitError as e:
        logger.error("Init failed: %s", e)
        raise typer.Exit(code=1)

    logger.info(
        "Init finished decision=%s pod=%s", outcome.decision.value, outcome.identity.name
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
