"""InitCoordinator use case orchestrating one node boot."""

from __future__ import annotations

import threading
from pathlib import Path

from galera_init.adapters.ports import (
    ConfigWriterPort,
    LoggingPort,
    TopologyLookupPort,
)
from galera_init.domain.bootstrap import BootstrapDecision, InitOutcome
from galera_init.domain.exceptions import (
    ConfigurationError,
    FeatureDisabledError,
    PollCancelledError,
)
from galera_init.domain.identity import ClusterAddressSet, NodeIdentity
from galera_init.domain.settings import InitSettings
from galera_init.domain.topology import TopologyDescriptor
from galera_init.usecases.bootstrap_decider import BootstrapDecisionEngine
from galera_init.usecases.cluster_address_builder import ClusterAddressBuilder
from galera_init.usecases.config_renderer import (
    BOOTSTRAP_FILE,
    BOOTSTRAP_FILE_NAME,
    CONFIG_FILE_NAME,
    ConfigRenderer,
)
from galera_init.usecases.initialization_inspector import InitializationInspector
from galera_init.usecases.ordinal_resolver import OrdinalResolver
from galera_init.usecases.predecessor_poller import PredecessorReadinessPoller


class InitCoordinator:
    """Runs the ordered bootstrap protocol for one node.

    Steps, in order:
        1. Fetch the topology descriptor.
        2. Resolve this node's ordinal and build the cluster addresses.
        3. Render and write the cluster config file (on every boot).
        4. Inspect local state and take the bootstrap decision.
        5. BOOTSTRAP writes the bootstrap marker; JOIN waits for the
           predecessor; SKIP_ALREADY_INITIALIZED does nothing.

    Every file write completes before the readiness wait starts, so
    cancelling the wait never leaves a partially written file.
    A signal that arrives before a write is honoured before that write,
    so a cancelled run never reports success.

    Dependencies:
        - TopologyLookupPort: Fetches the MariaDB resource
        - ConfigWriterPort: Persists config and marker files
        - PredecessorReadinessPoller: Waits for the predecessor (joiners only)
        - LoggingPort: Receives one line per phase transition
    """

    def __init__(
        self,
        settings: InitSettings,
        lookup: TopologyLookupPort,
        writer: ConfigWriterPort,
        poller: PredecessorReadinessPoller | None,
        logger: LoggingPort,
        renderer: ConfigRenderer | None = None,
        inspector: InitializationInspector | None = None,
        decision_engine: BootstrapDecisionEngine | None = None,
        address_builder: ClusterAddressBuilder | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            settings: Immutable settings for this run.
            lookup: Port fetching the MariaDB resource.
            writer: Port persisting files into the config directory.
            poller: Poller used on the JOIN path, None when the run only
                renders (a JOIN then fails with ConfigurationError).
            logger: Port receiving phase transition lines.
            renderer: Config renderer, defaults to ConfigRenderer().
            inspector: State inspector, defaults to the settings' policy.
            decision_engine: Decision engine, defaults to BootstrapDecisionEngine().
            address_builder: Address builder, defaults to ClusterAddressBuilder().
        """
        self._settings = settings
        self._lookup = lookup
        self._writer = writer
        self._poller = poller
        self._logger = logger
        self._address_builder = address_builder or ClusterAddressBuilder()
        self._renderer = renderer or ConfigRenderer(self._address_builder)
        self._inspector = inspector or InitializationInspector(
            settings.detection_policy
        )
        self._decision_engine = decision_engine or BootstrapDecisionEngine()

    def fetch_topology(self) -> TopologyDescriptor:
        """Fetch and decode the topology descriptor.

        Raises:
            DescriptorLookupError: If the resource cannot be fetched or decoded.
        """
        resource = self._lookup.fetch(
            self._settings.mariadb_name, self._settings.mariadb_namespace
        )
        topology = TopologyDescriptor.from_resource(
            resource,
            root_credential=self._settings.root_password,
            cluster_domain=self._settings.cluster_domain,
            default_namespace=self._settings.mariadb_namespace,
        )
        self._logger.info(
            "Fetched MariaDB",
            mariadb=topology.group_name,
            namespace=topology.namespace,
            replicas=topology.replica_count,
            sst=topology.sst_method,
        )
        return topology

    def resolve_identity(
        self, topology: TopologyDescriptor
    ) -> tuple[NodeIdentity, ClusterAddressSet]:
        """Resolve this node's identity and the cluster addresses.

        Both come from the same topology snapshot, so the node's own address
        is always one of the cluster members.

        Raises:
            MalformedNameError: If the pod name has no valid ordinal.
            InvalidTopologyError: If the topology has no replicas or the
                ordinal is outside the group.
        """
        ordinal = OrdinalResolver(topology.group_name).resolve(self._settings.pod_name)
        addresses = self._address_builder.build(topology, ordinal)
        identity = NodeIdentity(
            ordinal=ordinal,
            name=self._settings.pod_name,
            address=addresses.self_address,
        )
        return identity, addresses

    def render_config(self) -> tuple[NodeIdentity, bytes]:
        """Run the pure part of the protocol and return the rendered config.

        Performs the descriptor lookup but writes nothing.
        """
        topology = self.fetch_topology()
        self._require_galera(topology)
        identity, addresses = self.resolve_identity(topology)
        return identity, self._renderer.render(topology, identity, addresses)

    def run(self, cancel_event: threading.Event | None = None) -> InitOutcome:
        """Run the whole protocol.

        Args:
            cancel_event: Set to cancel the run. Checked before each write
                and throughout the readiness wait.

        Returns:
            InitOutcome describing what was done.

        Raises:
            GaleraInitError: Any fatal failure; PollCancelledError when the
                run was cancelled.
        """
        topology = self.fetch_topology()
        self._require_galera(topology)
        identity, addresses = self.resolve_identity(topology)

        config = self._renderer.render(topology, identity, addresses)
        self._raise_if_cancelled(cancel_event)
        config_path = self._writer.write(CONFIG_FILE_NAME, config)
        self._logger.info(
            "Configured Galera",
            pod=identity.name,
            ordinal=identity.ordinal,
            path=str(config_path),
        )

        state = self._inspector.inspect(self._settings.state_dir)
        decision = self._decision_engine.decide(identity.ordinal, state)
        self._logger.info(
            "Bootstrap decision taken",
            pod=identity.name,
            state=state.value,
            decision=decision.value,
        )

        if decision is BootstrapDecision.SKIP_ALREADY_INITIALIZED:
            self._logger.info("Already initialized. Init done", pod=identity.name)
            return InitOutcome(
                decision=decision, identity=identity, config_path=config_path
            )

        if decision is BootstrapDecision.BOOTSTRAP:
            self._raise_if_cancelled(cancel_event)
            bootstrap_path = self._writer.write(BOOTSTRAP_FILE_NAME, BOOTSTRAP_FILE)
            self._logger.info(
                "Configured bootstrap. Init done",
                pod=identity.name,
                path=str(bootstrap_path),
            )
            return InitOutcome(
                decision=decision,
                identity=identity,
                config_path=config_path,
                bootstrap_path=bootstrap_path,
            )

        return self._join(topology, identity, config_path, cancel_event)

    @staticmethod
    def _require_galera(topology: TopologyDescriptor) -> None:
        # Must run before resolve_identity: a disabled group may have no replicas.
        if not topology.galera_enabled:
            raise FeatureDisabledError(
                f"Galera is not enabled for MariaDB '{topology.group_name}'"
            )

    @staticmethod
    def _raise_if_cancelled(cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise PollCancelledError("signal")

    def _join(
        self,
        topology: TopologyDescriptor,
        identity: NodeIdentity,
        config_path: Path,
        cancel_event: threading.Event | None,
    ) -> InitOutcome:
        """Wait for the predecessor before letting this node join."""
        predecessor = self._address_builder.predecessor_of(topology, identity)
        if self._poller is None:
            raise ConfigurationError("no readiness poller configured for joining")
        self._logger.info(
            "Waiting for previous Pod to be ready",
            pod=predecessor.name,
            address=predecessor.address,
        )
        attempts = self._poller.wait_until_ready(predecessor, cancel_event)
        self._logger.info(
            "Previous Pod is ready. Init done",
            pod=predecessor.name,
            attempts=attempts,
        )
        return InitOutcome(
            decision=BootstrapDecision.JOIN,
            identity=identity,
            config_path=config_path,
            predecessor=predecessor,
            poll_attempts=attempts,
        )
