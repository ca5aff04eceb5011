"""Bootstrap decision engine use case."""

from __future__ import annotations

from galera_init.domain.bootstrap import BootstrapDecision, InitializationState
from galera_init.domain.exceptions import MalformedNameError

FOUNDER_ORDINAL = 0


class BootstrapDecisionEngine:
    """Decides how a node enters the cluster on boot.

    Transition rules, evaluated in this order:
        1. ALREADY_INITIALIZED -> SKIP_ALREADY_INITIALIZED, so restarting a
           node is always a no-op.
        2. ordinal 0 -> BOOTSTRAP, the only node allowed to found a new
           cluster.
        3. anything else -> JOIN, wait for the predecessor first.

    This is a stateless, pure logic component.
    """

    def decide(self, ordinal: int, state: InitializationState) -> BootstrapDecision:
        """Decide the bootstrap action for a node.

        Args:
            ordinal: Ordinal of the node.
            state: Initialization state of the node's local data.

        Returns:
            The BootstrapDecision for the node.

        Raises:
            MalformedNameError: If the ordinal is negative.
        """
        if ordinal < 0:
            raise MalformedNameError(f"ordinal cannot be negative, got: {ordinal}")

        if state is InitializationState.ALREADY_INITIALIZED:
            return BootstrapDecision.SKIP_ALREADY_INITIALIZED

        if ordinal == FOUNDER_ORDINAL:
            return BootstrapDecision.BOOTSTRAP

        return BootstrapDecision.JOIN
