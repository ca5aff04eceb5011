"""Environment adapter: node identity and credentials from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from galera_init.domain.exceptions import ConfigurationError

POD_NAME_VAR = "POD_NAME"
ROOT_PASSWORD_VAR = "MARIADB_ROOT_PASSWORD"

_REQUIRED_VARS = (POD_NAME_VAR, ROOT_PASSWORD_VAR)


@dataclass(frozen=True)
class Environment:
    """Values sourced from the process environment.

    Attributes:
        pod_name: Name of the pod this process runs in.
        root_password: MariaDB root password, hidden from repr.
    """

    pod_name: str
    root_password: str = field(repr=False)


def read_environment(environ: Mapping[str, str] | None = None) -> Environment:
    """Read the mandatory environment values.

    POD_NAME is stripped of surrounding whitespace; the password is kept
    verbatim apart from rejecting blank values.

    Args:
        environ: Mapping to read from, defaults to os.environ.

    Returns:
        Environment with every mandatory value.

    Raises:
        ConfigurationError: Listing every missing or blank variable.
    """
    source = os.environ if environ is None else environ

    missing = [
        name for name in _REQUIRED_VARS if not (source.get(name) or "").strip()
    ]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    return Environment(
        pod_name=source[POD_NAME_VAR].strip(),
        root_password=source[ROOT_PASSWORD_VAR],
    )
