"""Writing KUBECONFIG files to disk."""

from __future__ import annotations

import os

from kindling.kubeconfig.encode import encode
from kindling.kubeconfig.helpers import KubeconfigError
from kindling.kubeconfig.types import Config


def write(config: Config, config_path: str) -> None:
    """Encode config and write it to config_path, creating parent directories."""
    encoded = encode(config)
    directory = os.path.dirname(config_path)
    if directory and not os.path.exists(directory):
        try:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        except OSError as exc:
            raise KubeconfigError(f"failed to create directory for KUBECONFIG: {exc}") from exc
    try:
        fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(encoded)
    except OSError as exc:
        raise KubeconfigError(f"failed to write KUBECONFIG: {exc}") from exc