from __future__ import annotations

"""
Root Provisioner.

Obtains the root directory of a generation run and prepares it according
to the provisioning policy before any entry is materialized.
"""

import logging
import os
from typing import Optional, Union

from fixtree.domain.config import DEFAULT_TEMP_PREFIX, GeneratorConfig
from fixtree.domain.errors import RootProvisioningError
from fixtree.infra.fs import make_dirs, make_temp_dir, remove_tree

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def provision_root(base_path: Optional[PathLike] = None, prefix: str = DEFAULT_TEMP_PREFIX) -> str:
    """
    Resolve the root directory for a run.

    Without a base path a fresh, uniquely named directory is allocated under
    the system temp location. An explicit base path is returned as-is once
    checked to be non-empty.

    Args:
        base_path: Explicit root, or None to allocate a temporary one.
        prefix: Name prefix of the temporary directory.

    Returns:
        str: Root path.

    Raises:
        RootProvisioningError: If allocation fails or the path is empty.
    """
    if base_path is None:
        try:
            root = make_temp_dir(prefix)
        except OSError as e:
            raise RootProvisioningError(f"cannot generate root directory: {e}") from e
        logger.debug(f"Allocated temporary root: {root}")
        return root

    root = os.fspath(base_path)
    if not root:
        raise RootProvisioningError("root directory cannot be empty")
    return root


def prepare_root(root: str, config: GeneratorConfig) -> None:
    """
    Make 'root' an existing directory according to the policy.

    DESTRUCTIVE removes everything at 'root' first; STRICT leaves existing
    content untouched.

    Raises:
        RootProvisioningError: If removal or creation fails.
    """
    if config.destructive:
        try:
            remove_tree(root)
        except OSError as e:
            raise RootProvisioningError(
                f"cannot delete pre-existing root directory {root}: {e}", root
            ) from e
        logger.debug(f"Cleared root: {root}")

    try:
        make_dirs(root, config.dir_mode)
    except OSError as e:
        raise RootProvisioningError(f"cannot create root directory {root}: {e}", root) from e
