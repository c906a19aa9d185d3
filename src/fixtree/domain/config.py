from __future__ import annotations

"""
Generator Configuration Domain.

Defines the provisioning policies, the dict-based default configuration
consumed by the CLI and validator, and the immutable GeneratorConfig used
by the materialization core.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_TEMP_PREFIX = "fixtree"
DEFAULT_ENCODING = "utf-8"
DEFAULT_DIR_MODE = 0o700
DEFAULT_FILE_MODE = 0o600


class ProvisionMode(str, Enum):
    """
    Root provisioning policy.

    STRICT creates the root when missing and never clears it, so files
    already on disk make exclusive creation fail. DESTRUCTIVE removes the
    whole root before anything is created.
    """
    STRICT = "strict"
    DESTRUCTIVE = "destructive"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Root
        "root_path": "",
        "mode": ProvisionMode.STRICT.value,
        "temp_prefix": DEFAULT_TEMP_PREFIX,

        # Accepted content shapes
        "allow_streams": True,
        "allow_single_child": True,

        # Output
        "encoding": DEFAULT_ENCODING,
        "dir_mode": DEFAULT_DIR_MODE,
        "file_mode": DEFAULT_FILE_MODE,

        # Reporting
        "print_tree": False,
    }

# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable policy set for one generation run.

    Attributes:
        mode: Root provisioning policy.
        allow_streams: Accept readable objects as file content.
        allow_single_child: Accept a lone Node as directory content.
        temp_prefix: Prefix of temporary roots allocated by generate().
        encoding: Codec used to turn str content into bytes.
        dir_mode: Permission bits requested for created directories.
        file_mode: Permission bits requested for created files.
    """
    mode: ProvisionMode = ProvisionMode.STRICT
    allow_streams: bool = True
    allow_single_child: bool = True
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    encoding: str = DEFAULT_ENCODING
    dir_mode: int = DEFAULT_DIR_MODE
    file_mode: int = DEFAULT_FILE_MODE

    @property
    def destructive(self) -> bool:
        return self.mode is ProvisionMode.DESTRUCTIVE

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "GeneratorConfig":
        """Build a config from a (validated) configuration dictionary."""
        defaults = get_default_config()
        return cls(
            mode=ProvisionMode(cfg.get("mode", defaults["mode"])),
            allow_streams=bool(cfg.get("allow_streams", defaults["allow_streams"])),
            allow_single_child=bool(cfg.get("allow_single_child", defaults["allow_single_child"])),
            temp_prefix=cfg.get("temp_prefix") or defaults["temp_prefix"],
            encoding=cfg.get("encoding") or defaults["encoding"],
            dir_mode=int(cfg.get("dir_mode", defaults["dir_mode"])),
            file_mode=int(cfg.get("file_mode", defaults["file_mode"])),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data


# The presets differ only in provisioning mode; both accept every content
# shape. Narrow them with allow_streams / allow_single_child when needed.
STRICT = GeneratorConfig(mode=ProvisionMode.STRICT)
DESTRUCTIVE = GeneratorConfig(mode=ProvisionMode.DESTRUCTIVE)
