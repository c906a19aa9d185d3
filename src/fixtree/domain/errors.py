from __future__ import annotations

"""
Generation Error Hierarchy.

Every failure raised while provisioning a root or materializing a tree
descends from FixtreeError. Each error keeps the offending path and, when
known, the root directory being populated so callers can decide whether
to discard a partially generated tree.
"""

from typing import Optional


class FixtreeError(Exception):
    """
    Base class of all tree generation failures.

    Attributes:
        message: Human readable description of the failure.
        path: Filesystem path involved in the failure, if any.
        root_path: Root directory of the generation when it is known.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.root_path: Optional[str] = None

    @property
    def kind(self) -> str:
        return type(self).__name__


class RootProvisioningError(FixtreeError):
    """Temp allocation failed, the root was empty, or the pre-clean failed."""


class DirectoryCreationError(FixtreeError):
    """A directory could not be created (permissions, file in the way...)."""


class FileCreationError(FixtreeError):
    """Exclusive file creation failed, usually because the path exists."""


class ShapeError(FixtreeError):
    """Content does not match the directory/file kind of its node."""


class WriteError(FixtreeError):
    """Copying bytes into an already created file failed."""


class DescriptionLoadError(FixtreeError):
    """A serialized description could not be read or converted."""
