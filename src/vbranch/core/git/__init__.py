"""Git repository operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from vbranch.core.git.abc import Repository, remote_refspec
from vbranch.core.git.dry_run import DryRunRepository
from vbranch.core.git.fake import FakeRepository
from vbranch.core.git.real import RealRepository

__all__ = [
    "Repository",
    "RealRepository",
    "FakeRepository",
    "DryRunRepository",
    "remote_refspec",
]
