"""Remote tree adapters."""

from __future__ import annotations

from .drive import DriveRemote

__all__ = ["DriveRemote"]
