from .catalog import VersionCatalog
from .installer import ClientInstaller
from .models import InstallOutcome, InstallRequest, InstallResult, InstallState, ResolvedPlan

__all__ = [
    "ClientInstaller",
    "InstallOutcome",
    "InstallRequest",
    "InstallResult",
    "InstallState",
    "ResolvedPlan",
    "VersionCatalog",
]
