from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .exceptions import McClientLibError
from .launch_json import LOADER_ARTIFACT_NAME


@dataclass(frozen=True, slots=True)
class InstallRequest:
    minecraft_version: str
    # None selects the newest published loader.
    loader_version: str | None = None
    generate_profile: bool = True
    installation_dir: Path | None = None


@dataclass(frozen=True, slots=True)
class ResolvedPlan:
    minecraft_version: str
    loader_version: str

    @property
    def profile_name(self) -> str:
        return f"{LOADER_ARTIFACT_NAME}-{self.loader_version}-{self.minecraft_version}"


@dataclass(slots=True)
class InstallResult:
    plan: ResolvedPlan
    installation_dir: Path
    profile_dir: Path
    launch_json_path: Path
    placeholder_jar_path: Path
    profile_registered: bool = False

    @property
    def profile_name(self) -> str:
        return self.plan.profile_name


class InstallState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    MATERIALIZING = "materializing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(slots=True)
class InstallOutcome:
    state: InstallState
    result: InstallResult | None = None
    error: McClientLibError | None = None
    # Last non-terminal state reached before a failure.
    failed_during: InstallState | None = None

    @property
    def ok(self) -> bool:
        return self.state is InstallState.COMPLETED
