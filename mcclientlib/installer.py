from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable
import logging

from .exceptions import (
    FilesystemError,
    McClientLibError,
    MissingIntermediary,
    NoLoaderVersionsAvailable,
    ProfileAlreadyExists,
    RegistryUpdateError,
    UnknownGameVersion,
    UnknownLoaderVersion,
)
from .http import HttpClient
from .launch_json import get_launch_json
from .launcher_profiles import update_profiles
from .meta import (
    INTERMEDIARY_VERSIONS_ENDPOINT,
    LOADER_VERSIONS_ENDPOINT,
    QUILT_META,
    QuiltMeta,
)
from .minecraft import VersionManifest
from .models import (
    InstallOutcome,
    InstallRequest,
    InstallResult,
    InstallState,
    ResolvedPlan,
)
from .paths import default_installation_dir
from .utils import create_exclusive, create_if_absent


StatusHandler = Callable[[str], None]
LaunchJsonProvider = Callable[[str, str], str]
ProfileWriter = Callable[[Path, str, str], Any]

logger = logging.getLogger(__name__)


class ClientInstaller:
    """Installs a Quilt client profile into a vanilla launcher directory.

    Version checks run concurrently and must all pass before anything is
    written. Files are then created in a fixed order: profile directory,
    placeholder jar, launch json, and finally the launcher profile entry.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        meta_url: str = QUILT_META,
        status_handler: StatusHandler | None = None,
        launch_json_provider: LaunchJsonProvider | None = None,
        profile_writer: ProfileWriter | None = None,
    ) -> None:
        self.http_client = http_client or HttpClient()
        self.meta_url = meta_url
        self._status_handler = status_handler
        self._launch_json_provider = launch_json_provider or self._fetch_launch_json
        self._profile_writer = profile_writer or update_profiles

    def install(self, request: InstallRequest) -> InstallResult:
        return self._install(request, on_state=lambda state: None)

    def run(self, request: InstallRequest) -> InstallOutcome:
        reached = [InstallState.IDLE]
        try:
            result = self._install(request, on_state=reached.append)
        except McClientLibError as exc:
            logger.debug("Install failed while %s: %s", reached[-1].value, exc)
            return InstallOutcome(
                state=InstallState.FAILED,
                error=exc,
                failed_during=reached[-1],
            )
        return InstallOutcome(state=InstallState.COMPLETED, result=result)

    def resolve(self, request: InstallRequest) -> ResolvedPlan:
        endpoints = (LOADER_VERSIONS_ENDPOINT, INTERMEDIARY_VERSIONS_ENDPOINT)
        with ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="mcclientlib-resolve"
        ) as executor:
            meta_future = executor.submit(
                QuiltMeta.create, self.http_client, endpoints, self.meta_url
            )
            game_future = executor.submit(
                self._check_game_version, request.minecraft_version
            )
            intermediary_future = executor.submit(
                self._check_intermediary, request.minecraft_version, meta_future
            )
            loader_future = executor.submit(
                self._select_loader_version, request.loader_version, meta_future
            )

        # Leaving the executor joins every task; report in a fixed order.
        failures = [
            error
            for error in (
                game_future.exception(),
                intermediary_future.exception(),
                loader_future.exception(),
            )
            if error is not None
        ]
        if failures:
            # An empty loader list is reported ahead of any other failure.
            failures.sort(key=lambda error: not isinstance(error, NoLoaderVersionsAvailable))
            raise failures[0]

        plan = ResolvedPlan(
            minecraft_version=game_future.result(),
            loader_version=loader_future.result(),
        )
        logger.debug("Resolved %s", plan)
        return plan

    def _install(
        self, request: InstallRequest, on_state: Callable[[InstallState], None]
    ) -> InstallResult:
        if request.loader_version is not None:
            self._status(
                f"Installing Minecraft client of version {request.minecraft_version} "
                f"with loader version {request.loader_version}"
            )
        else:
            self._status(
                f"Installing Minecraft client of version {request.minecraft_version}"
            )
        installation_dir = (
            Path(request.installation_dir)
            if request.installation_dir is not None
            else default_installation_dir()
        )

        on_state(InstallState.RESOLVING)
        plan = self.resolve(request)
        on_state(InstallState.RESOLVED)

        on_state(InstallState.MATERIALIZING)
        result = self._materialize(
            plan,
            installation_dir=installation_dir,
            generate_profile=request.generate_profile,
        )
        self._status("Completed installation")
        return result

    def _materialize(
        self, plan: ResolvedPlan, installation_dir: Path, generate_profile: bool
    ) -> InstallResult:
        launch_json = self._launch_json_provider(
            plan.minecraft_version, plan.loader_version
        )
        self._status("Creating profile launch json")

        profile_name = plan.profile_name
        profile_dir = installation_dir / "versions" / profile_name
        launch_json_path = profile_dir / f"{profile_name}.json"
        placeholder_jar_path = profile_dir / f"{profile_name}.jar"

        try:
            profile_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(
                f"Could not create profile directory {profile_dir}: {exc}"
            ) from exc

        # The launcher expects a jar named after the profile next to its json.
        # Only its presence matters.
        try:
            create_if_absent(placeholder_jar_path)
        except OSError as exc:
            raise FilesystemError(
                f"Could not create {placeholder_jar_path}: {exc}"
            ) from exc

        try:
            create_exclusive(launch_json_path, launch_json)
        except FileExistsError as exc:
            raise ProfileAlreadyExists(
                f"Profile {profile_name} is already installed at {launch_json_path}."
            ) from exc
        except OSError as exc:
            raise FilesystemError(
                f"Could not write {launch_json_path}: {exc}"
            ) from exc
        logger.debug("Wrote %s", launch_json_path)

        profile_registered = False
        if generate_profile:
            self._status("Creating new profile")
            try:
                self._profile_writer(
                    installation_dir, profile_name, plan.minecraft_version
                )
            except Exception as exc:
                raise RegistryUpdateError(
                    f"Profile {profile_name} was installed but launcher profiles "
                    f"in {installation_dir} could not be updated: {exc}"
                ) from exc
            profile_registered = True

        return InstallResult(
            plan=plan,
            installation_dir=installation_dir,
            profile_dir=profile_dir,
            launch_json_path=launch_json_path,
            placeholder_jar_path=placeholder_jar_path,
            profile_registered=profile_registered,
        )

    def _check_game_version(self, minecraft_version: str) -> str:
        manifest = VersionManifest.create(self.http_client)
        if manifest.get_version(minecraft_version) is None:
            raise UnknownGameVersion(
                f"Minecraft version {minecraft_version} does not exist."
            )
        return minecraft_version

    @staticmethod
    def _check_intermediary(
        minecraft_version: str, meta_future: Future[QuiltMeta]
    ) -> None:
        intermediary = meta_future.result().get_endpoint(INTERMEDIARY_VERSIONS_ENDPOINT)
        if minecraft_version not in intermediary:
            raise MissingIntermediary(
                f"Minecraft version {minecraft_version} exists but has no intermediary."
            )

    @staticmethod
    def _select_loader_version(
        requested: str | None, meta_future: Future[QuiltMeta]
    ) -> str:
        versions = meta_future.result().get_endpoint(LOADER_VERSIONS_ENDPOINT)
        if not versions:
            raise NoLoaderVersionsAvailable("No loader versions were found.")
        if requested is not None:
            if requested not in versions:
                raise UnknownLoaderVersion(
                    f"Specified loader version {requested} was not found."
                )
            return requested
        return versions[0]

    def _fetch_launch_json(self, minecraft_version: str, loader_version: str) -> str:
        return get_launch_json(
            self.http_client,
            minecraft_version,
            loader_version,
            base_url=self.meta_url,
        )

    def _status(self, message: str) -> None:
        logger.info(message)
        if self._status_handler:
            self._status_handler(message)
