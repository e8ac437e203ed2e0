class McClientLibError(Exception):
    """Base exception for mcclientlib."""


class DownloadError(McClientLibError):
    """Raised when a metadata request fails."""


class VersionResolutionError(McClientLibError):
    """Raised when a requested version cannot be resolved."""


class UnknownGameVersion(VersionResolutionError):
    """Raised when the game version is not in the version manifest."""


class MissingIntermediary(VersionResolutionError):
    """Raised when the game version exists but has no intermediary."""


class UnknownLoaderVersion(VersionResolutionError):
    """Raised when an explicit loader version is not published."""


class NoLoaderVersionsAvailable(VersionResolutionError):
    """Raised when the loader version list is empty."""


class InstallError(McClientLibError):
    """Raised when installation fails."""


class FilesystemError(InstallError):
    """Raised when a profile directory or file cannot be created."""


class ProfileAlreadyExists(InstallError):
    """Raised when the profile launch json is already present."""


class RegistryUpdateError(InstallError):
    """Raised when launcher_profiles.json could not be updated."""
