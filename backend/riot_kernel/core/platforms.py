"""Platform registry and resolution of request platform tags."""

from typing import Optional

from .config import Settings
from .exceptions import InvalidPlatformError
from .riot_api.constants import Platform


class PlatformRegistry:
    """Read-only lookup of platforms by tag plus the process-wide default."""

    def __init__(self, default: Optional[Platform] = None):
        self._default = default

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlatformRegistry":
        """Build a registry whose default comes from ``DEFAULT_PLATFORM``."""
        default = None
        if settings.default_platform:
            default = Platform.from_tag(settings.default_platform)
        return cls(default)

    def lookup_platform(self, tag: str) -> Optional[Platform]:
        return Platform.from_tag(tag)

    def default_platform(self) -> Optional[Platform]:
        return self._default


class PlatformResolver:
    """Turns an optional platform tag into a platform, or fails.

    Every endpoint resolves its platform here before building a query.
    """

    def __init__(self, registry: PlatformRegistry):
        self.registry = registry

    def resolve(self, tag: Optional[str] = None) -> Platform:
        """
        Resolve a platform tag.

        :param tag: Platform tag from the request, or None
        :returns: The tagged platform, or the configured default when tag is None
        :raises InvalidPlatformError: If the tag is unknown, or tag is None and
            no default platform is configured
        """
        if tag is None:
            platform = self.registry.default_platform()
        else:
            platform = self.registry.lookup_platform(tag)

        if platform is None:
            raise InvalidPlatformError(tag)
        return platform
