from dataclasses import dataclass
from typing import Optional

from podaggregate.errors import ConfigurationError

PLATFORM_NAMES = {
    "ios": "iOS",
    "osx": "macOS",
    "tvos": "tvOS",
    "watchos": "watchOS",
}


@dataclass(frozen=True)
class Platform:
    name: str
    deployment_target: Optional[str] = None

    def __post_init__(self) -> None:
        if self.name not in PLATFORM_NAMES:
            raise ConfigurationError(
                f"unsupported platform {self.name}, expected one of {', '.join(PLATFORM_NAMES)}"
            )

    @property
    def string_name(self) -> str:
        return PLATFORM_NAMES[self.name]

    def __str__(self) -> str:
        if self.deployment_target:
            return f"{self.string_name} {self.deployment_target}"
        return self.string_name
