from typing import Dict, List, Optional, Sequence

from podaggregate.details.platform import Platform

# Attributes a specification can declare globally or per platform
MULTI_PLATFORM_ATTRIBUTES = ("source_files", "frameworks", "resources")


class Specification:
    def __init__(
        self,
        *,
        name: str,
        version: str = "1.0.0",
        source_files: Sequence[str] = (),
        frameworks: Sequence[str] = (),
        resources: Sequence[str] = (),
        platforms: Optional[Dict[str, Optional[str]]] = None,
        platform_attributes: Optional[Dict[str, Dict[str, Sequence[str]]]] = None,
    ):
        self.name = name
        self.version = version
        self.attributes: Dict[str, List[str]] = {
            "source_files": list(source_files),
            "frameworks": list(frameworks),
            "resources": list(resources),
        }
        # platform name -> minimum deployment target, None means all platforms
        self.platforms = platforms
        self.platform_attributes = platform_attributes or {}
        for platform_name, attrs in self.platform_attributes.items():
            for key in attrs:
                if key not in MULTI_PLATFORM_ATTRIBUTES:
                    raise ValueError(
                        f"unknown attribute '{key}' for platform '{platform_name}' in spec '{name}'"
                    )

    @property
    def root_name(self) -> str:
        return self.name.split("/")[0]

    def supported_on_platform(self, platform: Platform) -> bool:
        return self.platforms is None or platform.name in self.platforms

    def consumer(self, platform: Platform) -> "SpecificationConsumer":
        return SpecificationConsumer(self, platform)

    def __repr__(self) -> str:
        return f"<Specification name={self.name} version={self.version}>"


class SpecificationConsumer:
    """Read-only view of a specification resolved for a single platform."""

    def __init__(self, spec: Specification, platform: Platform):
        self.spec = spec
        self.platform = platform

    def _merged(self, attribute: str) -> List[str]:
        platform_values = self.spec.platform_attributes.get(self.platform.name, {})
        return [*self.spec.attributes[attribute], *platform_values.get(attribute, [])]

    @property
    def source_files(self) -> List[str]:
        return self._merged("source_files")

    @property
    def frameworks(self) -> List[str]:
        return self._merged("frameworks")

    @property
    def resources(self) -> List[str]:
        return self._merged("resources")

    def __eq__(self, other) -> bool:
        if not isinstance(other, SpecificationConsumer):
            return NotImplemented
        return self.spec is other.spec and self.platform.name == other.platform.name

    def __hash__(self) -> int:
        return hash((id(self.spec), self.platform.name))

    def __repr__(self) -> str:
        return f"<SpecificationConsumer spec={self.spec.name} platform={self.platform.name}>"
