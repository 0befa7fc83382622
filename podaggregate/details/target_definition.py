from typing import Dict, Iterator, List, Optional, Union

from podaggregate.details.platform import Platform
from podaggregate.errors import ConfigurationError

DEFAULT_BUILD_CONFIGURATIONS: Dict[str, str] = {"Debug": "debug", "Release": "release"}

# How much of its parent a target definition inherits
INHERITANCE_MODES = ("complete", "none", "search_paths")


class TargetDefinition:
    def __init__(
        self,
        *,
        name: str,
        parent: Optional["TargetDefinition"] = None,
        abstract: bool = False,
        platform: Optional[Platform] = None,
        build_configurations: Optional[Dict[str, str]] = None,
        inheritance: str = "complete",
    ):
        if inheritance not in INHERITANCE_MODES:
            raise ConfigurationError(
                f"unknown inheritance mode '{inheritance}' for target definition '{name}'"
            )
        self.name = name
        self.inheritance = inheritance
        self.parent = parent
        self.abstract = abstract
        self.children: List[TargetDefinition] = []
        self.podfile: Optional["Podfile"] = None
        self._platform = platform
        self._build_configurations = build_configurations
        self._dependencies: List[str] = []
        # configuration name -> pods whitelisted for it
        self._configuration_pod_whitelist: Dict[str, List[str]] = {}
        if parent is not None:
            if parent.podfile is not None:
                parent.podfile.add_target_definition(self)
            parent.children.append(self)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def label(self) -> str:
        if self.is_root and self.name == "Pods":
            return "Pods"
        elif self.parent is None:
            return f"Pods-{self.name}"
        else:
            return f"{self.parent.label}-{self.name}"

    @property
    def platform(self) -> Optional[Platform]:
        if self._platform is None and self.parent is not None:
            return self.parent.platform
        return self._platform

    @platform.setter
    def platform(self, value: Optional[Platform]) -> None:
        self._platform = value

    # Build configuration name -> variant ("debug" or "release")
    @property
    def build_configurations(self) -> Optional[Dict[str, str]]:
        if self._build_configurations is None and self.parent is not None:
            return self.parent.build_configurations
        return self._build_configurations

    @property
    def dependencies(self) -> List[str]:
        return list(self._dependencies)

    def store_pod(
        self, name: str, configurations: Union[str, List[str], None] = None
    ) -> None:
        self._dependencies.append(name)
        if configurations is None:
            return
        if isinstance(configurations, str):
            configurations = [configurations]
        for configuration in configurations:
            self.whitelist_pod_for_configuration(name, configuration)

    # Whitelists are kept per dependency name, so subspecs of one pod may
    # disagree; the pod target reports that as an error
    def whitelist_pod_for_configuration(self, pod_name: str, configuration: str) -> None:
        pods = self._configuration_pod_whitelist.setdefault(configuration, [])
        if pod_name not in pods:
            pods.append(pod_name)

    # Pods with no whitelist entry are used in every configuration
    def pod_whitelisted_for_configuration(self, pod_name: str, configuration: str) -> bool:
        found = False
        for config_name, pods in self._configuration_pod_whitelist.items():
            if pod_name in pods:
                found = True
                if config_name == configuration:
                    return True
        return not found

    def walk(self) -> Iterator["TargetDefinition"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<TargetDefinition name={self.name} label={self.label}>"


class Podfile:
    def __init__(self, root: TargetDefinition):
        if not root.is_root:
            raise ConfigurationError(f"target definition '{root.name}' is not a root")
        self.root = root
        self.target_definitions: Dict[str, TargetDefinition] = {}
        for definition in root.walk():
            self.add_target_definition(definition)

    def add_target_definition(self, definition: TargetDefinition) -> None:
        if definition.name in self.target_definitions:
            raise ConfigurationError(
                f"target definition with name='{definition.name}' already exists in podfile"
            )
        definition.podfile = self
        self.target_definitions[definition.name] = definition

    def target_definition(self, name: str) -> TargetDefinition:
        return self.target_definitions[name]

    @property
    def concrete_target_definitions(self) -> List[TargetDefinition]:
        return [d for d in self.target_definitions.values() if not d.abstract]
