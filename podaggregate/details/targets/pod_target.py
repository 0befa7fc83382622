from typing import List, Optional

from podaggregate.details.sandbox import Sandbox
from podaggregate.details.specification import Specification
from podaggregate.details.target_definition import TargetDefinition
from podaggregate.details.targets.target import Target
from podaggregate.errors import ConfigurationError


# A single pod (root spec plus the subspecs in use) built as its own target
class PodTarget(Target):
    def __init__(
        self,
        *,
        specs: List[Specification],
        target_definitions: List[TargetDefinition],
        sandbox: Sandbox,
        scope_suffix: Optional[str] = None,
    ):
        super().__init__(sandbox=sandbox)
        if not specs:
            raise ConfigurationError("a pod target requires at least one specification")
        root_names = {spec.root_name for spec in specs}
        if len(root_names) != 1:
            raise ConfigurationError(
                f"pod target specifications must share one root, found {', '.join(sorted(root_names))}"
            )
        self.specs = list(specs)
        self.target_definitions = list(target_definitions)
        self.scope_suffix = scope_suffix

    @property
    def pod_name(self) -> str:
        return self.specs[0].root_name

    @property
    def label(self) -> str:
        if self.scope_suffix:
            return f"{self.pod_name}-{self.scope_suffix}"
        return self.pod_name

    def uses_swift(self) -> bool:
        for spec in self.specs:
            sources = list(spec.attributes["source_files"])
            for attrs in spec.platform_attributes.values():
                sources.extend(attrs.get("source_files", []))
            if any(source.endswith(".swift") for source in sources):
                return True
        return False

    # The dependencies of the definition that resolve to this pod
    def target_definition_dependencies(self, target_definition: TargetDefinition) -> List[str]:
        return [
            dependency
            for dependency in target_definition.dependencies
            if dependency.split("/")[0] == self.pod_name
        ]

    def include_in_build_config(
        self, target_definition: TargetDefinition, configuration_name: str
    ) -> bool:
        whitelists = {
            target_definition.pod_whitelisted_for_configuration(dependency, configuration_name)
            for dependency in self.target_definition_dependencies(target_definition)
        }
        if not whitelists:
            return True
        if len(whitelists) == 1:
            return whitelists.pop()
        raise ConfigurationError(
            f"The subspecs of `{self.pod_name}` are linked to different build "
            f"configurations for the `{target_definition}` target, which is not supported."
        )
