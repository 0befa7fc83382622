import logging
import os

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set

from podaggregate.details.platform import Platform
from podaggregate.details.sandbox import Sandbox
from podaggregate.details.specification import Specification, SpecificationConsumer
from podaggregate.details.target_definition import (
    DEFAULT_BUILD_CONFIGURATIONS,
    Podfile,
    TargetDefinition,
)
from podaggregate.details.targets.pod_target import PodTarget
from podaggregate.details.targets.target import Target
from podaggregate.errors import ConfigurationError, IntegrationError, PathError
from podaggregate.xcode.model import PBXNativeTarget, UserProject, XcodeID

logger = logging.getLogger(__name__)

# Product types whose frameworks must be embedded in a host target.
# NOTE: messages_extension only applies when embedded in an app, not when the
# host is a messages application.
EMBED_FRAMEWORKS_IN_HOST_TARGET_TYPES = frozenset(
    {"app_extension", "framework", "messages_extension", "watch_extension"}
)


@dataclass(frozen=True)
class ProductTypeCheck:
    """Distinct product type tags found among a set of user targets."""

    tags: FrozenSet[str]

    @property
    def ok(self) -> bool:
        return len(self.tags) == 1

    @property
    def tag(self) -> str:
        if not self.ok:
            raise ValueError(f"expected a single product type, found {len(self.tags)}")
        return next(iter(self.tags))


def check_single_product_type(user_targets: Iterable[PBXNativeTarget]) -> ProductTypeCheck:
    return ProductTypeCheck(frozenset(target.symbol_type for target in user_targets))


class AggregateTarget(Target):
    """
    Target used to cluster the pod targets of a single target definition.

    The user's native targets depend on the product of this target, so it
    decides which pods are linked for each build configuration, whether the
    product has to be embedded through a host target, and where the support
    files referenced from the user's build settings live.
    """

    def __init__(self, target_definition: TargetDefinition, sandbox: Sandbox):
        if target_definition.abstract:
            raise ConfigurationError(
                f"Can't initialize an AggregateTarget with the abstract target definition '{target_definition.label}'"
            )
        super().__init__(sandbox=sandbox)
        self._target_definition = target_definition
        self.pod_targets: List[PodTarget] = []
        # Aggregates whose pods must be importable but are not linked
        self.search_paths_aggregate_targets: List[AggregateTarget] = []
        self._xcconfigs: Dict[str, Any] = {}
        # Product types of the host targets this target is embedded in
        self.host_target_types: Set[str] = set()
        # Bound by the analyzer once the user project is known
        self.user_project: Optional[UserProject] = None
        self.user_target_uuids: List[XcodeID] = []
        self._client_root: Optional[Path] = None
        self._platform: Optional[Platform] = None
        self._platform_loaded = False

    # Base of every relative path handed to the user project, the directory
    # of the user project when integrating, else the installation root
    @property
    def client_root(self) -> Optional[Path]:
        return self._client_root

    @client_root.setter
    def client_root(self, value: Optional[Path]) -> None:
        self._client_root = None if value is None else Path(value)

    @property
    def target_definition(self) -> TargetDefinition:
        return self._target_definition

    # Map from configuration name to the build settings file generated for
    # it, consulted by the user project integrator to detect overrides
    @property
    def xcconfigs(self) -> Dict[str, Any]:
        return self._xcconfigs

    def add_host_target_product_type(self, product_type: str) -> None:
        self.host_target_types.add(product_type)

    def requires_host_target(self) -> bool:
        # Without a user project nothing is known about how this target is
        # integrated, so it can't be known to be an extension either
        if self.user_project is None:
            logger.debug("%s has no user project, no host target required", self.label)
            return False
        check = check_single_product_type(self.user_targets())
        if not check.ok:
            raise ConfigurationError(
                f"Expected single kind of user_target for {self.label}. "
                f"Found {', '.join(sorted(check.tags))}."
            )
        return (
            check.tag in EMBED_FRAMEWORKS_IN_HOST_TARGET_TYPES
            and "messages_application" not in self.host_target_types
        )

    @property
    def label(self) -> str:
        return str(self.target_definition.label)

    @property
    def platform(self) -> Optional[Platform]:
        if not self._platform_loaded:
            self._platform = self.target_definition.platform
            self._platform_loaded = True
        return self._platform

    @property
    def podfile(self) -> Optional[Podfile]:
        return self.target_definition.podfile

    @property
    def user_project_path(self) -> Optional[Path]:
        if self.user_project is None:
            return None
        return self.user_project.path

    # The instances are looked up on every call, only their uuids are stored
    def user_targets(self) -> List[PBXNativeTarget]:
        if self.user_project is None:
            return []
        targets = []
        for uuid in self.user_target_uuids:
            native_target = self.user_project.objects_by_uuid.get(uuid)
            if native_target is None:
                raise IntegrationError(
                    f"[Bug] Unable to find the target with the `{uuid}` UUID "
                    f"for the `{self.label}` integration library"
                )
            targets.append(native_target)
        return targets

    @property
    def user_build_configurations(self) -> Dict[str, str]:
        configurations = self.target_definition.build_configurations
        if not configurations:
            return dict(DEFAULT_BUILD_CONFIGURATIONS)
        return dict(configurations)

    def pod_targets_for_build_configuration(self, build_configuration: str) -> List[PodTarget]:
        return [
            pod_target
            for pod_target in self.pod_targets
            if pod_target.include_in_build_config(self.target_definition, build_configuration)
        ]

    def specs(self) -> List[Specification]:
        return [spec for pod_target in self.pod_targets for spec in pod_target.specs]

    def specs_by_build_configuration(self) -> Dict[str, List[Specification]]:
        return {
            build_configuration: [
                spec
                for pod_target in self.pod_targets_for_build_configuration(build_configuration)
                for spec in pod_target.specs
            ]
            for build_configuration in self.user_build_configurations
        }

    def spec_consumers(self) -> List[SpecificationConsumer]:
        platform = self.platform
        if platform is None:
            raise ConfigurationError(f"{self.label} has no platform to resolve specifications for")
        return [spec.consumer(platform) for spec in self.specs()]

    def uses_swift(self) -> bool:
        return any(pod_target.uses_swift() for pod_target in self.pod_targets)

    # Support files

    # The acknowledgements generators add the extension for their file type
    @property
    def acknowledgements_basepath(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}-acknowledgements")

    @property
    def copy_resources_script_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}-resources.sh")

    @property
    def embed_frameworks_script_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}-frameworks.sh")

    @property
    def relative_pods_root(self) -> str:
        return f"${{SRCROOT}}/{self._relative_to_srcroot(self.sandbox.root)}"

    def xcconfig_relative_path(self, config_name: str) -> str:
        return self._relative_to_srcroot(self.xcconfig_path(config_name))

    @property
    def copy_resources_script_relative_path(self) -> str:
        return f"${{SRCROOT}}/{self._relative_to_srcroot(self.copy_resources_script_path)}"

    @property
    def embed_frameworks_script_relative_path(self) -> str:
        return f"${{SRCROOT}}/{self._relative_to_srcroot(self.embed_frameworks_script_path)}"

    def _relative_to_srcroot(self, path: Path) -> str:
        if self.client_root is None:
            raise PathError(
                f"client root of {self.label} is not set, can't compute path relative to it for {path}"
            )
        return Path(os.path.relpath(path, self.client_root)).as_posix()
