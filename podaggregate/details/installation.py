import logging

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from podaggregate.config import Config
from podaggregate.details.sandbox import Sandbox
from podaggregate.details.target_definition import Podfile, TargetDefinition
from podaggregate.details.targets.aggregate_target import AggregateTarget
from podaggregate.details.targets.pod_target import PodTarget
from podaggregate.errors import IntegrationError
from podaggregate.xcode.model import PBXNativeTarget, UserProject

logger = logging.getLogger(__name__)

# Target definition name -> (user project, names of the native targets it integrates)
UserTargetBinding = Tuple[UserProject, List[str]]


def _find_user_target(
    project: UserProject, name: str, target: AggregateTarget
) -> PBXNativeTarget:
    native_target = project.find_native_target(name)
    if native_target is None:
        raise IntegrationError(
            f"Unable to find a target named `{name}` in project `{project.path.name}` "
            f"for the `{target.label}` integration library"
        )
    return native_target


def _client_root(config: Config, target: AggregateTarget) -> Path:
    if config.client_root is not None:
        return config.client_root
    if target.user_project_path is not None:
        return target.user_project_path.parent
    return config.installation_root


def _search_paths_parent(
    definition: TargetDefinition, aggregates: Dict[str, AggregateTarget]
) -> Optional[AggregateTarget]:
    parent = definition.parent
    while parent is not None:
        if parent.name in aggregates:
            return aggregates[parent.name]
        parent = parent.parent
    return None


# Registers the product types of the hosts of every embedded aggregate, an
# embedded aggregate without any host known to the podfile can't be integrated
def analyze_host_targets(aggregate_targets: List[AggregateTarget]) -> None:
    definitions_by_uuid = {
        uuid: target.target_definition
        for target in aggregate_targets
        for uuid in target.user_target_uuids
    }
    user_projects: List[UserProject] = []
    for target in aggregate_targets:
        if target.user_project is not None and not any(
            target.user_project is project for project in user_projects
        ):
            user_projects.append(target.user_project)

    missing_hosts = []
    for target in aggregate_targets:
        if not target.requires_host_target():
            continue
        host_uuids = []
        for project in user_projects:
            for user_target in target.user_targets():
                host_targets = project.host_targets_for_embedded_target(user_target)
                for host_target in host_targets:
                    target.add_host_target_product_type(host_target.symbol_type)
                host_uuids.extend(host_target.id for host_target in host_targets)
        logger.debug(
            "%s is embedded in hosts of type %s",
            target.label,
            ", ".join(sorted(target.host_target_types)) or "(none)",
        )
        # Registering a messages application host may lift the requirement
        has_known_host = any(uuid in definitions_by_uuid for uuid in host_uuids)
        if not has_known_host and target.requires_host_target():
            missing_hosts.append(target)

    if missing_hosts:
        labels = ", ".join(f"`{target.label}`" for target in missing_hosts)
        raise IntegrationError(
            f"Unable to find host target(s) for {labels}. "
            "Please add the host targets for the embedded targets to the Podfile."
        )


def plan_aggregate_targets(
    podfile: Podfile,
    sandbox: Sandbox,
    pod_targets: List[PodTarget],
    config: Config,
    user_targets: Optional[Dict[str, UserTargetBinding]] = None,
) -> List[AggregateTarget]:
    user_targets = user_targets or {}
    aggregates: Dict[str, AggregateTarget] = {}
    for definition in podfile.concrete_target_definitions:
        target = AggregateTarget(definition, sandbox)
        target.pod_targets = [
            pod_target
            for pod_target in pod_targets
            if any(d is definition for d in pod_target.target_definitions)
        ]
        binding = user_targets.get(definition.name) if config.integrate_targets else None
        if binding is not None:
            project, target_names = binding
            target.user_project = project
            target.user_target_uuids = [
                _find_user_target(project, name, target).id for name in target_names
            ]
        target.client_root = _client_root(config, target)
        aggregates[definition.name] = target
        logger.debug(
            "planned %s with %d pod target(s), client root %s",
            target.label,
            len(target.pod_targets),
            target.client_root,
        )

    for target in aggregates.values():
        if target.target_definition.inheritance != "search_paths":
            continue
        parent = _search_paths_parent(target.target_definition, aggregates)
        if parent is not None:
            target.search_paths_aggregate_targets.append(parent)

    analyze_host_targets(list(aggregates.values()))
    return list(aggregates.values())
