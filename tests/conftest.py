from pathlib import Path

import pytest

from podaggregate.details.platform import Platform
from podaggregate.details.sandbox import Sandbox
from podaggregate.details.specification import Specification
from podaggregate.details.target_definition import Podfile, TargetDefinition
from podaggregate.details.targets.aggregate_target import AggregateTarget
from podaggregate.details.targets.pod_target import PodTarget
from podaggregate.xcode.model import UserProject


@pytest.fixture
def ios():
    return Platform("ios", "9.0")


@pytest.fixture
def sandbox():
    return Sandbox(Path("/Project/Pods"))


@pytest.fixture
def podfile(ios):
    root = TargetDefinition(name="Pods", abstract=True, platform=ios)
    TargetDefinition(name="App", parent=root)
    return Podfile(root)


@pytest.fixture
def app_definition(podfile):
    return podfile.target_definition("App")


@pytest.fixture
def aggregate(app_definition, sandbox):
    target = AggregateTarget(app_definition, sandbox)
    target.client_root = Path("/Project")
    return target


@pytest.fixture
def make_pod_target(sandbox):
    def make(name, definitions, source_files=("Classes/*.m",), subspecs=()):
        specs = [Specification(name=name, source_files=source_files)]
        specs.extend(Specification(name=f"{name}/{sub}") for sub in subspecs)
        return PodTarget(specs=specs, target_definitions=definitions, sandbox=sandbox)

    return make


@pytest.fixture
def user_project():
    return UserProject(Path("/Project/App.xcodeproj"))


def bind_user_targets(aggregate, project, *product_types):
    """Add one native target per product type and bind them to the aggregate."""
    uuids = []
    for index, product_type in enumerate(product_types):
        native = project.add_native_target(f"Target{index}", product_type)
        uuids.append(native.id)
    aggregate.user_project = project
    aggregate.user_target_uuids = uuids
    return uuids


@pytest.fixture
def bind():
    return bind_user_targets
