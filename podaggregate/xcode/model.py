# User project model.
#
# This module defines the in-memory view of a user's Xcode project that an
# aggregate target integrates with. Only the parts needed for integration
# decisions are modelled: native targets, their product types and the stable
# identifiers they are looked up by. Reading and writing .pbxproj files is
# left to the project writer.

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional
from abc import ABC, abstractmethod

import uuid


# Type definition for Xcode object identifiers
class XcodeID(str):
    pass


def generate_id(key: str) -> XcodeID:
    return XcodeID(uuid.uuid5(uuid.NAMESPACE_X500, key).hex.upper()[:24])


# Product types used in PBXNativeTarget
class ProductType(Enum):
    APPLICATION = "com.apple.product-type.application"
    FRAMEWORK = "com.apple.product-type.framework"
    DYNAMIC_LIBRARY = "com.apple.product-type.library.dynamic"
    STATIC_LIBRARY = "com.apple.product-type.library.static"
    BUNDLE = "com.apple.product-type.bundle"
    UNIT_TEST_BUNDLE = "com.apple.product-type.bundle.unit-test"
    UI_TEST_BUNDLE = "com.apple.product-type.bundle.ui-testing"
    APP_EXTENSION = "com.apple.product-type.app-extension"
    COMMAND_LINE_TOOL = "com.apple.product-type.tool"
    WATCH_APP = "com.apple.product-type.application.watchapp"
    WATCH2_APP = "com.apple.product-type.application.watchapp2"
    WATCH_EXTENSION = "com.apple.product-type.watchkit-extension"
    WATCH2_EXTENSION = "com.apple.product-type.watchkit2-extension"
    TV_EXTENSION = "com.apple.product-type.tv-app-extension"
    MESSAGES_APPLICATION = "com.apple.product-type.application.messages"
    MESSAGES_EXTENSION = "com.apple.product-type.app-extension.messages"
    STICKER_PACK = "com.apple.product-type.app-extension.messages-sticker-pack"
    XPC_SERVICE = "com.apple.product-type.xpc-service"

    # Short tag used by integration rules, e.g. "app_extension"
    @property
    def symbol_type(self) -> str:
        return self.name.lower()

    @staticmethod
    def from_uti(uti: str) -> "ProductType":
        for product_type in ProductType:
            if product_type.value == uti:
                return product_type
        raise ValueError(f"unknown product type identifier {uti}")


# Base class for all Xcode objects
@dataclass
class XcodeObject(ABC):
    # ID will be generated in __post_init__
    id: XcodeID = field(init=False)

    def __post_init__(self) -> None:
        self.id = generate_id(self.key())

    @abstractmethod
    def key(self) -> str:
        pass


@dataclass
class PBXNativeTarget(XcodeObject):
    name: str
    productType: ProductType
    productName: Optional[str] = None
    owner: Optional[str] = None  # disambiguate same-named targets across projects
    dependencies: List[XcodeID] = field(default_factory=list)

    def key(self) -> str:
        owner_part = self.owner if self.owner else "GLOBAL"
        return f"PBXNativeTarget:{owner_part}:{self.name}"

    @property
    def symbol_type(self) -> str:
        return self.productType.symbol_type


class UserProject:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._objects: Dict[XcodeID, PBXNativeTarget] = {}

    @property
    def objects_by_uuid(self) -> Dict[XcodeID, PBXNativeTarget]:
        return self._objects

    @property
    def native_targets(self) -> List[PBXNativeTarget]:
        return list(self._objects.values())

    def add_native_target(
        self, name: str, product_type: ProductType
    ) -> PBXNativeTarget:
        target = PBXNativeTarget(
            name=name,
            productType=product_type,
            productName=name,
            owner=self.path.as_posix(),
        )
        if target.id in self._objects:
            raise ValueError(
                f"target with name='{name}' already exists in project='{self.path}'"
            )
        self._objects[target.id] = target
        return target

    # Record that host embeds (depends on) the embedded target
    def add_dependency(self, host: PBXNativeTarget, embedded: PBXNativeTarget) -> None:
        for target in (host, embedded):
            if self._objects.get(target.id) is not target:
                raise ValueError(f"target '{target.name}' is not part of project='{self.path}'")
        if embedded.id not in host.dependencies:
            host.dependencies.append(embedded.id)

    def host_targets_for_embedded_target(
        self, embedded: PBXNativeTarget
    ) -> List[PBXNativeTarget]:
        return [
            target
            for target in self.native_targets
            if target.id != embedded.id and embedded.id in target.dependencies
        ]

    def find_native_target(self, name: str) -> Optional[PBXNativeTarget]:
        for target in self.native_targets:
            if target.name == name:
                return target
        return None
