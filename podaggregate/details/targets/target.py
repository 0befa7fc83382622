from pathlib import Path
from typing import Optional

from podaggregate.details.sandbox import Sandbox
from podaggregate.xcode.utils import c99ext_identifier


# Common behaviour of the targets generated into the sandbox project, the
# support files of a target all live in its own directory of the sandbox
class Target:
    def __init__(self, *, sandbox: Sandbox):
        self.sandbox = sandbox
        # Set by the installer when a dependent user target is a framework
        # or embeds frameworks (e.g. swift pods)
        self.host_requires_frameworks = False

    @property
    def label(self) -> str:
        raise RuntimeError(
            f"Target class {self.__class__.__name__} requires implementation of label"
        )

    @property
    def name(self) -> str:
        return self.label

    @property
    def product_module_name(self) -> str:
        return c99ext_identifier(self.label)

    @property
    def framework_name(self) -> str:
        return f"{self.product_module_name}.framework"

    @property
    def static_library_name(self) -> str:
        return f"lib{self.label}.a"

    def requires_frameworks(self) -> bool:
        return self.host_requires_frameworks

    @property
    def product_name(self) -> str:
        if self.requires_frameworks():
            return self.framework_name
        return self.static_library_name

    @property
    def product_type(self) -> str:
        return "framework" if self.requires_frameworks() else "static_library"

    # Support files

    @property
    def support_files_dir(self) -> Path:
        return self.sandbox.target_support_files_dir(self.name)

    def xcconfig_path(self, variant: Optional[str] = None) -> Path:
        if variant:
            variant = variant.replace("/", "-").lower()
            return self.support_files_dir.joinpath(f"{self.label}.{variant}.xcconfig")
        return self.support_files_dir.joinpath(f"{self.label}.xcconfig")

    @property
    def umbrella_header_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}-umbrella.h")

    @property
    def module_map_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}.modulemap")

    @property
    def prefix_header_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}-prefix.pch")

    @property
    def bridge_support_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}.bridgesupport")

    @property
    def info_plist_path(self) -> Path:
        return self.support_files_dir.joinpath("Info.plist")

    @property
    def dummy_source_path(self) -> Path:
        return self.support_files_dir.joinpath(f"{self.label}-dummy.m")

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name}>"
