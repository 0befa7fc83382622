from pathlib import Path
from typing import Optional, Union

from podaggregate.details.sandbox import Sandbox

PathLike = Union[str, Path]


class Config:
    def __init__(
        self,
        installation_root: PathLike,
        sandbox_root: Optional[PathLike] = None,
        client_root: Optional[PathLike] = None,
        integrate_targets: bool = True,
        **kwargs
    ):
        self.installation_root = Path(installation_root)
        if sandbox_root is None:
            sandbox_root = self.installation_root.joinpath("Pods")
        self.sandbox_root = Path(sandbox_root)
        self.client_root = None if client_root is None else Path(client_root)
        self.integrate_targets = integrate_targets
        self.__dict__.update(kwargs)

    def sandbox(self) -> Sandbox:
        return Sandbox(self.sandbox_root)
