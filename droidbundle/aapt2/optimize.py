from dataclasses import dataclass
from typing import Optional, Tuple

from .base import Aapt2Command, flag, option


@dataclass(frozen=True)
class Aapt2Optimize(Aapt2Command):
    """Post-link optimisations (deduplication, sparse encoding, ...)."""

    stage = "optimize"

    input_apk: str = ""
    output_apk: str = ""
    config: Optional[str] = None
    output_dir: Optional[str] = None
    target_densities: Tuple[str, ...] = ()
    enable_sparse_encoding: bool = False
    collapse_resource_names: bool = False
    shorten_resource_paths: bool = False
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "target_densities", tuple(self.target_densities))

    def split_dir(self, path):
        return self._with(output_dir=path)

    def densities(self, *densities):
        return self._with(target_densities=tuple(densities))

    def with_sparse_encoding(self, enabled=True):
        return self._with(enable_sparse_encoding=enabled)

    def with_collapsed_resource_names(self, enabled=True):
        return self._with(collapse_resource_names=enabled)

    def with_shortened_resource_paths(self, enabled=True):
        return self._with(shorten_resource_paths=enabled)

    def with_verbose(self, enabled=True):
        return self._with(verbose=enabled)

    def stage_args(self):
        args = ["-o", str(self.output_apk)]
        option(args, self.output_dir, "-d")
        option(args, self.config, "-x")
        if self.target_densities:
            args.extend(["--target-densities", ",".join(self.target_densities)])
        flag(args, self.enable_sparse_encoding, "--enable-sparse-encoding")
        flag(args, self.collapse_resource_names, "--collapse-resource-names")
        flag(args, self.shorten_resource_paths, "--shorten-resource-paths")
        flag(args, self.verbose, "-v")
        args.append(str(self.input_apk))
        return args
