from dataclasses import dataclass
from typing import Optional, Tuple

from .base import Aapt2Command, flag, option


@dataclass(frozen=True)
class Aapt2Compile(Aapt2Command):
    """Compile raw resources into ``.flat`` intermediates.

    Each input file is compiled on its own, so an incremental build only
    recompiles what changed and re-links.
    """

    stage = "compile"

    inputs: Tuple[str, ...] = ()
    output: str = ""
    res_dir: Optional[str] = None
    zip_file: Optional[str] = None
    output_text_symbols: Optional[str] = None
    pseudo_localize: bool = False
    no_crunch: bool = False
    legacy: bool = False
    visibility: Optional[str] = None
    trace_folder: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(str(i) for i in self.inputs))

    def dir(self, res_dir):
        """Compile a whole ``res/`` directory into a zip of intermediates."""
        return self._with(res_dir=res_dir)

    def zip(self, zip_file):
        return self._with(zip_file=zip_file)

    def text_symbols(self, path):
        return self._with(output_text_symbols=path)

    def with_pseudo_localize(self, enabled=True):
        return self._with(pseudo_localize=enabled)

    def with_no_crunch(self, enabled=True):
        return self._with(no_crunch=enabled)

    def with_legacy(self, enabled=True):
        return self._with(legacy=enabled)

    def with_visibility(self, level):
        if level not in ("public", "private", "default"):
            raise ValueError(f"Invalid resource visibility: {level}")
        return self._with(visibility=level)

    def with_trace_folder(self, path):
        return self._with(trace_folder=path)

    def with_verbose(self, enabled=True):
        return self._with(verbose=enabled)

    def stage_args(self):
        args = []
        option(args, self.res_dir, "--dir")
        option(args, self.zip_file, "--zip")
        option(args, self.output_text_symbols, "--output-text-symbols")
        flag(args, self.pseudo_localize, "--pseudo-localize")
        flag(args, self.no_crunch, "--no-crunch")
        flag(args, self.legacy, "--legacy")
        option(args, self.visibility, "--visibility")
        option(args, self.trace_folder, "--trace-folder")
        flag(args, self.verbose, "-v")
        args.extend(["-o", str(self.output)])
        args.extend(self.inputs)
        return args
