from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import Aapt2Command, flag, option


class OutputFormat(Enum):
    PROTO = "proto"
    BINARY = "binary"


@dataclass(frozen=True)
class Aapt2Convert(Aapt2Command):
    """Convert a package between the binary and protobuf resource encodings."""

    stage = "convert"

    input_apk: str = ""
    output: Optional[str] = None
    output_format: OutputFormat = OutputFormat.PROTO
    enable_sparse_encoding: bool = False
    keep_raw_values: bool = False
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "output_format", OutputFormat(self.output_format))

    def to(self, output, output_format=None):
        if output_format is None:
            output_format = self.output_format
        return self._with(output=output, output_format=OutputFormat(output_format))

    def with_sparse_encoding(self, enabled=True):
        return self._with(enable_sparse_encoding=enabled)

    def with_raw_values(self, enabled=True):
        return self._with(keep_raw_values=enabled)

    def with_verbose(self, enabled=True):
        return self._with(verbose=enabled)

    def stage_args(self):
        args = []
        option(args, self.output, "-o")
        args.extend(["--output-format", self.output_format.value])
        flag(args, self.enable_sparse_encoding, "--enable-sparse-encoding")
        flag(args, self.keep_raw_values, "--keep-raw-values")
        flag(args, self.verbose, "-v")
        args.append(str(self.input_apk))
        return args
