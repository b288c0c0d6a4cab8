from dataclasses import dataclass, replace
from typing import ClassVar, List


@dataclass(frozen=True)
class Aapt2Command:
    """One invocation of aapt2, described but not executed.

    Instances are immutable; option methods return a modified copy, so a
    half-configured command can be shared and specialised freely.
    """

    stage: ClassVar[str] = ""

    def args(self) -> List[str]:
        """Arguments after the aapt2 executable, starting with the stage name."""
        return [self.stage] + self.stage_args()

    def stage_args(self) -> List[str]:
        raise NotImplementedError

    def _with(self, **changes):
        return replace(self, **changes)


def flag(args, enabled, name):
    if enabled:
        args.append(name)


def option(args, value, name):
    if value is not None:
        args.extend([name, str(value)])


def repeated(args, values, name):
    for value in values:
        args.extend([name, str(value)])
