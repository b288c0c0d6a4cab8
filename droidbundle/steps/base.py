from collections import namedtuple

from ..cli_logger import logger
from ..exceptions import IncompatibleUnits, shape_name

# Required input of a unit that depends on nothing.
NoDeps = type(None)

GeneratedManifest = namedtuple("GeneratedManifest", ["path"])
# ``manifest`` is passed through from an upstream GenAndroidManifest, if any.
CompiledResources = namedtuple("CompiledResources", ["files", "manifest"], defaults=(None,))
ResourcePackage = namedtuple("ResourcePackage", ["path"])
NativeLibrary = namedtuple("NativeLibrary", ["path", "target"])
SharedLibraries = namedtuple("SharedLibraries", ["path", "needed"])


class ExecutionUnit:
    """A single step of the build.

    ``requires`` is the type of the value an upstream unit must hand to
    :meth:`run` (``NoDeps`` when there is no upstream, or a tuple of
    accepted types), ``produces`` the type of what :meth:`run` returns. Running a unit again overwrites its
    previous output instead of adding to it.
    """

    requires = NoDeps
    produces = NoDeps

    def run(self, deps=None):
        raise NotImplementedError

    def describe(self):
        return type(self).__name__

    def then(self, downstream):
        return Pipeline([self, downstream])


def check_compatible(upstream, downstream):
    if not issubclass(upstream.produces, downstream.requires):
        logger.error(
            f"Error: cannot run {downstream.describe()} after {upstream.describe()}: "
            f"{shape_name(upstream.produces)} is not {shape_name(downstream.requires)}"
        )
        raise IncompatibleUnits(upstream, downstream)


class Pipeline(ExecutionUnit):
    """Units run in the order they were composed, each fed the previous output.

    Shapes are checked when the pipeline is built, so a miswired build
    fails before anything has run.
    """

    def __init__(self, units):
        flat = []
        for unit in units:
            if isinstance(unit, Pipeline):
                flat.extend(unit.units)
            else:
                flat.append(unit)
        if not flat:
            raise ValueError("A pipeline needs at least one unit")
        for upstream, downstream in zip(flat, flat[1:]):
            check_compatible(upstream, downstream)
        self.units = tuple(flat)

    @property
    def requires(self):
        return self.units[0].requires

    @property
    def produces(self):
        return self.units[-1].produces

    def describe(self):
        return " -> ".join(unit.describe() for unit in self.units)

    def run(self, deps=None):
        if not isinstance(deps, self.requires):
            raise TypeError(
                f"{self.units[0].describe()} requires {shape_name(self.requires)}, got {type(deps).__name__}"
            )
        result = deps
        for index, unit in enumerate(self.units, start=1):
            logger.info(f"[{index}/{len(self.units)}] {unit.describe()}")
            result = unit.run(result)
        return result
