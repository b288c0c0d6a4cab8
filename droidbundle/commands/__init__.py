from .config import config
from .manifest import manifest
from .resources import resources
from .toolchain import toolchain
from .version import version
