import subprocess

from ..cli_logger import logger
from ..utils.command_executor import run_command, run_shell_command
from .daemon import Aapt2Daemon, DaemonSession


class Aapt2Runner:
    """Executes :class:`Aapt2Command` values against one aapt2 binary.

    ``executor`` follows the ``run_shell_command`` signature and returns
    ``(stdout, stderr, returncode)``; tests pass a fake one.
    """

    def __init__(self, aapt2_path, executor=run_shell_command, popen=subprocess.Popen):
        self.aapt2_path = aapt2_path
        self.executor = executor
        self.popen = popen

    def command_line(self, command):
        return [self.aapt2_path] + command.args()

    def run(self, command, cwd=None):
        """Run ``command`` to completion; raises ``CommandFailed`` on a non-zero exit."""
        stdout, stderr = run_command(self.command_line(command), executor=self.executor, cwd=cwd)
        if stderr:
            logger.output(stderr)
        return stdout

    def open_daemon(self, trace_dir=None):
        """Start a daemon session; use the result as a context manager."""
        return DaemonSession(self.command_line(Aapt2Daemon(trace_folder=trace_dir)), popen=self.popen)
