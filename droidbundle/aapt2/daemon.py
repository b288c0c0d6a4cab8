import contextlib
import queue
import subprocess
import threading
from collections import namedtuple
from dataclasses import dataclass
from typing import Optional

from ..cli_logger import logger
from ..exceptions import CommandFailed, DaemonSessionError
from .base import Aapt2Command, option

READY = "Ready"
DONE = "Done"
ERROR = "Error"

# What one invocation printed: stdout text and stderr diagnostic lines.
DaemonResponse = namedtuple("DaemonResponse", ["stdout", "diagnostics"])


@dataclass(frozen=True)
class Aapt2Daemon(Aapt2Command):
    """Start aapt2 in daemon mode.

    Each line written to the daemon's stdin is one argument; an empty line
    ends the invocation.
    """

    stage = "daemon"

    trace_folder: Optional[str] = None

    def stage_args(self):
        args = []
        option(args, self.trace_folder, "--trace-folder")
        return args


class DaemonSession:
    """Exclusive handle on one running ``aapt2 daemon`` process.

    Use it as a context manager so the process is shut down on every exit
    path. Only one invocation may be in flight at a time: argument lines of
    two invocations must never interleave.

    The tool prints ``Ready`` on stdout once started. Diagnostics for each
    invocation arrive on stderr and end with ``Done``; an ``Error`` line
    before that marks the invocation as failed. Whatever the command prints
    on stdout (``dump`` output, for instance) is drained by a reader thread
    for the life of the session and handed back with the diagnostics.
    """

    def __init__(self, command_line, popen=subprocess.Popen, wait_ready=True, close_timeout=10,
                 settle_timeout=0.05):
        self.command_line = list(command_line)
        self.close_timeout = close_timeout
        # How long stdout may stay quiet after ``Done`` before the response is complete.
        self.settle_timeout = settle_timeout
        self.invocations = 0
        self._lock = threading.Lock()
        self._closed = False
        self._stdout_lines = queue.Queue()
        logger.command(self.command_line)
        self._process = popen(
            self.command_line,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            bufsize=1,
        )
        if wait_ready:
            try:
                self._wait_ready()
            except DaemonSessionError:
                self.close()
                raise
        self._stdout_reader = threading.Thread(
            target=self._pump_stdout, name="aapt2-daemon-stdout", daemon=True
        )
        self._stdout_reader.start()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.close()

    @property
    def closed(self):
        return self._closed

    def _wait_ready(self):
        while True:
            line = self._process.stdout.readline()
            if not line:
                raise DaemonSessionError("aapt2 daemon exited before it was ready")
            if line.strip() == READY:
                return

    def _pump_stdout(self):
        for line in iter(self._process.stdout.readline, ""):
            self._stdout_lines.put(line)

    def _collect_stdout(self):
        lines = []
        while True:
            try:
                lines.append(self._stdout_lines.get(timeout=self.settle_timeout))
            except queue.Empty:
                return "".join(lines)

    def send_invocation(self, args):
        """Write one invocation: every argument on its own line, then a blank line.

        An empty ``args`` still dispatches an (empty) invocation.
        """
        if self._closed:
            raise DaemonSessionError("aapt2 daemon session is closed")
        lines = []
        for arg in args:
            arg = str(arg)
            if "\n" in arg or "\r" in arg:
                raise ValueError(f"Daemon arguments cannot contain line breaks: {arg!r}")
            if not arg:
                raise ValueError("Daemon arguments cannot be empty; a blank line ends the invocation")
            lines.append(arg + "\n")
        lines.append("\n")
        try:
            self._process.stdin.write("".join(lines))
            self._process.stdin.flush()
        except (BrokenPipeError, ValueError) as e:
            raise DaemonSessionError(f"aapt2 daemon is not accepting input: {e}") from e
        self.invocations += 1

    def read_response(self):
        """Collect stderr diagnostics up to ``Done``; return ``(lines, failed)``."""
        lines = []
        failed = False
        while True:
            line = self._process.stderr.readline()
            if not line:
                raise DaemonSessionError("aapt2 daemon exited in the middle of an invocation")
            line = line.rstrip("\r\n")
            if line == DONE:
                return lines, failed
            if line == ERROR:
                failed = True
                continue
            lines.append(line)

    def invoke(self, args):
        """Run one aapt2 command through the daemon and return a :class:`DaemonResponse`.

        An empty ``args`` only writes the terminating blank line. aapt2 skips
        an empty command without printing ``Done``, so no response is read
        and an empty :class:`DaemonResponse` is returned.
        """
        if not self._lock.acquire(blocking=False):
            raise DaemonSessionError("aapt2 daemon session is already running an invocation")
        try:
            args = [str(a) for a in args]
            logger.command(["daemon>"] + args)
            self.send_invocation(args)
            if not args:
                return DaemonResponse("", [])
            diagnostics, failed = self.read_response()
            stdout = self._collect_stdout()
        finally:
            self._lock.release()
        if failed:
            raise CommandFailed(args, 1, stdout=stdout, stderr="\n".join(diagnostics))
        return DaemonResponse(stdout, diagnostics)

    def run(self, command):
        """Run an :class:`Aapt2Command` through the daemon and return its stdout.

        Mirrors :meth:`Aapt2Runner.run`, so units can use either executor.
        """
        response = self.invoke(command.args())
        if response.diagnostics:
            logger.output("\n".join(response.diagnostics))
        return response.stdout

    def close(self):
        if self._closed:
            return
        self._closed = True
        process = self._process
        with contextlib.suppress(OSError):
            process.stdin.close()
        try:
            process.wait(timeout=self.close_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("aapt2 daemon did not exit after its input was closed, terminating it.")
            process.terminate()
            try:
                process.wait(timeout=self.close_timeout)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
