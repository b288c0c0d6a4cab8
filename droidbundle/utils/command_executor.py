import subprocess
from ..cli_logger import logger
from ..exceptions import CommandFailed


def run_shell_command(command, env=None, input_data=None, cwd=None):
    """
    Executes a command and captures its output.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): A dictionary of environment variables.
        input_data (str, optional): Data to be passed to the command's stdin.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (stdout, stderr, return_code).

    Raises:
        OSError: The executable could not be spawned.
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            input=input_data,
            check=False,
            cwd=cwd
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        raise
    return result.stdout, result.stderr, result.returncode


def run_command(command, executor=run_shell_command, **kwargs):
    """Run ``command`` through ``executor`` and raise on a non-zero exit.

    ``executor`` is anything with the ``run_shell_command`` signature, which
    lets tests swap in a fake.
    """
    logger.command(command, cwd=kwargs.get("cwd"))
    stdout, stderr, returncode = executor(command, **kwargs)
    if returncode != 0:
        logger.error(f"{command[0]} failed (Exit Code: {returncode}):")
        if stdout:
            logger.error(f"Stdout:\n{stdout}")
        if stderr:
            logger.error(f"Stderr:\n{stderr}")
        raise CommandFailed(command, returncode, stdout, stderr)
    return stdout, stderr
