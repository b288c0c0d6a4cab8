from .command_executor import run_shell_command, run_command
from .file_manager import write_text_file
