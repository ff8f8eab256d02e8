import subprocess
from ..cli_logger import logger

def run_shell_command(command, env=None, input_data=None, cwd=None):
    """
    Executes a command and captures its output.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): A dictionary of environment variables.
        input_data (str, optional): Data to be passed to the command's stdin.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (stdout, stderr, return_code). A command that cannot be
        started reports return code -1.
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
        return result.stdout, result.stderr, result.returncode

    except FileNotFoundError as e:
        logger.debug(f"Command not found: {e.filename}")
        return "", str(e), -1
    except UnicodeDecodeError as e:
        logger.warning(f"Output of {command[0]} is not valid text: {e}")
        return "", str(e), -1
    except OSError as e:
        logger.error(f"Could not run {command[0]}: {e}")
        return "", str(e), -1


def run_tool(command, args):
    """Runs ``command`` with ``args`` and returns (return_code, stdout)."""
    stdout, _, returncode = run_shell_command([command, *args])
    return returncode, stdout


def tool_output(command, *args):
    """Returns the trimmed stdout of a successful run, or None."""
    returncode, stdout = run_tool(command, list(args))
    if returncode != 0:
        return None
    return stdout.strip()
