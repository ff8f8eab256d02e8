from ..errors import MalformedToolOutput
from .command_executor import tool_output

MYSQL_CONFIG = "mysql_config"


def mysql_config_variable(var_name):
    """Returns what ``mysql_config <var_name>`` prints, if the command succeeded."""
    return tool_output(MYSQL_CONFIG, var_name)


def parse_libs(output):
    """
    Splits the ``mysql_config --libs`` output into linker directives.

    Returns a list of (kind, value) tuples in output order, where kind is
    ``link-lib``, ``link-search`` or ``link-arg``. Any other token means the
    tool's output format changed and raises MalformedToolOutput.
    """
    parsed = []
    for part in output.split():
        if part.startswith("-l"):
            parsed.append(("link-lib", part[2:]))
        elif part.startswith("-L"):
            parsed.append(("link-search", part[2:]))
        elif part.startswith("-R"):
            parsed.append(("link-arg", f"-Wl,-R{part[2:]}"))
        else:
            raise MalformedToolOutput(MYSQL_CONFIG, output)
    return parsed
