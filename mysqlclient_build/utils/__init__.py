from .command_executor import run_shell_command, run_tool, tool_output
from .mysql_config import mysql_config_variable, parse_libs
from .pkg_config import probe_library
from .vcpkg import find_package
