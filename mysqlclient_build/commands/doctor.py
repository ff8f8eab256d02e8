import click
import shutil
from ..cli_logger import logger
from ..environment import EnvOverrides
from ..target import TargetPlatform
from ..utils import vcpkg

@click.command()
def doctor():
    """Report which ways of finding libmysqlclient are available here."""
    target = TargetPlatform.detect()
    env = EnvOverrides(target.env_suffix)
    logger.info(f"Target: {target.triple} ({target.pointer_width}-bit {target.arch}, {target.os_tag})")
    logger.info(f"Per-target variables use the suffix _{target.env_suffix}")

    available = 0
    for tool in ("pkg-config", "mysql_config"):
        if shutil.which(tool):
            logger.success(f"{tool} found at {shutil.which(tool)}")
            available += 1
        else:
            logger.warning(f"{tool} not found on PATH")

    if target.is_windows:
        root = vcpkg.find_vcpkg_root()
        if root:
            logger.success(f"vcpkg root: {root}")
            available += 1
        else:
            logger.warning("vcpkg not found")

    if env.lib_dir:
        logger.success(f"MYSQLCLIENT_LIB_DIR: {env.lib_dir}")
        available += 1
    if env.version:
        logger.info(f"MYSQLCLIENT_VERSION: {env.version}")
    elif env.lib_dir or target.is_windows:
        logger.warning("MYSQLCLIENT_VERSION is not set; vcpkg and MYSQLCLIENT_LIB_DIR need it.")

    if available:
        logger.success("Environment check completed successfully.")
    else:
        logger.error("No way of finding libmysqlclient is available.")
