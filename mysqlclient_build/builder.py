from .bindings import configure_version
from .cli_logger import logger
from .directives import BuildDirectives
from .discovery import DiscoveryChain, default_probes
from .environment import EnvOverrides
from .generator import generate_bindings

# Version configured when the client library is built alongside the bindings.
BUNDLED_VERSION = "9.3.0"


def resolve_build(settings, target, environ=None, probes=None):
    """
    Runs one full resolution for a build.

    Finds the client library, resolves its version and puts bindings into
    ``settings["out_dir"]``. Returns the collected BuildDirectives; every
    failure raises a BuildError subclass.
    """
    directives = BuildDirectives()
    env = EnvOverrides(target.env_suffix, environ)
    logger.info(f"Resolving libmysqlclient for {target.triple} ({target.pointer_width}-bit {target.arch})")

    if target.is_windows:
        directives.link_lib("advapi32")

    if settings["bundled"]:
        logger.info(f"Using bundled client library {BUNDLED_VERSION}")
        configure_version(
            BUNDLED_VERSION, target, directives,
            settings["bindings_dir"], settings["out_dir"], generate=settings["generate"],
        )
        return directives

    for variable in env.watched_variables():
        directives.rerun_if_env_changed(variable)

    if settings["generate"]:
        generate_bindings(settings, env, target, directives)

    if probes is None:
        probes = default_probes(env, target)
    result = DiscoveryChain(probes).run()
    result.apply(directives)

    configure_version(
        result.version, target, directives,
        settings["bindings_dir"], settings["out_dir"], generate=settings["generate"],
    )
    return directives
