import json
import os

from .cli_logger import logger

DIRECTIVE_PREFIX = "mysqlclient"
MANIFEST_FILE = "build_directives.json"


class BuildDirectives:
    """
    Collects everything a build learns about linking against the client library.

    Directives are kept in emission order so the rendered output matches the
    order in which the discovery steps produced them.
    """

    def __init__(self):
        self.entries = []

    def _emit(self, kind, value):
        self.entries.append((kind, value))
        logger.directive(f"{DIRECTIVE_PREFIX}:{kind}={value}")

    def link_search(self, path):
        self._emit("link-search", path)

    def link_lib(self, name, static=False):
        self._emit("link-lib", f"static={name}" if static else name)

    def link_arg(self, arg):
        self._emit("link-arg", arg)

    def include_dir(self, path):
        self._emit("include-dir", path)

    def cfg(self, name):
        self._emit("cfg", name)

    def check_cfg(self, name):
        self._emit("check-cfg", name)

    def rerun_if_changed(self, path):
        self._emit("rerun-if-changed", path)

    def rerun_if_env_changed(self, variable):
        self._emit("rerun-if-env-changed", variable)

    def values(self, kind):
        return [value for entry_kind, value in self.entries if entry_kind == kind]

    @property
    def active_cfg(self):
        cfgs = self.values("cfg")
        return cfgs[0] if cfgs else None

    def to_lines(self):
        return [f"{DIRECTIVE_PREFIX}:{kind}={value}" for kind, value in self.entries]

    def to_dict(self):
        return {
            "include_dirs": self.values("include-dir"),
            "library_dirs": self.values("link-search"),
            "libraries": self.values("link-lib"),
            "link_args": self.values("link-arg"),
            "cfg": self.active_cfg,
            "check_cfg": self.values("check-cfg"),
            "rerun_if_changed": self.values("rerun-if-changed"),
            "rerun_if_env_changed": self.values("rerun-if-env-changed"),
        }

    def extension_kwargs(self):
        """Keyword arguments for a ``setuptools.Extension`` linking the client."""
        libraries = [lib.split("=", 1)[-1] for lib in self.values("link-lib")]
        define_macros = []
        if self.active_cfg:
            define_macros.append((self.active_cfg.upper(), "1"))
        return {
            "include_dirs": self.values("include-dir"),
            "library_dirs": self.values("link-search"),
            "libraries": libraries,
            "extra_link_args": self.values("link-arg"),
            "define_macros": define_macros,
        }

    def write_manifest(self, out_dir):
        os.makedirs(out_dir, exist_ok=True)
        manifest_path = os.path.join(out_dir, MANIFEST_FILE)
        with open(manifest_path, "w") as f:
            json.dump(self.to_dict(), f, indent=4)
        return manifest_path
