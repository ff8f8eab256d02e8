import os

ENV_PREFIX = "MYSQLCLIENT_"

# Every override that can be set generically and per target.
OVERRIDE_VARIABLES = [
    "VERSION",
    "INCLUDE_DIR",
    "LIB",
    "LIB_DIR",
    "LIBNAME",
    "STATIC",
]

DEFAULT_LIBNAME = "mysqlclient"


class EnvOverrides:
    """
    Read access to the MYSQLCLIENT_* build variables.

    A variable suffixed with the target (``MYSQLCLIENT_LIB_DIR_LINUX_X86_64``)
    always wins over its generic counterpart (``MYSQLCLIENT_LIB_DIR``).
    """

    def __init__(self, target_suffix, environ=None):
        self.target_suffix = target_suffix
        self.environ = os.environ if environ is None else environ

    def variable_names(self, name):
        generic = f"{ENV_PREFIX}{name}"
        return [f"{generic}_{self.target_suffix}", generic]

    def get(self, name):
        for variable in self.variable_names(name):
            value = self.environ.get(variable)
            if value is not None:
                return value
        return None

    def is_set(self, name):
        return self.get(name) is not None

    @property
    def version(self):
        return self.get("VERSION")

    @property
    def include_dir(self):
        return self.get("INCLUDE_DIR")

    @property
    def lib_dir(self):
        return self.get("LIB_DIR")

    @property
    def libname(self):
        return self.get("LIBNAME") or DEFAULT_LIBNAME

    @property
    def static(self):
        return self.is_set("STATIC")

    def watched_variables(self):
        """All variables whose change must force a new resolution."""
        watched = []
        for name in OVERRIDE_VARIABLES:
            targeted, generic = self.variable_names(name)
            watched.extend([generic, targeted])
        return watched
