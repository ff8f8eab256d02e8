import click

GENERATE_HINT = (
    "Consider enabling generator mode (`--generate` or `generate = true` in the "
    "[build] table of mysqlclient.toml) to generate matching bindings at build time."
)


class BuildError(click.ClickException):
    """Base class for every fatal build-time failure."""


class MalformedToolOutput(BuildError):
    def __init__(self, tool, output):
        self.tool = tool
        self.output = output
        super().__init__(f"Unexpected output from {tool}: `{output}`")


class UnsupportedVersion(BuildError):
    def __init__(self, version, supported):
        self.version = version
        self.supported = list(supported)
        super().__init__(
            f"`{version}` is not supported by mysqlclient-build. "
            f"Any of the following versions is supported: {self.supported}. "
            f"{GENERATE_HINT}\n"
            "If you set the version via the `MYSQLCLIENT_VERSION` variable make sure that it is a valid semver "
            "version like `8.0.32` that matches a supported version, in this case `MySQL 8.0.x` (remove the "
            "name of the software from a supported version and replace the x with a valid patch number)"
        )


class UnsupportedPlatform(BuildError):
    def __init__(self, pointer_width, arch):
        self.pointer_width = pointer_width
        self.arch = arch
        super().__init__(
            f"Pointer size: `{pointer_width}` is not supported by mysqlclient-build. {GENERATE_HINT}"
        )


class DiscoveryExhausted(BuildError):
    def __init__(self):
        super().__init__(
            "Did not find a compatible version of libmysqlclient.\n"
            "Ensure that you installed one and taught mysqlclient-build how to find it.\n"
            "You have the following options for that:\n"
            "\n"
            "  * Use `pkg-config` to automatically detect the right location\n"
            "  * Use vcpkg to automatically detect the right location.\n"
            "    You also need to set `MYSQLCLIENT_VERSION` to specify which\n"
            "    version of libmysqlclient you are using\n"
            "  * Set the `MYSQLCLIENT_LIB_DIR` and `MYSQLCLIENT_VERSION` environment\n"
            "    variables to point the compiler to the right directory and specify\n"
            "    which version is used\n"
            "  * Make the `mysql_config` binary available in the environment that invokes\n"
            "    the compiler"
        )


class BindingCopyError(BuildError):
    def __init__(self, source, target, reason):
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"Could not write bindings from {source} to {target}: {reason}")


class GenerationError(BuildError):
    def __init__(self, command, returncode, stderr):
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Unable to generate bindings: `{command}` exited with status {returncode}: {stderr.strip()}"
        )
