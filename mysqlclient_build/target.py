import platform
import struct
import sys
import sysconfig
from dataclasses import dataclass

from .errors import UnsupportedPlatform

# platform.machine() spellings reduced to the names used for arch tags.
ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "win32": "x86",
    "arm64": "aarch64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv7": "arm",
}


def normalize_arch(machine):
    machine = machine.lower()
    return ARCH_ALIASES.get(machine, machine)


@dataclass(frozen=True)
class TargetPlatform:
    is_windows: bool
    pointer_width: int
    arch: str
    triple: str

    @classmethod
    def detect(cls, triple=None, pointer_width=None, arch=None, is_windows=None):
        """Describe the host, with optional overrides for cross builds."""
        if is_windows is None:
            is_windows = sys.platform.startswith("win")
        if pointer_width is None:
            pointer_width = struct.calcsize("P") * 8
        if arch is None:
            arch = platform.machine()
        if triple is None:
            triple = sysconfig.get_platform()
        return cls(
            is_windows=is_windows,
            pointer_width=int(pointer_width),
            arch=normalize_arch(arch),
            triple=triple,
        )

    @property
    def env_suffix(self):
        """Suffix of the per-target environment variables."""
        return self.triple.upper().replace("-", "_").replace(".", "_")

    @property
    def os_tag(self):
        return "windows" if self.is_windows else "linux"

    @property
    def arch_tag(self):
        if self.pointer_width == 32 and self.arch == "arm":
            return "arm"
        if self.pointer_width == 32:
            return "i686"
        if self.pointer_width == 64:
            return "x86_64"
        raise UnsupportedPlatform(self.pointer_width, self.arch)
