from .check_version import check_version
from .config import config
from .doctor import doctor
from .log import log
from .resolve import resolve
from .version import version
from .versions import versions
