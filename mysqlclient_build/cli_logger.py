import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.environ.get("MYSQLCLIENT_BUILD_LOG_DIR") or os.path.join(
    os.path.expanduser("~"), ".mysqlclient_build", "logs"
)
LOG_PREFIX = "mysqlclient_build"


class Logger:
    """
    Console and log-file output of a build.

    The console is stderr, so stdout stays free for the directives printed by
    ``resolve``. Every console message, and every emitted build directive,
    is also appended to one log file per run. The file and its directory are
    only created by the first message.
    """

    def __init__(self, log_dir=LOG_DIR, stream=sys.stderr):
        self.log_dir = log_dir
        self.stream = stream
        self.log_file = os.path.join(
            log_dir,
            f"{LOG_PREFIX}_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _record(self, line):
        os.makedirs(self.log_dir, exist_ok=True)
        with open(self.log_file, "a") as f:
            f.write(line + "\n")

    def _log(self, level, message, color, prefix="", show_timestamp=True):
        if show_timestamp:
            timestamp = self._get_timestamp()
            self._record(f"[{timestamp}] [{level}] {message}")
            print(f"{color}{Style.BRIGHT}[{timestamp}]{Style.RESET_ALL} {prefix}{message}{Style.RESET_ALL}", file=self.stream)
        else:
            self._record(f"[{level}] {prefix}{message}")
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=self.stream)

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def step_info(self, message, indent=0):
        self._log("STEP", message, Fore.CYAN, prefix=" " * indent, show_timestamp=False)

    def success(self, message):
        self._log("SUCCESS", message, Fore.GREEN, prefix=f"{Style.BRIGHT}✓ {Style.RESET_ALL}{Fore.GREEN}")

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM)

    def directive(self, line):
        """Records an emitted build directive in the log file only."""
        self._record(f"[{self._get_timestamp()}] [DIRECTIVE] {line}")

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED)


# ---------------- Helper ----------------
logger = Logger()

def list_log_files(log_dir=LOG_DIR):
    """Names of the build logs in ``log_dir``, oldest first."""
    if not os.path.isdir(log_dir):
        return []
    return sorted(f for f in os.listdir(log_dir) if f.startswith(LOG_PREFIX) and f.endswith(".log"))

def get_latest_log_file(log_dir=LOG_DIR):
    """Return the path to the latest log file."""
    log_files = [os.path.join(log_dir, f) for f in list_log_files(log_dir)]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
