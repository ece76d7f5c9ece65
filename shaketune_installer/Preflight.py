import shutil

from .Context import Context
from .Logging import Logger
from .Packages import Packages
from .Permissions import Permissions
from .Util import Util


# Checks everything that must be true before the installer touches the system.
# All failures are fatal, nothing is retried.
class Preflight:

    KLIPPER_SERVICE_NAME = "klipper.service"

    def run(self, context:Context) -> None:
        """
        Runs the preflight checks and installs the missing system packages.

        Args:
            context (Context): The installer context.

        Raises:
            RuntimeError: If the installer runs as root, python3 is missing or the Klipper service isn't found.
        """
        # This must be first, before anything else happens.
        Permissions().validate_not_root(context)
        self.ensure_python3()
        self.ensure_klipper_service()
        Packages().install(context)


    def ensure_python3(self) -> None:
        if shutil.which("python3") is None:
            raise RuntimeError("[ERROR] Python 3 is not installed. Please install Python 3!")
        Logger.Debug("Found python3 at "+str(shutil.which("python3")))


    def ensure_klipper_service(self) -> None:
        (_, output, _) = Util.run_shell_command("systemctl list-units --full -all -t service --no-legend", False)
        if Preflight.KLIPPER_SERVICE_NAME not in output:
            raise RuntimeError("[ERROR] Klipper service not found. Install Klipper first!")
        Logger.Info("[PRE-CHECK] Klipper service found! Continuing...")
        Logger.Blank()
