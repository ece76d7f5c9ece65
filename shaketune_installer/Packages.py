from typing import List

from .Context import Context
from .Logging import Logger
from .Util import Util


# Makes sure the apt packages Shake&Tune needs are installed.
# numpy, scipy and matplotlib come from apt as prebuilt packages, so they never have to be built in the venv.
class Packages:

    REQUIRED_PACKAGES = ["python3-venv", "python3-numpy", "python3-scipy", "python3-matplotlib"]

    def install(self, context:Context) -> None:
        Logger.Header("Checking system packages...")
        missing = self.missing_packages(Packages.REQUIRED_PACKAGES)
        if len(missing) == 0:
            Logger.Info("All system packages are already installed.")
            return

        # Only the missing packages are installed, all in one go.
        Logger.Info(f"Installing missing packages: {' '.join(missing)}")
        Util.run_shell_command("sudo apt update", streamOutput=True)
        Util.run_shell_command("sudo apt install -y " + " ".join(missing), streamOutput=True)
        Logger.Info("System packages installed.")


    def missing_packages(self, packages:List[str]) -> List[str]:
        """
        Returns the packages of the list that are not installed, in the order given.
        """
        missing = []
        for p in packages:
            if self.is_package_installed(p):
                Logger.Info(f"{p} is already installed")
            else:
                missing.append(p)
        return missing


    @staticmethod
    def is_package_installed(package:str) -> bool:
        (returnCode, _, _) = Util.run_shell_command(f"dpkg -s {package}", False)
        return returnCode == 0
