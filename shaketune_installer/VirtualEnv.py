import os
import re
import tempfile
from typing import List

from .Context import Context
from .Logging import Logger
from .Paths import Paths
from .Util import Util


# Prepares Klipper's virtual env for Shake&Tune.
#
# numpy, scipy and matplotlib are installed by apt, building them with pip on a printer board takes hours.
# So the venv gets a .pth file that adds the system dist-packages to its path, and those three
# packages are removed from the requirements before pip installs the rest.
class VirtualEnv:

    # The packages that come from the system instead of pip, in the order they are import checked.
    SYSTEM_PACKAGES = ["numpy", "scipy", "matplotlib"]

    # Matches the name at the start of the line followed by a word boundary or a version operator,
    # so pinned and bounded versions like `numpy>=1.26` or `SciPy==1.11` are matched too.
    SYSTEM_PACKAGE_PATTERN = re.compile(r"^(" + "|".join(SYSTEM_PACKAGES) + r")(\b|[<=>])", re.IGNORECASE)

    def run(self, context:Context) -> None:
        """
        Links the system site packages into the venv, installs the remaining requirements and
        checks the system packages can be imported from the venv.

        Args:
            context (Context): The installer context.

        Raises:
            RuntimeError: If Klipper's virtual env doesn't exist.
            subprocess.CalledProcessError: If pip or the import check fails.
        """
        venv = context.klipper_venv_path
        if os.path.isdir(venv) is False:
            raise RuntimeError(f"[ERROR] Klipper's Python virtual environment not found at {venv}!")

        Logger.Header("[SETUP] Ensuring venv can see system site-packages (apt numpy/scipy/matplotlib)...")
        self.link_system_site_packages(venv)

        Logger.Header("[SETUP] Installing/updating Shake&Tune Python deps (excluding numpy/scipy/matplotlib)...")
        self._pip(venv, "install --upgrade pip wheel setuptools")
        self.install_requirements(venv, os.path.join(context.shaketune_path, Paths.RequirementsFileName))

        self.check_imports(venv)
        Logger.Blank()


    @staticmethod
    def python(venv:str) -> str:
        return os.path.join(venv, "bin", "python")


    def site_packages_path(self, venv:str) -> str:
        (_, output, _) = Util.run_shell_command(f"{Util.quote(VirtualEnv.python(venv))} -c \"import site; print(site.getsitepackages()[0])\"")
        return output.strip()


    def link_system_site_packages(self, venv:str) -> str:
        """
        Writes the .pth file that makes the system packages visible in the venv.

        Returns:
            str: The path of the written .pth file.
        """
        site_dir = self.site_packages_path(venv)
        os.makedirs(site_dir, exist_ok=True)
        pth_path = os.path.join(site_dir, Paths.SystemSitePthFileName)
        Logger.Debug(f"Writing {pth_path} for {Paths.SystemSitePackagesPath}")
        with open(pth_path, "w", encoding="utf-8") as f:
            f.write(f"import site; site.addsitedir('{Paths.SystemSitePackagesPath}')\n")
        return pth_path


    def install_requirements(self, venv:str, requirements_path:str) -> None:
        if os.path.isfile(requirements_path) is False:
            Logger.Info("[SETUP] No requirements.txt found, skipping pip package install.")
            return

        with open(requirements_path, "r", encoding="utf-8") as f:
            lines = f.readlines()

        filtered = VirtualEnv.filter_requirements(lines)
        if len(filtered) == len(lines):
            self._pip(venv, f"install -r {Util.quote(requirements_path)}")
            return

        Logger.Info("[SETUP] Filtering numpy/scipy/matplotlib from requirements.txt")
        if not any(len(l.strip()) > 0 for l in filtered):
            Logger.Info("[SETUP] No additional pip requirements.")
            return

        fd, filtered_path = tempfile.mkstemp(prefix="requirements.filtered.", suffix=".txt")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.writelines(filtered)
            self._pip(venv, f"install -r {Util.quote(filtered_path)}")
        finally:
            os.remove(filtered_path)


    @staticmethod
    def filter_requirements(lines:List[str]) -> List[str]:
        """
        Removes the requirement lines of the system provided packages.

        Args:
            lines (List[str]): The lines of a requirements file.

        Returns:
            List[str]: All other lines, unchanged and in their original order.
        """
        return [l for l in lines if VirtualEnv.SYSTEM_PACKAGE_PATTERN.match(l) is None]


    def check_imports(self, venv:str) -> None:
        # Quick import sanity check, the packages were excluded from pip so they must come from the system.
        modules = ", ".join(VirtualEnv.SYSTEM_PACKAGES)
        versions = ", ".join(f"'{m}', {m}.__version__" for m in VirtualEnv.SYSTEM_PACKAGES)
        script = f"import {modules}; print('OK:', {versions})"
        (_, output, _) = Util.run_shell_command(f"{Util.quote(VirtualEnv.python(venv))} -c \"{script}\"")
        Logger.Info(output.strip())


    def _pip(self, venv:str, args:str) -> None:
        Util.run_shell_command(f"{Util.quote(VirtualEnv.python(venv))} -m pip {args}", streamOutput=True)
