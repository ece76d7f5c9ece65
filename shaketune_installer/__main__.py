import subprocess
import sys

from .Logging import Logger
from .Installer import Installer


def main() -> int:
    # Run the installer
    code = 0
    try:
        i = Installer()
        i.Run()
    except subprocess.CalledProcessError as e:
        Logger.Error(f"Command `{e.cmd}` failed with exit code {e.returncode}.")
        if e.stdout:
            Logger.Error(str(e.stdout).strip())
        if e.stderr:
            Logger.Error(str(e.stderr).strip())
        code = 1
    except Exception as e:
        Logger.Error("Installer got an exception. "+str(e))
        code = 1

    # Allow the logger to flush.
    Logger.Finalize()
    return code


if __name__ == "__main__":
    sys.exit(main())
