import os

from .Context import Context
from .Logging import Logger


class Permissions:

    def validate_not_root(self, context:Context) -> None:
        """
        Validates the installer is not running with root privileges.

        Args:
            context (Context): The context object containing information about the installation.

        Raises:
            RuntimeError: If the installer is run as the root user or with sudo.
        """

        # IT'S NOT OK TO INSTALL AS ROOT.
        # The repo is cloned into the user home and registered with the moonraker updater, which needs to be able to access the .git repo.
        # If the repo is owned by root, it can't do that. The few commands that need root are ran with sudo.
        # pylint: disable=no-member # Linux only
        if os.geteuid() == 0:
            raise RuntimeError("[PRE-CHECK] This script must not be run as root!")

        Logger.Debug(f"Running as user {context.username}")
