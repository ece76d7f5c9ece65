import os
import sys
from typing import List, Mapping, Optional

from .Cleanup import Cleanup
from .Context import Context
from .Linker import Linker
from .Logging import Logger
from .Paths import Paths
from .Permissions import Permissions
from .Preflight import Preflight
from .Repository import Repository
from .Service import Service
from .UpdateManager import UpdateManager
from .VirtualEnv import VirtualEnv


# The main entry point for the installer. Runs every install step in order, any step that fails stops the install.
class Installer:

    def __init__(self, environ:Optional[Mapping[str, str]] = None, cmd_args:Optional[List[str]] = None) -> None:
        self.environ = environ if environ is not None else os.environ
        self.cmd_args = cmd_args if cmd_args is not None else sys.argv[1:]


    def Run(self) -> Context:
        context = Context.setup(self.environ, self.cmd_args)
        # Nothing is written to the user home before the root check.
        Permissions().validate_not_root(context)
        Logger.setup(context.user_home)
        context.parse_args()
        if context.klipper_venv_from_env:
            Logger.Debug(f"Using Klipper venv from {Paths.KlipperVenvEnvVar}: {context.klipper_venv_path}")

        if context.show_help:
            self.print_help()
            return context

        Logger.Blank()
        Logger.Header("=============================================")
        Logger.Header("- Klippain Shake&Tune module install script -")
        Logger.Header("=============================================")
        Logger.Blank()

        context.validate()
        Logger.Debug(f"Klipper: {context.klipper_path}, venv: {context.klipper_venv_path}, Shake&Tune: {context.shaketune_path}")

        Preflight().run(context)
        Repository().run(context)
        VirtualEnv().run(context)
        Cleanup().run(context)
        Linker().run(context)
        UpdateManager().run(context)
        Service().restart_all()

        Logger.Blank()
        Logger.Header("Klippain Shake&Tune install complete!")
        Logger.Blank()
        return context


    def print_help(self) -> None:
        Logger.Blank()
        Logger.Header("Klippain Shake&Tune Module Installer")
        Logger.Blank()
        Logger.Info("Installs the Shake&Tune module into the Klipper install of the current user.")
        Logger.Info("Run it as the user Klipper runs under, not as root. The installer uses sudo where it's needed.")
        Logger.Blank()
        Logger.Info("Options:")
        Logger.Info("  -debug  - Prints debug output to the console.")
        Logger.Info("  -help   - Shows this help.")
        Logger.Blank()
        Logger.Info("Environment:")
        Logger.Info("  KLIPPER_VENV - The path of Klipper's python virtual env. Default: ~/klippy-env")
        Logger.Blank()
