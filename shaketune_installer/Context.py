import os
# pylint: disable=import-error # Only exists on linux
import pwd
from typing import Any, List, Mapping, Optional

from .Logging import Logger
from .Paths import Paths


# This class holds the context of the installer, meaning all of the target vars and paths
# that this instance is using.
# Everything is derived from the user home, only the Klipper venv can be moved with the KLIPPER_VENV env var.
class Context:
    """
    The Context class represents the context in which the installation script is running.
    It holds the paths the install steps work on and the options parsed from the command line.
    """
    def __init__(self) -> None:

        # This is the user name of the user who launched the installer.
        self._username:Optional[str] = None

        # This is the user home path of the user who launched the installer.
        self._user_home:Optional[str] = None

        # The printer data config folder, ~/printer_data/config
        self._user_config_folder:Optional[str] = None

        # The full file path to the moonraker config.
        self._moonraker_config_file_path:Optional[str] = None

        # The root of the Klipper install.
        self._klipper_path:Optional[str] = None

        # The path to Klipper's PY virtual env, this is where the module dependencies are installed.
        self._klipper_venv_path:Optional[str] = None

        # True when the venv path came from the KLIPPER_VENV env var.
        self.klipper_venv_from_env:bool = False

        # The path the Shake&Tune repo is cloned to.
        self._shaketune_path:Optional[str] = None

        # The command line args the installer was launched with.
        self.cmd_args:List[str] = []

        # Parsed from the command line args, if debug should be enabled.
        self.debug:bool = False

        # Parsed from the command line args, if we should show help.
        self.show_help:bool = False


    @property
    def username(self) -> str:
        if self._username is None:
            raise AttributeError("Username was not set.")
        return self._username

    @username.setter
    def username(self, value:str) -> None:
        self._username = value.strip()

    @property
    def user_home(self) -> str:
        if self._user_home is None:
            raise AttributeError("User home path was not set.")
        return self._user_home

    @user_home.setter
    def user_home(self, value:str) -> None:
        self._user_home = value.strip()

    @property
    def user_config_folder(self) -> str:
        if self._user_config_folder is None:
            raise AttributeError("User config folder path was not set.")
        return self._user_config_folder

    @user_config_folder.setter
    def user_config_folder(self, value:str) -> None:
        self._user_config_folder = value.strip()

    @property
    def moonraker_config_file_path(self) -> str:
        if self._moonraker_config_file_path is None:
            raise AttributeError("Moonraker config file path was not set.")
        return self._moonraker_config_file_path

    @moonraker_config_file_path.setter
    def moonraker_config_file_path(self, value:str) -> None:
        self._moonraker_config_file_path = value.strip()

    @property
    def klipper_path(self) -> str:
        if self._klipper_path is None:
            raise AttributeError("Klipper path was not set.")
        return self._klipper_path

    @klipper_path.setter
    def klipper_path(self, value:str) -> None:
        self._klipper_path = value.strip()

    @property
    def klipper_venv_path(self) -> str:
        if self._klipper_venv_path is None:
            raise AttributeError("Klipper virtual env path was not set.")
        return self._klipper_venv_path

    @klipper_venv_path.setter
    def klipper_venv_path(self, value:str) -> None:
        self._klipper_venv_path = value.strip()

    @property
    def shaketune_path(self) -> str:
        if self._shaketune_path is None:
            raise AttributeError("Shake&Tune repo path was not set.")
        return self._shaketune_path

    @shaketune_path.setter
    def shaketune_path(self, value:str) -> None:
        self._shaketune_path = value.strip()

    @property
    def shaketune_module_path(self) -> str:
        """
        The module folder inside the Shake&Tune repo, this is what gets linked into Klipper.
        """
        return os.path.join(self.shaketune_path, Paths.ShakeTuneModuleFolder)

    @property
    def klipper_module_link_path(self) -> str:
        """
        Where the Shake&Tune module is linked to in Klipper's extras folder.
        """
        return os.path.join(Paths.klipper_extras_folder(self.klipper_path), Paths.ShakeTuneModuleFolder)


    @staticmethod
    def setup(environ:Mapping[str, str], cmd_args:List[str]) -> "Context":
        """
        Bootstrap the context object from the process environment and command line.

        Args:
            environ: The environment of the installer process, usually os.environ.
            cmd_args: The command line args, without the program name.

        Returns:
            Context: The initialized context object.
        """
        context = Context()
        username = environ.get("USER")
        user_home = environ.get("HOME")
        if not username or not user_home:
            # Fall back to the password database for the user we are running as.
            user = pwd.getpwuid(os.geteuid())
            username = username or user.pw_name
            user_home = user_home or user.pw_dir
        context.username = username
        context.user_home = user_home
        context.cmd_args = list(cmd_args)

        home = context.user_home
        context.user_config_folder = os.path.join(home, Paths.UserConfigFolder)
        context.moonraker_config_file_path = os.path.join(context.user_config_folder, Paths.MoonrakerConfigFileName)
        context.klipper_path = os.path.join(home, Paths.KlipperFolder)
        context.shaketune_path = os.path.join(home, Paths.ShakeTuneFolder)

        # The venv is the only path that can be overwritten.
        venv = environ.get(Paths.KlipperVenvEnvVar)
        if venv is not None and len(venv.strip()) > 0:
            context.klipper_venv_path = venv
            context.klipper_venv_from_env = True
        else:
            context.klipper_venv_path = os.path.join(home, Paths.KlipperVenvFolder)
        return context


    def validate(self) -> None:
        """
        Validates that all of the paths the install steps need are set.

        Raises:
            ValueError: If any of the required values are missing.
        """
        error = "Required config var %s was not found"
        self._validate_property(self._username, error % "Username")
        self._validate_path(self._user_home, error % "User Home")
        self._validate_property(self._user_config_folder, error % "User Config Folder")
        self._validate_property(self._moonraker_config_file_path, error % "Moonraker Config File Path")
        self._validate_property(self._klipper_path, error % "Klipper Path")
        # The venv and repo are checked by their own steps, the repo won't exist on the first install.
        self._validate_property(self._klipper_venv_path, error % "Klipper Venv Path")
        self._validate_property(self._shaketune_path, error % "Shake&Tune Path")


    def parse_args(self):
        """
        Parses the command line arguments passed to the installer.

        The installer has no positional arguments, only flags in the form of -flag.

        Raises:
            AttributeError: If an unknown argument is found.
        """
        for a in self.cmd_args:
            if isinstance(a, str) is False or len(a) == 0:
                continue

            raw_arg = a.lstrip('-').lower() if a[0] == '-' else None
            if raw_arg == "debug":
                # Enable debug printing.
                self.debug = True
                Logger.enable_debug_logging()
            elif raw_arg == "help" or raw_arg == "usage" or raw_arg == "h":
                self.show_help = True
            else:
                raise AttributeError(f"Unknown argument `{a}` found. Use -help for options.")


    def _validate_path(self, path:Optional[str], error:str):
        if path is None or os.path.exists(path) is False:
            raise ValueError(error)


    def _validate_property(self, s:Optional[Any], error:str):
        if s is None:
            raise ValueError(error)

        if isinstance(s, str) and len(s) == 0:
            raise ValueError(error)
