import os


# A simple holder of commonly used paths and names.
# Everything user specific is relative to the home folder of the user running the installer.
class Paths:

    # The standard Klipper data layout, relative to the user home.
    UserConfigFolder = os.path.join("printer_data", "config")
    MoonrakerConfigFileName = "moonraker.conf"

    # The Klipper install and its python virtual env, relative to the user home.
    KlipperFolder = "klipper"
    KlipperVenvFolder = "klippy-env"

    # Env var that can be used to point at a non standard Klipper virtual env.
    KlipperVenvEnvVar = "KLIPPER_VENV"

    # Where the Shake&Tune repo is cloned to, relative to the user home.
    ShakeTuneFolder = "klippain_shaketune"

    # The module folder inside the repo, and the name of the link in Klipper's extras folder.
    ShakeTuneModuleFolder = "shaketune"
    KlipperExtrasFolder = os.path.join("klippy", "extras")

    # Klippain installs keep the macros in a scripts sub folder.
    # The setup is detected by the klippain_config folder in the home and a .VERSION file in the config folder.
    KlippainConfigFolder = "klippain_config"
    KlippainVersionFileName = ".VERSION"
    LegacyMacroFolder = "K-ShakeTune"

    # Debian's apt python packages live here, this is what the venv is pointed at.
    SystemSitePackagesPath = "/usr/lib/python3/dist-packages"
    SystemSitePthFileName = "_system_site.pth"

    # The manifest inside the repo with the python requirements.
    RequirementsFileName = "requirements.txt"


    @staticmethod
    def klipper_extras_folder(klipper_path:str) -> str:
        """
        Returns the path of the extras folder of the given Klipper install.

        Args:
            klipper_path: The root of the Klipper install.

        Returns:
            The path of klippy's extras folder.
        """
        return os.path.join(klipper_path, Paths.KlipperExtrasFolder)
