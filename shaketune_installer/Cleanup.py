import os

from .Context import Context
from .Logging import Logger
from .Paths import Paths


# Older Shake&Tune versions installed their macros into a folder in the user config.
# The macros are now part of the module, so the empty folder is removed.
class Cleanup:

    def run(self, context:Context) -> None:
        path = self.legacy_macro_folder(context)
        if os.path.isdir(path) is False:
            Logger.Debug(f"No old macro folder found at {path}")
            return

        Logger.Info("[INFO] Old K-Shake&Tune macro folder found, cleaning it!")
        # A link to the folder is removed itself, a real folder only when it's empty, rmdir raises if there's anything left in it.
        try:
            if os.path.islink(path):
                os.remove(path)
            else:
                os.rmdir(path)
        except OSError as e:
            Logger.Error(f"Failed to remove the old macro folder {path}, make sure it's empty.")
            raise e


    def legacy_macro_folder(self, context:Context) -> str:
        """
        Returns the folder the old macros were installed to.

        Klippain setups keep them under the scripts folder, all other setups directly in the config folder.
        """
        if self.is_klippain_setup(context):
            return os.path.join(context.user_config_folder, "scripts", Paths.LegacyMacroFolder)
        return os.path.join(context.user_config_folder, Paths.LegacyMacroFolder)


    def is_klippain_setup(self, context:Context) -> bool:
        return os.path.isdir(os.path.join(context.user_home, Paths.KlippainConfigFolder)) and \
            os.path.isfile(os.path.join(context.user_config_folder, Paths.KlippainVersionFileName))
