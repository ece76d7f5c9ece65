import os

from .Context import Context
from .Logging import Logger


# Links the Shake&Tune module into Klipper's extras folder, so Klipper can load it.
class Linker:

    def run(self, context:Context) -> None:
        target = context.klipper_module_link_path
        # isdir follows links, so an existing link to the module counts as installed.
        if os.path.isdir(target):
            Logger.Info("[INSTALL] Klippain Shake&Tune Klipper module is already installed.")
            Logger.Blank()
            return

        Logger.Info("[INSTALL] Linking Shake&Tune module to Klipper extras")
        self.link(context.shaketune_module_path, target)


    @staticmethod
    def link(source:str, target:str) -> None:
        """
        Creates a relative symlink at target pointing to source.
        A dangling link or a plain file at the target is replaced.
        """
        if os.path.islink(target) or os.path.isfile(target):
            Logger.Debug(f"Replacing {target}")
            os.remove(target)
        relative_source = os.path.relpath(os.path.realpath(source), os.path.realpath(os.path.dirname(target)))
        os.symlink(relative_source, target)
        Logger.Debug(f"Link `{target} -> {relative_source}` created successfully.")
