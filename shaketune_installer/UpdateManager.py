import os
import re

from .Context import Context
from .Logging import Logger
from .Paths import Paths
from .Repository import Repository


# Registers Shake&Tune with the moonraker update manager, so it can be updated from the web UI.
class UpdateManager:

    SECTION_NAME = "Klippain-ShakeTune"

    # Matches `[update_manager Klippain-ShakeTune]` and older forms like `[update_manager client Klippain-ShakeTune]`.
    SECTION_PATTERN = re.compile(r"\[update_manager[a-z ]* " + SECTION_NAME + r"\]")

    def run(self, context:Context) -> None:
        path = context.moonraker_config_file_path
        if os.path.isfile(path) is False:
            Logger.Warn(f"[INSTALL] Moonraker config not found at {path}, skipping the update manager setup.")
            return

        if self.count_sections(path) > 0:
            Logger.Debug("Update manager section already exists in moonraker.conf")
            return

        Logger.Info("[INSTALL] Adding update manager to moonraker.conf...")
        with open(path, "a", encoding="utf-8") as f:
            f.write(self.section(context))
        Logger.Info("[INSTALL] Update manager added.")


    def count_sections(self, path:str) -> int:
        """
        Counts the lines of the config file with a Shake&Tune update manager section header.
        """
        count = 0
        # Only the section header is matched, so non utf-8 bytes in the rest of the file are replaced.
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                if UpdateManager.SECTION_PATTERN.search(line) is not None:
                    count += 1
        return count


    def section(self, context:Context) -> str:
        return f'''
## Klippain Shake&Tune automatic update management
[update_manager {UpdateManager.SECTION_NAME}]
type: git_repo
origin: {Repository.REPO_URL}
path: ~/{Paths.ShakeTuneFolder}
virtualenv: {context.klipper_venv_path}
requirements: {Paths.RequirementsFileName}
system_dependencies: system-dependencies.json
primary_branch: {Repository.BRANCH}
managed_services: klipper
'''
