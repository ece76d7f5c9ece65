import os

from .Context import Context
from .Logging import Logger
from .Util import Util


# Clones the Shake&Tune repo, or brings an existing clone up to date.
class Repository:

    REPO_URL = "https://github.com/Wondro/klippain-shaketune.git"
    BRANCH = "main"

    def run(self, context:Context) -> None:
        path = context.shaketune_path
        if os.path.isdir(path) is False:
            self.clone(path)
        else:
            self.update(path)
        Logger.Blank()


    def clone(self, path:str) -> None:
        Logger.Header("[DOWNLOAD] Cloning Klippain Shake&Tune...")
        Util.run_shell_command(f"git clone {Repository.REPO_URL} {Util.quote(path)}", streamOutput=True)
        Util.run_shell_command(f"chmod +x {Util.quote(os.path.join(path, 'install.sh'))}")
        Logger.Info("[DOWNLOAD] Download complete!")


    def update(self, path:str) -> None:
        # Only fast forward, if the local history diverged the pull fails and so does the install.
        Logger.Header("[DOWNLOAD] Repo already present. Updating...")
        git = f"git -C {Util.quote(path)}"
        Util.run_shell_command(f"{git} fetch --all -p", streamOutput=True)
        Util.run_shell_command(f"{git} checkout {Repository.BRANCH}", streamOutput=True)
        Util.run_shell_command(f"{git} pull --ff-only", streamOutput=True)
        Logger.Info("[DOWNLOAD] Update complete!")
