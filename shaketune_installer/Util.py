import shlex
import subprocess
from typing import Tuple

from .Logging import Logger

class Util:

    # Runs a command as shell and returns the output.
    # Returns (return_code:int, output:str, error:str)
    @staticmethod
    def run_shell_command(cmd:str, throwOnNonZeroReturnCode:bool = True, streamOutput:bool = False) -> Tuple[int, str, str]:
        """
        Runs a shell command.

        Args:
            cmd (str): The command line, any paths in it must already be quoted.
            throwOnNonZeroReturnCode (bool): If a non zero return code should raise a CalledProcessError.
            streamOutput (bool): Lets the command write straight to the terminal instead of capturing the output.
                Used for the long running apt, git and pip commands, so the user can follow along.

        Returns:
            Tuple[int, str, str]: The return code, stdout and stderr. The outputs are empty when streamed.
        """
        Logger.Debug(f"RunShellCommand - {cmd}")
        # Check=true means if the process returns non-zero, an exception is thrown.
        # Shell=True is required so non absolute commands like "systemctl restart ..." work
        if streamOutput:
            result = subprocess.run(cmd, check=throwOnNonZeroReturnCode, shell=True, text=True)
            Logger.Debug(f"RunShellCommand - {cmd} - return: {result.returncode}")
            return (result.returncode, "", "")
        result = subprocess.run(cmd, check=throwOnNonZeroReturnCode, shell=True, capture_output=True, text=True)
        Logger.Debug(f"RunShellCommand - {cmd} - return: {result.returncode}; error - {result.stderr}")
        return (result.returncode, result.stdout, result.stderr)


    @staticmethod
    def quote(path:str) -> str:
        """
        Quotes a path so it can be used in a shell command line.
        """
        return shlex.quote(path)
