import logging
import os
import sys

import coloredlogs

#
# Output Helpers
#

# Headers get their own level so the console formatter can color them apart from plain info lines.
HEADER = 25
logging.addLevelName(HEADER, "HEADER")

LEVEL_STYLES = {
    "debug": {"color": "green"},
    "info": {"color": "green"},
    "header": {"color": "cyan", "bold": True},
    "warning": {"color": "yellow"},
    "error": {"color": "red", "bold": True},
}


class Logger:

    IsDebugEnabled = False
    LogFileName = "shaketune-installer.log"

    _logger = logging.getLogger("shaketune_installer")
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setLevel(logging.INFO)
    _console_handler.setFormatter(coloredlogs.ColoredFormatter("%(message)s", level_styles=LEVEL_STYLES))
    _logger.addHandler(_console_handler)

    _file_handler = None


    @staticmethod
    def setup(path:str):
        Logger.Finalize()
        try:
            Logger._file_handler = logging.FileHandler(os.path.join(path, Logger.LogFileName), mode="w", encoding="utf-8")
            Logger._file_handler.setLevel(logging.DEBUG)
            Logger._file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] - %(message)s"))
            Logger._logger.addHandler(Logger._file_handler)
        except Exception as e:
            print("Failed to setup log file: "+str(e))


    @staticmethod
    def Finalize():
        if Logger._file_handler is None:
            return
        Logger._logger.removeHandler(Logger._file_handler)
        Logger._file_handler.close()
        Logger._file_handler = None


    @staticmethod
    def enable_debug_logging():
        Logger.IsDebugEnabled = True
        Logger._console_handler.setLevel(logging.DEBUG)


    @staticmethod
    def Debug(msg) -> None:
        Logger._logger.debug(msg)


    @staticmethod
    def Header(msg)  -> None:
        Logger._logger.log(HEADER, msg)


    @staticmethod
    def Blank() -> None:
        print("")


    @staticmethod
    def Info(msg) -> None:
        Logger._logger.info(msg)


    @staticmethod
    def Warn(msg) -> None:
        Logger._logger.warning(msg)


    @staticmethod
    def Error(msg) -> None:
        Logger._logger.error(msg)
