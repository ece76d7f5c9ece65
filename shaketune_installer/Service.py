from .Logging import Logger
from .Util import Util


# Restarts Klipper and Moonraker, so the new module and the update manager config are loaded.
class Service:

    SERVICES = ["klipper", "moonraker"]

    def restart_all(self) -> None:
        for service in Service.SERVICES:
            Logger.Info(f"[POST-INSTALL] Restarting {service.capitalize()}...")
            Service.restart_service(service)


    # A failed restart raises a CalledProcessError.
    @staticmethod
    def restart_service(serviceName:str) -> None:
        Util.run_shell_command(f"sudo systemctl restart {serviceName}.service")
