import unittest
from unittest.mock import patch

from shaketune_installer.Context import Context
from shaketune_installer.Packages import Packages
from shaketune_installer.Preflight import Preflight
from shaketune_installer.Util import Util

SERVICES_WITH_KLIPPER = """\
  klipper.service    loaded active running Klipper 3D Printer Firmware SV1
  moonraker.service  loaded active running API Server for Klipper SV1
  ssh.service        loaded active running OpenBSD Secure Shell server
"""

SERVICES_WITHOUT_KLIPPER = """\
  moonraker.service  loaded active running API Server for Klipper SV1
  ssh.service        loaded active running OpenBSD Secure Shell server
"""


class TestPreflight(unittest.TestCase):

    def setUp(self):
        self.context = Context.setup({"HOME": "/home/pi", "USER": "pi"}, [])
        self.geteuid = patch("shaketune_installer.Permissions.os.geteuid", return_value=1000)
        self.which = patch("shaketune_installer.Preflight.shutil.which", return_value="/usr/bin/python3")
        self.install = patch.object(Packages, "install")
        self.geteuid.start()
        self.which.start()
        self.packages_install = self.install.start()

    def tearDown(self):
        patch.stopall()

    def test_root_fails_before_anything_else(self):
        with patch("shaketune_installer.Permissions.os.geteuid", return_value=0), \
                patch.object(Util, "run_shell_command") as shell:
            with self.assertRaises(RuntimeError) as err:
                Preflight().run(self.context)
            shell.assert_not_called()
        self.assertIn("must not be run as root", str(err.exception))
        self.packages_install.assert_not_called()

    def test_missing_python_fails(self):
        with patch("shaketune_installer.Preflight.shutil.which", return_value=None), \
                patch.object(Util, "run_shell_command") as shell:
            with self.assertRaises(RuntimeError) as err:
                Preflight().run(self.context)
            shell.assert_not_called()
        self.assertIn("Python 3 is not installed", str(err.exception))
        self.packages_install.assert_not_called()

    def test_missing_klipper_service_fails_before_packages(self):
        with patch.object(Util, "run_shell_command", return_value=(0, SERVICES_WITHOUT_KLIPPER, "")):
            with self.assertRaises(RuntimeError) as err:
                Preflight().run(self.context)
        self.assertIn("Klipper service not found", str(err.exception))
        self.packages_install.assert_not_called()

    def test_failing_systemctl_counts_as_missing_service(self):
        with patch.object(Util, "run_shell_command", return_value=(1, "", "Failed to connect to bus")):
            with self.assertRaises(RuntimeError):
                Preflight().run(self.context)
        self.packages_install.assert_not_called()

    def test_success_installs_packages(self):
        with patch.object(Util, "run_shell_command", return_value=(0, SERVICES_WITH_KLIPPER, "")) as shell:
            Preflight().run(self.context)
        shell.assert_called_once_with("systemctl list-units --full -all -t service --no-legend", False)
        self.packages_install.assert_called_once_with(self.context)


class TestPackages(unittest.TestCase):

    def setUp(self):
        self.context = Context.setup({"HOME": "/home/pi", "USER": "pi"}, [])
        self.commands = []

    def _fake_shell(self, installed):
        def run(cmd, throwOnNonZeroReturnCode=True, streamOutput=False):
            self.commands.append(cmd)
            if cmd.startswith("dpkg -s "):
                return (0 if cmd[len("dpkg -s "):] in installed else 1, "", "")
            return (0, "", "")
        return run

    def test_installs_only_missing_packages_in_one_batch(self):
        with patch.object(Util, "run_shell_command", side_effect=self._fake_shell(["python3-venv", "python3-scipy"])):
            Packages().install(self.context)

        apt = [c for c in self.commands if c.startswith("sudo apt")]
        self.assertEqual(apt, [
            "sudo apt update",
            "sudo apt install -y python3-numpy python3-matplotlib",
        ])

    def test_nothing_missing_runs_no_apt(self):
        with patch.object(Util, "run_shell_command", side_effect=self._fake_shell(Packages.REQUIRED_PACKAGES)):
            Packages().install(self.context)

        self.assertEqual(self.commands, [f"dpkg -s {p}" for p in Packages.REQUIRED_PACKAGES])


if __name__ == '__main__':
    unittest.main()
