import os
import tempfile
import unittest

from shaketune_installer.Cleanup import Cleanup
from shaketune_installer.Context import Context


class TestCleanup(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.context = Context.setup({"HOME": self.tmp.name, "USER": "pi"}, [])
        self.config = self.context.user_config_folder
        os.makedirs(self.config)

    def tearDown(self):
        self.tmp.cleanup()

    def _make_klippain_setup(self):
        os.makedirs(os.path.join(self.tmp.name, "klippain_config"))
        with open(os.path.join(self.config, ".VERSION"), "w", encoding="utf-8") as f:
            f.write("v4.1.0\n")

    def test_removes_empty_folder_in_config(self):
        legacy = os.path.join(self.config, "K-ShakeTune")
        os.makedirs(legacy)
        Cleanup().run(self.context)
        self.assertFalse(os.path.exists(legacy))

    def test_removes_empty_folder_in_klippain_scripts(self):
        self._make_klippain_setup()
        legacy = os.path.join(self.config, "scripts", "K-ShakeTune")
        os.makedirs(legacy)
        Cleanup().run(self.context)
        self.assertFalse(os.path.exists(legacy))
        self.assertTrue(os.path.isdir(os.path.join(self.config, "scripts")))

    def test_klippain_setup_leaves_config_folder_alone(self):
        self._make_klippain_setup()
        other = os.path.join(self.config, "K-ShakeTune")
        os.makedirs(other)
        Cleanup().run(self.context)
        self.assertTrue(os.path.isdir(other))

    def test_version_file_without_klippain_config_is_not_klippain(self):
        with open(os.path.join(self.config, ".VERSION"), "w", encoding="utf-8") as f:
            f.write("v4.1.0\n")
        self.assertFalse(Cleanup().is_klippain_setup(self.context))
        self.assertEqual(Cleanup().legacy_macro_folder(self.context), os.path.join(self.config, "K-ShakeTune"))

    def test_never_removes_non_empty_folder(self):
        legacy = os.path.join(self.config, "K-ShakeTune")
        os.makedirs(legacy)
        macro = os.path.join(legacy, "my_macros.cfg")
        with open(macro, "w", encoding="utf-8") as f:
            f.write("[gcode_macro TEST]\n")

        with self.assertRaises(OSError):
            Cleanup().run(self.context)
        self.assertTrue(os.path.isfile(macro))

    def test_link_to_folder_is_removed_but_not_the_folder(self):
        real = os.path.join(self.tmp.name, "old_macros")
        os.makedirs(real)
        legacy = os.path.join(self.config, "K-ShakeTune")
        os.symlink(real, legacy)
        Cleanup().run(self.context)
        self.assertFalse(os.path.lexists(legacy))
        self.assertTrue(os.path.isdir(real))

    def test_nothing_to_clean(self):
        Cleanup().run(self.context)
        self.assertEqual(os.listdir(self.config), [])


if __name__ == '__main__':
    unittest.main()
