import unittest

from .commands import ItemType, LgTvCommand, is_known_command
from ..errors import ConfigFormatError


class TestCommands(unittest.TestCase):
    def test_is_known_command(self):
        self.assertTrue(is_known_command("POWER"))
        self.assertTrue(is_known_command("VOLUME_CURRENT"))
        self.assertFalse(is_known_command("Power"))
        self.assertFalse(is_known_command("#POWER"))

    def test_command_spec(self):
        self.assertEqual(LgTvCommand.VOLUME_UP.kind, "key")
        self.assertEqual(LgTvCommand.VOLUME_UP.code, "24")
        self.assertEqual(LgTvCommand.CONNECTION_STATUS.kind, "query")

    def test_item_type_coerce(self):
        self.assertIs(ItemType.coerce("Rollershutter"), ItemType.ROLLERSHUTTER)
        self.assertIs(ItemType.coerce("STRING"), ItemType.STRING)
        self.assertIs(ItemType.coerce(ItemType.NUMBER), ItemType.NUMBER)
        self.assertIs(ItemType.coerce("DimmerItem"), ItemType.DIMMER)
        with self.assertRaises(ConfigFormatError):
            ItemType.coerce("Color")


if __name__ == '__main__':
    unittest.main()
