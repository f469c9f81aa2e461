import unittest

from .config_parser import BindingConfigEntry, parse, split_segments
from ..errors import ConfigFormatError


class TestConfigParser(unittest.TestCase):
    def test_single_entry(self):
        entries = parse("ON:Livingroom:POWER")
        self.assertEqual(entries, [BindingConfigEntry("ON", "Livingroom", "POWER")])

    def test_fields_are_trimmed(self):
        entries = parse("  UP : Livingroom :  VOLUME_UP ")
        self.assertEqual(entries, [BindingConfigEntry("UP", "Livingroom", "VOLUME_UP")])

    def test_entries_keep_string_order(self):
        entries = parse("UP:Livingroom:VOLUME_UP, DOWN:Livingroom:VOLUME_DOWN,INIT:Kitchen:MUTE_TOGGLE")
        self.assertEqual(
            [e.trigger_command for e in entries], ["UP", "DOWN", "INIT"]
        )
        self.assertEqual(entries[2].device_target, "Kitchen:MUTE_TOGGLE")

    def test_unknown_command(self):
        with self.assertRaisesRegex(ConfigFormatError, "Unrecognized command 'POWER_ON'"):
            parse("ON:Livingroom:POWER_ON")

    def test_command_is_case_exact(self):
        with self.assertRaises(ConfigFormatError):
            parse("ON:Livingroom:power")

    def test_advanced_command_skips_vocabulary(self):
        entries = parse("ON:Livingroom:#NOT_A_COMMAND, *:Livingroom:#CHANNEL_SET=%s")
        self.assertTrue(all(e.is_advanced for e in entries))
        self.assertEqual(entries[1].trigger_command, "*")

    def test_two_fields(self):
        with self.assertRaisesRegex(ConfigFormatError, "three parts"):
            parse("T:D")

    def test_four_fields(self):
        with self.assertRaises(ConfigFormatError):
            parse("ON:Livingroom:POWER:extra")

    def test_empty_field(self):
        with self.assertRaises(ConfigFormatError):
            parse("ON::POWER")
        with self.assertRaises(ConfigFormatError):
            parse("ON:Livingroom: ")

    def test_bad_later_segment_fails_whole_parse(self):
        with self.assertRaises(ConfigFormatError):
            parse("ON:Livingroom:POWER, OFF:Livingroom:BOGUS")

    def test_trailing_comma_is_ignored(self):
        self.assertEqual(len(parse("ON:Livingroom:POWER, ")), 1)

    def test_blank_leading_segment(self):
        with self.assertRaises(ConfigFormatError):
            parse(",ON:Livingroom:POWER")

    def test_empty_string(self):
        with self.assertRaises(ConfigFormatError):
            parse("")
        with self.assertRaises(ConfigFormatError):
            parse("   ")

    def test_split_segments_is_lazy(self):
        segments = split_segments("a,b,c")
        self.assertEqual(next(segments), "a")
        self.assertEqual(list(segments), ["b", "c"])

    def test_long_string(self):
        raw = ",".join(f"T{i}:tv:#RAW{i}" for i in range(5000))
        self.assertEqual(len(parse(raw)), 5000)


if __name__ == '__main__':
    unittest.main()
