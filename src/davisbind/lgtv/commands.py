"""
Known LG TV device commands and supported item types.
"""
from enum import Enum
from typing import NamedTuple, Union

from ..errors import ConfigFormatError


class CommandSpec(NamedTuple):
    kind: str  # "key", "query" or "handle"
    code: str


class LgTvCommand(Enum):
    POWER = CommandSpec("key", "1")
    NUMBER_0 = CommandSpec("key", "2")
    NUMBER_1 = CommandSpec("key", "3")
    NUMBER_2 = CommandSpec("key", "4")
    NUMBER_3 = CommandSpec("key", "5")
    NUMBER_4 = CommandSpec("key", "6")
    NUMBER_5 = CommandSpec("key", "7")
    NUMBER_6 = CommandSpec("key", "8")
    NUMBER_7 = CommandSpec("key", "9")
    NUMBER_8 = CommandSpec("key", "10")
    NUMBER_9 = CommandSpec("key", "11")
    KEY_UP = CommandSpec("key", "12")
    KEY_DOWN = CommandSpec("key", "13")
    KEY_LEFT = CommandSpec("key", "14")
    KEY_RIGHT = CommandSpec("key", "15")
    OK = CommandSpec("key", "20")
    HOME_MENU = CommandSpec("key", "21")
    BACK = CommandSpec("key", "23")
    VOLUME_UP = CommandSpec("key", "24")
    VOLUME_DOWN = CommandSpec("key", "25")
    MUTE_TOGGLE = CommandSpec("key", "26")
    CHANNEL_UP = CommandSpec("key", "27")
    CHANNEL_DOWN = CommandSpec("key", "28")
    BLUE = CommandSpec("key", "29")
    GREEN = CommandSpec("key", "30")
    RED = CommandSpec("key", "31")
    YELLOW = CommandSpec("key", "32")
    PLAY = CommandSpec("key", "33")
    PAUSE = CommandSpec("key", "34")
    STOP = CommandSpec("key", "35")
    FAST_FORWARD = CommandSpec("key", "36")
    REWIND = CommandSpec("key", "37")
    SKIP_FORWARD = CommandSpec("key", "38")
    SKIP_BACKWARD = CommandSpec("key", "39")
    RECORD = CommandSpec("key", "40")
    RECORDING_LIST = CommandSpec("key", "41")
    REPEAT = CommandSpec("key", "42")
    LIVE_TV = CommandSpec("key", "43")
    EPG = CommandSpec("key", "44")
    PROGRAM_INFORMATION = CommandSpec("key", "45")
    ASPECT_RATIO = CommandSpec("key", "46")
    EXTERNAL_INPUT = CommandSpec("key", "47")
    PIP_SECONDARY_VIDEO = CommandSpec("key", "48")
    SHOW_SUBTITLE = CommandSpec("key", "49")
    PROGRAM_LIST = CommandSpec("key", "50")
    TELE_TEXT = CommandSpec("key", "51")
    MARK = CommandSpec("key", "52")
    VIDEO_3D = CommandSpec("key", "400")
    AUDIO_3D_LR = CommandSpec("key", "401")
    DASH = CommandSpec("key", "402")
    PREVIOUS_CHANNEL = CommandSpec("key", "403")
    FAVORITE_CHANNEL = CommandSpec("key", "404")
    QUICK_MENU = CommandSpec("key", "405")
    TEXT_OPTION = CommandSpec("key", "406")
    AUDIO_DESCRIPTION = CommandSpec("key", "407")
    ENERGY_SAVING = CommandSpec("key", "409")
    AV_MODE = CommandSpec("key", "410")
    SIMPLINK = CommandSpec("key", "411")
    EXIT = CommandSpec("key", "412")
    RESERVATION_PROGRAM_LIST = CommandSpec("key", "413")
    PIP_CHANNEL_UP = CommandSpec("key", "414")
    PIP_CHANNEL_DOWN = CommandSpec("key", "415")
    SWITCHING_PRIMARY_SECONDARY_VIDEO = CommandSpec("key", "416")
    MY_APPS = CommandSpec("key", "417")

    CHANNEL_SET = CommandSpec("handle", "HandleChannelChange")
    CONNECTION_STATUS = CommandSpec("query", "cur_status")
    CHANNEL_CURRENTNAME = CommandSpec("query", "cur_channel")
    VOLUME_CURRENT = CommandSpec("query", "volume_info")
    CONTEXT_UI = CommandSpec("query", "context_ui")

    @property
    def kind(self) -> str:
        return self.value.kind

    @property
    def code(self) -> str:
        return self.value.code


def is_known_command(name: str) -> bool:
    """Case-exact membership test against the command vocabulary."""
    return name in LgTvCommand.__members__


class ItemType(Enum):
    SWITCH = "Switch"
    NUMBER = "Number"
    DIMMER = "Dimmer"
    ROLLERSHUTTER = "Rollershutter"
    STRING = "String"

    @property
    def item_class_name(self) -> str:
        return f"{self.value}Item"

    @classmethod
    def coerce(cls, value: Union["ItemType", str]) -> "ItemType":
        """
        Accepts an ItemType, its value ("Switch"), its item class name
        ("SwitchItem") or its member name ("SWITCH").
        Raises ConfigFormatError for anything else.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        if isinstance(value, str):
            if value in cls.__members__:
                return cls[value]
            for member in cls:
                if value == member.item_class_name:
                    return member
        raise ConfigFormatError(f"'{value}' is not a supported item type")
