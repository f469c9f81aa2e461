"""
Parser for lgtv binding configuration strings.

    lgtv="<command>:<device-id>:<device-command>[,<command>:<device-id>:<device-command>][,...]"

Examples:

    ON:Livingroom:POWER, OFF:Livingroom:POWER
    UP:Livingroom:VOLUME_UP, DOWN:Livingroom:VOLUME_DOWN
    INIT:Livingroom:#CHANNEL_SET=7
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..const import ADVANCED_COMMAND_KEY, ENTRY_SEPARATOR, FIELD_SEPARATOR
from ..errors import ConfigFormatError
from .commands import is_known_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BindingConfigEntry:
    trigger_command: str
    device_id: str
    device_command: str

    @property
    def is_advanced(self) -> bool:
        return self.device_command.startswith(ADVANCED_COMMAND_KEY)

    @property
    def device_target(self) -> str:
        return f"{self.device_id}{FIELD_SEPARATOR}{self.device_command}"


def split_segments(raw: str) -> Iterator[str]:
    """
    Yields the comma separated segments of `raw` in string order.

    A blank remainder ends the sequence, so trailing commas and whitespace are
    ignored. Blank segments followed by more input are yielded as-is and
    rejected by parse_entry.
    """
    tail = raw
    while True:
        head, sep, tail = tail.partition(ENTRY_SEPARATOR)
        yield head
        if not sep or not tail.strip():
            return


def parse_entry(segment: str) -> BindingConfigEntry:
    parts = [part.strip() for part in segment.strip().split(FIELD_SEPARATOR)]
    if len(parts) != 3 or not all(parts):
        raise ConfigFormatError(
            f"Lgtv binding must contain three parts separated by '{FIELD_SEPARATOR}', got '{segment.strip()}'"
        )

    trigger_command, device_id, device_command = parts

    # Advanced commands bypass the vocabulary
    if not device_command.startswith(ADVANCED_COMMAND_KEY) and not is_known_command(device_command):
        raise ConfigFormatError(f"Unrecognized command '{device_command}'")

    return BindingConfigEntry(trigger_command, device_id, device_command)


def parse(raw: str) -> List[BindingConfigEntry]:
    """
    Parses a binding configuration string into entries in string order.

    Raises ConfigFormatError on the first malformed segment; nothing is
    returned for a partially valid string.
    """
    if raw is None or not raw.strip():
        raise ConfigFormatError("Lgtv binding configuration must not be empty")

    entries = [parse_entry(segment) for segment in split_segments(raw)]
    for entry in entries:
        logger.debug(
            f"Parsed lgtv entry {entry.trigger_command} -> {entry.device_target}"
            f"{' (advanced)' if entry.is_advanced else ''}"
        )
    return entries
