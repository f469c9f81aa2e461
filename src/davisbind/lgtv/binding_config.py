"""
Per-item lgtv binding configuration.
"""
from typing import Dict, Iterable, Optional, Union

from ..const import INIT_COMMAND_KEY
from .commands import ItemType
from .config_parser import BindingConfigEntry


class BindingConfigStore:
    """
    Maps trigger commands of one item to their `device-id:device-command`
    target. Populated once by build() and only read afterwards.
    """

    def __init__(self, item_type: ItemType):
        self.item_type: ItemType = item_type
        self._targets: Dict[str, str] = {}

    @classmethod
    def from_entries(cls, entries: Iterable[BindingConfigEntry], item_type: ItemType) -> "BindingConfigStore":
        """
        Entries are inserted last-to-first, so when a trigger command repeats
        the entry that appears first in the configuration string wins.
        """
        store = cls(item_type)
        for entry in reversed(list(entries)):
            store._targets[entry.trigger_command] = entry.device_target
        return store

    def lookup_device_target(self, trigger_command: str) -> Optional[str]:
        return self._targets.get(trigger_command)

    def lookup_item_type(self) -> ItemType:
        return self.item_type

    def lookup_init_command(self) -> Optional[str]:
        return self.lookup_device_target(INIT_COMMAND_KEY)

    def device_commands(self) -> Dict[str, str]:
        return dict(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, trigger_command: object) -> bool:
        return trigger_command in self._targets

    def __repr__(self) -> str:
        return f"BindingConfigStore(item_type={self.item_type.name}, targets={self._targets!r})"


def build(entries: Iterable[BindingConfigEntry], item_type: Union[ItemType, str]) -> BindingConfigStore:
    """Builds a store from parsed entries, resolving the item type first."""
    return BindingConfigStore.from_entries(entries, ItemType.coerce(item_type))
