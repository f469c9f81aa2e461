import logging
from typing import Dict, Optional, Set, Union

from ..const import LGTV_BINDING_TYPE
from ..errors import ConfigFormatError
from . import config_parser
from .binding_config import BindingConfigStore, build
from .commands import ItemType

logger = logging.getLogger(__name__)


class LgtvBindingProvider:
    """
    Registry of lgtv binding configurations keyed by item name.

    The host owns the lifecycle: it calls process_binding_configuration for
    every bound item of a configuration context and remove_configurations
    when that context is reloaded or dropped.
    """

    def __init__(self, binding_configs: Optional[Dict[str, BindingConfigStore]] = None):
        self.binding_configs: Dict[str, BindingConfigStore] = {} if binding_configs is None else binding_configs
        self._context_items: Dict[str, Set[str]] = {}

    @property
    def binding_type(self) -> str:
        return LGTV_BINDING_TYPE

    def validate_item_type(self, item_name: str, item_type: Union[ItemType, str]) -> ItemType:
        try:
            return ItemType.coerce(item_type)
        except ConfigFormatError:
            allowed = ", ".join(t.item_class_name for t in ItemType)
            raise ConfigFormatError(
                f"item '{item_name}' is of type '{item_type}', only {allowed} are allowed"
                " - please check your *.items configuration"
            ) from None

    def process_binding_configuration(
        self, context: str, item_name: str, item_type: Union[ItemType, str], binding_config: str
    ) -> BindingConfigStore:
        resolved_type = self.validate_item_type(item_name, item_type)
        try:
            store = build(config_parser.parse(binding_config), resolved_type)
        except ConfigFormatError as e:
            logger.error(f"Invalid lgtv binding for item '{item_name}': {e}")
            raise

        self.binding_configs[item_name] = store
        self._context_items.setdefault(context, set()).add(item_name)
        logger.info(f"Registered {len(store)} lgtv command(s) for item '{item_name}' from '{context}'")
        return store

    def remove_configurations(self, context: str) -> None:
        for item_name in self._context_items.pop(context, set()):
            self.binding_configs.pop(item_name, None)
            logger.debug(f"Removed lgtv binding for item '{item_name}'")

    def get_item_type(self, item_name: str) -> Optional[ItemType]:
        config = self.binding_configs.get(item_name)
        return config.lookup_item_type() if config is not None else None

    def get_device_command(self, item_name: str, command: str) -> Optional[str]:
        config = self.binding_configs.get(item_name)
        return config.lookup_device_target(command) if config is not None else None

    def get_device_commands(self, item_name: str) -> Optional[Dict[str, str]]:
        config = self.binding_configs.get(item_name)
        return config.device_commands() if config is not None else None

    def get_item_init_command(self, item_name: str) -> Optional[str]:
        config = self.binding_configs.get(item_name)
        return config.lookup_init_command() if config is not None else None
