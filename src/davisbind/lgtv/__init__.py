from .commands import LgTvCommand, ItemType, is_known_command
from .config_parser import BindingConfigEntry, parse
from .binding_config import BindingConfigStore, build
from .provider import LgtvBindingProvider
