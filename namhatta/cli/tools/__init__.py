"""Tools of the namhatta command line."""

from .api_url_tool import ApiUrlTool
from .config_tool import ConfigTool
from .db_config_tool import DbConfigTool
from .launch_tool import LaunchTool

__all__ = ["ApiUrlTool", "ConfigTool", "DbConfigTool", "LaunchTool"]
