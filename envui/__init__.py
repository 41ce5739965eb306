from importlib import resources

from .core import EnvironmentEntry, read_environment_variables, filter_environment_variables
from .errors import EnvuiError, EnvironmentReadError, TableRenderError, ConfigError, ExitCode

try:
    from .__version__ import __version__
except ImportError:
    from importlib.metadata import version
    __version__ = version(__package__)

__respkg__ = f'{__package__}.res'
__respath__ = resources.files(__respkg__)
__pkgpath__ = resources.files(__package__)
