from .main import run
from .parser import parse_args, ParsedArgs
from .result import CommandResult
