__version__ = "0.1.0"

from .classifier import classify, is_ignored  # noqa: E402
from .context import extract_context  # noqa: E402
from .errors import A11yError, EngineError, InjectionError, OptionsError  # noqa: E402
from .options import DEFAULTS, LogHooks, RunOptions, build_options, load_config  # noqa: E402
from .report_processor import process  # noqa: E402
from .selector import synthesize  # noqa: E402

__all__ = [
    "A11yError",
    "DEFAULTS",
    "EngineError",
    "InjectionError",
    "LogHooks",
    "OptionsError",
    "RunOptions",
    "build_options",
    "classify",
    "extract_context",
    "is_ignored",
    "load_config",
    "process",
    "synthesize",
]
