"""
Verbose logging for registration and discovery
"""

import sys


class Logger:
    """Framework-internal logging, silent unless verbose mode is enabled"""

    DIM = "\033[2m"
    RESET = "\033[0m"

    _verbose = False

    @classmethod
    def set_verbose(cls, verbose: bool):
        cls._verbose = verbose

    @classmethod
    def verbose(cls, msg: str):
        if cls._verbose:
            sys.stdout.write(f"{cls.DIM}🔍 [SUITEKIT] {msg}{cls.RESET}\n")

    @classmethod
    def debug(cls, msg: str):
        """Debug output"""
        if cls._verbose:
            cls.verbose(f"DEBUG: {msg}")
