"""English readability statistics with reconciled syllable counts."""

from textstats.config import Settings
from textstats.core import AnalysisError, Result, analyse

__version__ = "0.3.0"

__all__ = ["AnalysisError", "Result", "Settings", "analyse", "__version__"]
