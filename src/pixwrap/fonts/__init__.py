from .common import TEST_FONT_ID, FontMetrics, FontMetricsTable
from .config import dump, from_dict, load, save
from .embed import from_truetype

__all__ = [
    "TEST_FONT_ID",
    "FontMetrics",
    "FontMetricsTable",
    "load",
    "from_dict",
    "dump",
    "save",
    "from_truetype",
]
