import logging

from .entry import ResultEntry as ResultEntry
from .errors import CharfreqError as CharfreqError
from .errors import DecodeError as DecodeError
from .errors import InvalidOption as InvalidOption
from .options import Options as Options
from .options import SortBy as SortBy
from .pipeline import analyze as analyze
from .pipeline import render as render
from .tally import decode as decode
from .tally import tally as tally

logging.basicConfig(
    format="[%(asctime)s] %(message)s",
    level=logging.WARNING,
)
logging.captureWarnings(capture=True)
logger = logging.getLogger(__name__)
