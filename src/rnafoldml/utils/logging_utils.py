import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime

from tqdm import tqdm

# Log files land here unless a path or directory is given.
DEFAULT_LOG_DIR = Path("var/log")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# CLI verbosity count -> level; counts above 2 are clamped to DEBUG.
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


class TqdmStreamHandler(logging.StreamHandler):
    """
    Stream handler that writes through `tqdm.write`.

    Log lines emitted while a DP progress bar is active are printed above the
    bar instead of breaking it.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
            self.flush()
        except Exception:
            self.handleError(record)


def verbosity_to_level(verbose_level: int) -> int:
    """Maps a `-v` count to a logging level."""
    return VERBOSITY_LEVELS[max(0, min(verbose_level, 2))]


def get_log_file_path(
        module_name: str,
        log_dir: Optional[Path] = None,
        include_timestamp: bool = True
) -> Path:
    """
    Builds the path of a per-logger log file and creates its directory.

    Dots in the logger name become underscores, so
    `rnafoldml.folding.akutsu` logs to `rnafoldml_folding_akutsu_<stamp>.log`.

    Parameters
    ----------
    module_name : str
        The logger name.
    log_dir : Optional[Path], optional
        Target directory, `DEFAULT_LOG_DIR` when omitted.
    include_timestamp : bool, optional
        Append `_%Y%m%d_%H%M%S` to the file stem so successive runs do not
        share a file. True by default.

    Returns
    -------
    Path
        The log file path; the file itself is not created.
    """
    directory = DEFAULT_LOG_DIR if log_dir is None else log_dir
    directory.mkdir(parents=True, exist_ok=True)

    stem = module_name.replace(".", "_")
    if include_timestamp:
        stem = f"{stem}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    return directory / f"{stem}.log"


def _file_handler(path: Path) -> logging.FileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode='a', encoding='utf-8')


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = True,
    enable_tqdm: bool = True,
) -> logging.Logger:
    """
    Attaches a stdout handler, and optionally a file handler, to logger `name`.

    Any handlers already on the logger are removed first, so calling this
    once per CLI invocation never duplicates output. Both handlers share
    `LOG_FORMAT` and the logger's level.

    Parameters
    ----------
    name : str
        Logger name, usually a package such as `rnafoldml.folding`.
    level : int, optional
        Level for the logger and its handlers. `logging.INFO` by default.
    log_file : Optional[str], optional
        Explicit log file. Several loggers may share one file; records are appended.
    log_dir : Optional[Path], optional
        Directory for the automatic, timestamped log file used when no
        `log_file` is given.
    enable_file_logging : bool, optional
        Create the automatic log file when `log_file` is None. True by default.
    enable_tqdm : bool, optional
        Send console records through `tqdm.write`. True by default.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_cls = TqdmStreamHandler if enable_tqdm else logging.StreamHandler
    handlers = [console_cls(sys.stdout)]

    auto_path = None
    if log_file:
        handlers.append(_file_handler(Path(log_file)))
    elif enable_file_logging:
        auto_path = get_log_file_path(name, log_dir=log_dir)
        handlers.append(_file_handler(auto_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)

    if auto_path is not None:
        logger.info(f"Logging to file: {auto_path}")

    return logger


def set_log_level(logger: logging.Logger, level: int) -> None:
    """Changes the level of `logger` and of every handler attached to it."""
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
