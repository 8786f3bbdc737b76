from loguru import logger as base_logger
from pathlib import Path

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> - <level>{level}</level>: <b>[{extra[context]}]</b> {message}"

_file_sinks: dict[Path, int] = {}


def _register_level(name: str, color: str) -> None:
    try:
        base_logger.level(name)
    except ValueError:
        base_logger.level(name, no=20, color=color)


def _own_records(record) -> bool:
    return "context" in record["extra"]


_register_level("IN", "<yellow>")
_register_level("OUT", "<cyan>")

logger = base_logger.bind(context="DEFAULT")


def configure_logging(log_file: str | None = None) -> None:
    """Adds a sink for this library's records. Sinks the application set up are left alone."""
    if log_file is None:
        return
    path = Path(log_file)
    if path in _file_sinks:
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    _file_sinks[path] = base_logger.add(path, format=LOG_FORMAT, filter=_own_records, colorize=False)
