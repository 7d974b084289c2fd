import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
MAX_LOG_BYTES = 50 * 1024 * 1024
# Transport chatter from the SDKs' HTTP stack
MUTED_PREFIXES = ('httpx', 'httpcore')


class MuteTransportFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return not record.name.startswith(MUTED_PREFIXES)


def configure_logging(
    level: Union[int, str] = 'INFO',
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Attach stdout (and optionally rotating file) handlers to the root logger.
    Safe to call more than once; previously installed handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(root.handlers):
        if getattr(handler, '_chatbridge', False):
            root.removeHandler(handler)
            handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                path / 'chatbridge.log',
                maxBytes=MAX_LOG_BYTES,
                backupCount=100,
                encoding='utf-8',
            )
        )

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler._chatbridge = True
        handler.setFormatter(formatter)
        handler.addFilter(MuteTransportFilter())
        root.addHandler(handler)

    return root


def setup_logging(config=None) -> logging.Logger:
    """Configure logging from LOG_LEVEL / LOG_DIR settings."""
    if config is None:
        from chatbridge.settings import settings as config
    return configure_logging(config.LOG_LEVEL, config.LOG_DIR)
