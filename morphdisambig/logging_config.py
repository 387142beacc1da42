import logging
import os
import sys
from datetime import datetime

from .config import LOG_FILE

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

# Longest context value written by log_with_context
CONTEXT_VALUE_LIMIT = 200


class TrainingProgress:
    """
    Logs how far a training pass over a disambiguated corpus has got.

    One line is written per 10% of the sentences, with the running word
    count and throughput, and close() writes the totals of the pass.
    """
    def __init__(self, total_sentences, desc="Training", logger=None):
        self.total = total_sentences
        self.desc = desc
        self.logger = logger or logging.getLogger(__name__)
        self.sentences = 0
        self.words = 0
        self.start_time = datetime.now()
        self.last_log_percent = 0

    def elapsed(self):
        return (datetime.now() - self.start_time).total_seconds()

    def update(self, sentence):
        """Count one sentence (a sequence of words) as trained."""
        self.sentences += 1
        self.words += len(sentence)
        percent = self.sentences * 100 // self.total if self.total > 0 else 100

        if percent - self.last_log_percent >= 10:
            elapsed = self.elapsed()
            rate = self.words / elapsed if elapsed > 0 else 0
            self.logger.info(
                f"{self.desc}: {self.sentences}/{self.total} sentences ({percent}%), "
                f"{self.words} words, {rate:.0f} words/s"
            )
            self.last_log_percent = percent

    def close(self):
        """Log the totals of the pass."""
        self.logger.info(
            f"{self.desc} finished: {self.sentences} sentences, {self.words} words "
            f"in {self.elapsed():.2f}s"
        )


def setup_logging(log_file=LOG_FILE, level=logging.INFO, debug=False, run_name=None):
    """
    Configure the root logger with a file handler and a stderr console handler.

    Args:
        log_file: Path to the log file; missing parent directories are created
        level: Logging level (default: INFO)
        debug: If True, switches to DEBUG and adds logger name and file/line
        run_name: Written into the run separator, e.g. the command and strategy
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if debug:
        level = logging.DEBUG
    formatter = logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT)

    log_dir = os.path.dirname(os.fspath(log_file))
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    # Decoded output goes to stdout
    console_handler = logging.StreamHandler(sys.stderr)
    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    started = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    logging.info("=" * 80)
    if run_name:
        logging.info(f"NEW RUN STARTED - {run_name} - {started}")
    else:
        logging.info(f"NEW RUN STARTED - {started}")
    if debug:
        logging.info("DEBUG MODE ENABLED - decoder scores and rule decisions are logged")
    logging.info("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message followed by one indented DEBUG line per context entry.

    Args:
        message: Main log message
        context: Dict of contextual information (candidate keys, scores, ...)
        level: Level of the main message (default: DEBUG)
        logger: Logger to write to; the root logger if omitted
    """
    logger = logger or logging.getLogger()
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            str_value = str(value)
            if len(str_value) > CONTEXT_VALUE_LIMIT:
                str_value = str_value[:CONTEXT_VALUE_LIMIT] + "..."
            logger.debug(f"  └─ {key}: {str_value}")
