import logging
import os
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(folder: str = "logs", prefix: str = "run", level=logging.INFO) -> str:
    """
    Sends log records to a new timestamped file inside ``folder``.

    Returns:
        str: Path of the log file.
    """
    os.makedirs(folder, exist_ok=True)
    log_filename = os.path.join(folder, f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    logging.basicConfig(
        filename=log_filename,
        filemode='w',  # overwrite if exists
        level=level,
        format=LOG_FORMAT
    )
    return log_filename
