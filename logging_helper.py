import logging

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
RESET = "\033[0m"
WHITE = "\033[97m"

STATUS_COLORS = {
    "error": RED,
    "warning": YELLOW,
    "good": GREEN,
}

logger = logging.getLogger("conduit_api")


def configure_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format='%(asctime)s.%(msecs)03d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def log_status(status, message, extra=""):
    color = STATUS_COLORS.get(status.lower(), WHITE)
    level = logging.ERROR if status.lower() == "error" else logging.INFO
    logger.log(level, f"{color}{message}{extra}{RESET}")
