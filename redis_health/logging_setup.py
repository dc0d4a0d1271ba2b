import logging, sys

from .config import get_config

def setup_logging(level_name=None):
    level_name = level_name or get_config().LOG_LEVEL
    level = getattr(logging, level_name.upper(), logging.INFO)

    # Log to stdout (captured by Lambda / CloudWatch)
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(logging.Formatter('%(asctime)s | %(levelname)s | %(name)s | %(message)s'))
    root.addHandler(sh)

    # Tidy / tune levels regardless of backend
    logging.captureWarnings(True)
    for noisy in ("botocore", "boto3", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("redis_health").setLevel(level)
