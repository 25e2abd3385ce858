import logging
import sys

from julaaz.cli import main
from julaaz.utils import setup_logging

setup_logging(level=logging.INFO, log_file="logs/app.log")

if __name__ == "__main__":
    sys.exit(main())
