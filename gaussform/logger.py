import logging
import sys


logger = logging.getLogger("gaussform")
logger.setLevel(logging.DEBUG)

stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setLevel(logging.INFO)
stdout_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
logger.addHandler(stdout_handler)
