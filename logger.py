""" LOGGING
"""
import logging
#
# CONFIG
#
FORMAT = '%(asctime)-15s %(levelname)-7s %(name)s: %(message)s'
LOGGER_NAME = 'convex_hull'
logging.basicConfig(format=FORMAT)
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.WARNING)


#
# PUBLIC
#
def get_logger(name: str | None = None) -> logging.Logger:
    """
    Child of the project logger, e.g. `convex_hull.points_io`.
    """
    if not name:
        return logger
    return logger.getChild(name)


def set_level(level: str | int):
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
