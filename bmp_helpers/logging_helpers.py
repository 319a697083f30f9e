import logging

import coloredlogs

LOGGER_NAME = "bitmap"


def initialise_logging(level=logging.INFO):
    """
    Sets up coloured console logging for the codec. The library itself never
    configures logging; applications call this once at start-up.

    :param level: Level for the codec's logger
    :return: The configured logger
    """
    logging.basicConfig(format='%(asctime)s.%(msecs)03d %(name)s %(levelname)s %(message)s', datefmt='%F %H:%M:%S',
                        level=logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    coloredlogs.install(level=level, logger=logger)
    logger.debug("Logging initialised at level {}".format(logging.getLevelName(level)))
    return logger
