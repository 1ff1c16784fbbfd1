import logging

ROOT_LOGGER = "sshkeys"


def get_logger(name=ROOT_LOGGER, level=None):
    """
    Logger under the ``sshkeys`` namespace.

    The package never prints: the namespace root only carries a NullHandler,
    and output appears once the host application configures logging.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.addHandler(logging.NullHandler())

    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
