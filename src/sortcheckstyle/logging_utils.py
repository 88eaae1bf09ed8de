import logging

PACKAGE_LOGGER = 'sortcheckstyle'


class CustomFormatter(logging.Formatter):
    """Custom formatter to remove the project name from the logger name."""

    def format(self, record):
        if record.name.startswith(PACKAGE_LOGGER):
            record.name = record.name[len(PACKAGE_LOGGER):]
            if record.name.startswith('.'):
                record.name = record.name[1:]
        return super().format(record)


def setup_logging(verbose: bool):
    """Set up logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    formatter = CustomFormatter('%(levelname)s:%(name)s:%(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    # Repeated calls (tests, embedding) must not stack handlers
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    # Prevent propagation to the root logger to avoid duplicate messages
    package_logger.propagate = False

    logging.getLogger('urllib3').setLevel(logging.WARNING)
