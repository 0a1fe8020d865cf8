import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Send the package's log records to stderr.

    verbose=True shows the solver's per-round DEBUG lines (which search branch
    was taken, candidate counts); otherwise only warnings and above.
    """
    root = logging.getLogger("mastermind")
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root.handlers = []
    root.addHandler(console_handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
    return root
