from __future__ import annotations

import logging

CLIENT_LOGGER = "realm_client"


def setup_logging(verbose: bool) -> None:
    """Failed API calls are logged at INFO by realm_client; show them only with -v."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(CLIENT_LOGGER).setLevel(logging.INFO if verbose else logging.WARNING)

    # request lines from httpx only at debug verbosity
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
