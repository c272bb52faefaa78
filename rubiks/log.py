import logging

LOGGER = logging.getLogger("rubiks")
