#!/usr/bin/env python3
"""
Module: logging_setup
Created: 2026-10-18T10:50:31+01:00
Project: strain_api
Template: script
"""
import logging

LOGGER_NAME = "strain_api"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Send the client's request/failure logs to stderr.

    The library never calls this itself; applications opt in. Calling it
    again only changes the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
