#!/usr/bin/env python3
"""
Module: errors
Created: 2026-10-18T10:20:05+01:00
Project: strain_api
Template: exceptions
"""

from typing import Optional


class StrainAPIError(Exception):
    """
    Base error for every failure the client surfaces.

    ``context`` names what the operation was fetching and is prefixed
    to the message, e.g. "Problem getting flavors for strain with ID 7".
    """

    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class StrainAPIConnectionError(StrainAPIError):
    """Connection, DNS or TLS problem before a response came back"""


class StrainAPIStatusError(StrainAPIError):
    """Any response other than 200 OK"""

    def __init__(self, status_code: int, body: str, context: Optional[str] = None):
        super().__init__(f"Status: {status_code} - {body}", context)
        self.status_code = status_code
        self.body = body


class StrainAPIDecodeError(StrainAPIError):
    """Body was not valid JSON or did not match the expected shape"""


class DescriptionNotFoundError(StrainAPIDecodeError):
    pass
