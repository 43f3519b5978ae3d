# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel


class ServiceHealth(BaseModel):
    """Health status for a single service."""

    name: str
    status: str
