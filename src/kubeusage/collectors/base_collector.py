"""
This module defines the abstract base class for all collectors.
Each collector reads one kind of object from the Kubernetes API and returns
kubeusage models, so the reporting logic never depends on client types.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseCollector(ABC):
    """
    Abstract Base Class for all cluster collectors.
    """

    def __init__(self, api_client):
        self._api_client = api_client

    @abstractmethod
    async def collect(self, *args, **kwargs) -> Any:
        """
        The main method for a collector. It should fetch data from the
        Kubernetes API, parse it, and return Pydantic models.
        """
        pass
