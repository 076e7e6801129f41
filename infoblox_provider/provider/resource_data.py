"""Host capability interface for resource configuration and identity."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple


class ResourceData(ABC):
    """What the engine needs from the plugin host.

    The host hands one of these to every lifecycle callback. It exposes the
    configuration snapshot, whether an option changed since the last apply,
    and the persisted identifier.
    """

    @abstractmethod
    def get(self, key: str) -> Any:
        """Configured value of ``key``, or its schema default."""
        pass

    @abstractmethod
    def get_ok(self, key: str) -> Tuple[Any, bool]:
        """Configured value of ``key`` and whether it was explicitly set."""
        pass

    @abstractmethod
    def has_change(self, key: str) -> bool:
        """Whether ``key`` differs from the previously applied configuration."""
        pass

    @property
    @abstractmethod
    def id(self) -> str:
        """Persisted identifier, empty if the resource does not exist yet."""
        pass

    @abstractmethod
    def set_id(self, value: str) -> None:
        """Persist ``value`` as the resource identifier."""
        pass


class DictResourceData(ResourceData):
    """ResourceData backed by plain dictionaries.

    Args:
        config: Options set in the current configuration
        prior: Options of the previously applied configuration
        resource_id: Persisted identifier
        defaults: Values returned for unset options
    """

    def __init__(
        self,
        config: Dict[str, Any],
        prior: Optional[Dict[str, Any]] = None,
        resource_id: str = "",
        defaults: Optional[Dict[str, Any]] = None,
    ):
        self.config = dict(config)
        self.prior = dict(prior) if prior is not None else None
        self._id = resource_id
        if defaults is None:
            # Imported here, schema depends on this module
            from .schema import schema_defaults
            defaults = schema_defaults()
        self.defaults = defaults

    def get(self, key: str) -> Any:
        value = self.config.get(key)
        if value is None:
            return self.defaults.get(key)
        return value

    def get_ok(self, key: str) -> Tuple[Any, bool]:
        value = self.get(key)
        is_set = self.config.get(key) is not None and value != self.defaults.get(key)
        return value, is_set

    def has_change(self, key: str) -> bool:
        if self.prior is None:
            return False
        return self.prior.get(key, self.defaults.get(key)) != self.get(key)

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value
