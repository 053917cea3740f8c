from __future__ import annotations

from typing import Protocol, TypeVar

from edge_daemon.config.models import ConfigLoadRequest, Settings

ConfigT_co = TypeVar("ConfigT_co", covariant=True)


class ConfigLoader(Protocol[ConfigT_co]):
    """
    Loads the effective daemon settings.

    Implementations merge the optional file over the embedded defaults, decode the result and
    raise ConfigurationError on any failure. A partially populated Settings is never returned.
    """

    def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> Settings[ConfigT_co]:
        ...
