from __future__ import annotations

import logging

from edge_daemon.config import ConfigLoadRequest, YamlConfigLoader
from edge_daemon.docker import DockerConfig
from edge_daemon.logging import init_logging


def main() -> None:
    init_logging(level="DEBUG")
    settings = YamlConfigLoader(DockerConfig).load(ConfigLoadRequest(path="examples/config.yaml"))

    logger = logging.getLogger("smoke")
    logger.info("Config loaded provisioning=%s", settings.provisioning.source)
    logger.info("Runtime image=%s docker_uri=%s", settings.runtime.config.image, settings.docker_uri)


if __name__ == "__main__":
    main()
