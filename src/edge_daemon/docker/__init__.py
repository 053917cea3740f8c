"""Docker engine specific workload configuration."""

from edge_daemon.docker.config import DockerAuthConfig, DockerConfig

__all__ = ["DockerAuthConfig", "DockerConfig"]
