"""Embedded default configuration documents, one per platform family."""

from __future__ import annotations

import sys

UNIX_DEFAULTS = """\
provisioning:
  source: manual
  device_connection_string: "HostName=something.some.com;DeviceId=some;SharedAccessKey=some"
runtime:
  name: edgeAgent
  type: docker
  env: {}
  config:
    image: "microsoft/azureiotedge-agent:1.0-preview"
    create_options: ""
    auth: {}
hostname: localhost
workload_uri: "http://0.0.0.0:8081"
management_uri: "http://0.0.0.0:8080"
docker_uri: "unix:///var/run/docker.sock"
"""

WINDOWS_DEFAULTS = """\
provisioning:
  source: manual
  device_connection_string: "HostName=something.some.com;DeviceId=some;SharedAccessKey=some"
runtime:
  name: edgeAgent
  type: docker
  env: {}
  config:
    image: "microsoft/azureiotedge-agent:1.0-preview"
    create_options: ""
    auth: {}
hostname: localhost
workload_uri: "http://0.0.0.0:8081"
management_uri: "http://0.0.0.0:8080"
docker_uri: "http://localhost:2375"
"""

if sys.platform == "win32":
    DEFAULTS = WINDOWS_DEFAULTS
else:
    DEFAULTS = UNIX_DEFAULTS


def default_document() -> str:
    return DEFAULTS
