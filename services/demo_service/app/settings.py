"""demo-service configuration.

Values come from `DEMO_*` environment variables or the `demo:` section of the
mounted `application.yml` (ConfigMap `demo-config`), e.g.:

    demo:
      message: "Welcome to the platform!"
"""

from demo_common.settings import ServerSettings


class DemoServiceSettings(ServerSettings):
    """Settings for the message service."""

    port: int = 8080
    # A message to welcome users. Served verbatim on `GET /`.
    message: str = ""
