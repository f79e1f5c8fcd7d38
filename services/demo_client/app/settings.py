"""demo-client configuration.

Values come from `DEMO_*` environment variables (the Kubernetes deployment
sets `DEMO_SERVICE_URL=http://demo-service`) or the `demo:` section of the
mounted `application.yml` (ConfigMap `demo-client-config`), e.g.:

    demo:
      service-url: http://demo-service
      request-timeout: 5
"""

from pydantic import AnyHttpUrl, Field

from demo_common.settings import ServerSettings


class DemoClientSettings(ServerSettings):
    """Settings for the relay service."""

    port: int = 8181
    # The URL of the demo service.
    service_url: AnyHttpUrl = "http://localhost:8080"
    # Total deadline, in seconds, for one outbound call including the body read.
    request_timeout: float = Field(default=5.0, gt=0)
