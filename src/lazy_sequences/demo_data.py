"""Generate fake requests using Faker library."""

import logging
from typing import Iterator

from faker import Faker

from .client_ip import API_GATEWAY_HEADER, CLOUDFLARE_HEADER, Request, sign_gateway_ip

logger = logging.getLogger(__name__)


class RequestFactory:
    """Generate fake requests that exercise each branch of IP detection."""

    def __init__(self, secret: str, seed: int = 42):
        """Initialize the request factory.

        Args:
            secret: Shared secret used to sign gateway headers
            seed: Random seed for reproducibility
        """
        self.secret = secret
        self.faker = Faker()
        self.faker.seed_instance(seed)

    def via_gateway(self) -> Request:
        """Request carrying a correctly signed gateway header."""
        client_ip = self.faker.ipv4_public()
        return Request(
            headers={
                API_GATEWAY_HEADER: sign_gateway_ip(client_ip, self.secret),
                CLOUDFLARE_HEADER: self.faker.ipv4_public(),
            },
            ip=self.faker.ipv4_private(),
        )

    def via_cloudflare(self) -> Request:
        """Request with a forged gateway header and a Cloudflare header."""
        return Request(
            headers={
                API_GATEWAY_HEADER: f"{self.faker.ipv4_public()};{self.faker.sha256()}",
                CLOUDFLARE_HEADER: self.faker.ipv4_public(),
            },
            ip=self.faker.ipv4_private(),
        )

    def direct(self) -> Request:
        """Request without proxy headers."""
        return Request(headers={}, ip=self.faker.ipv4())

    def anonymous(self) -> Request:
        """Request from which no IP can be determined."""
        return Request(headers={CLOUDFLARE_HEADER: "unknown"}, ip=None)

    def requests(self) -> Iterator[Request]:
        """Generator yielding one request of each kind."""
        logger.debug("Generating one request per IP detection branch")
        yield self.via_gateway()
        yield self.via_cloudflare()
        yield self.direct()
        yield self.anonymous()
