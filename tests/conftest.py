import httpx
import pytest

from ea_datagrabber.client import DataGrabberClient
from ea_datagrabber.config import ListingConfig

LISTING_URL = "https://example.blob.core.windows.net/publicdata"


def listing_page(urls, next_marker=""):
    """Build a listing XML page holding ``urls`` and the given marker."""
    blobs = "".join(
        f"<Blob><Name>{url}</Name><Url>{url}</Url>"
        f"<Properties><Last-Modified>Tue, 12 Jan 2023 10:15:00 GMT</Last-Modified></Properties>"
        f"</Blob>"
        for url in urls
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<EnumerationResults ContainerName="{LISTING_URL}">'
        f"<Blobs>{blobs}</Blobs><NextMarker>{next_marker}</NextMarker>"
        "</EnumerationResults>"
    )


@pytest.fixture
def settings():
    return ListingConfig(
        listing_url=LISTING_URL,
        datasets_url=f"{LISTING_URL}/Datasets",
    )


@pytest.fixture
def make_client(settings):
    """Factory for a client whose requests go to ``handler``."""
    clients = []

    def factory(handler, **overrides):
        config = settings.model_copy(update=overrides)
        client = DataGrabberClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def page():
    return listing_page
