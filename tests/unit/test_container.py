import pytest

from seigate.config import Settings
from seigate.container import Container
from seigate.mcp.sessions import SessionRegistry
from seigate.tools.catalog import TOOLS_BY_NAME


@pytest.fixture()
async def container():
    container = Container()
    container.settings.override(Settings(_env_file=None, default_network="sei", history_scan_window=10))
    yield container
    await container.http_client().aclose()
    await container.llm().aclose()
    container.unwire()


class TestContainer:
    async def test_dispatcher_covers_catalog(self, container):
        assert set(container.dispatcher().tool_names) == set(TOOLS_BY_NAME)

    async def test_singletons(self, container):
        assert container.chain_clients() is container.chain_clients()
        assert isinstance(container.sessions(), SessionRegistry)
        assert container.sessions() is container.sessions()

    async def test_settings_flow_through(self, container):
        assert container.network_registry().default_network == "sei"
        assert container.mcp_server().name == "seigate"
