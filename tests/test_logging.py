import logging

import httpx
import pytest
import respx
from httpx import Response
from greenhouse_ingestion import (
    IngestionClient,
    LogfmtFormatter,
    TransportError,
    setup_logging,
)


@pytest.fixture
def client():
    return IngestionClient.with_token("secret-token", base_url="https://mock-gh.test/")


@pytest.mark.asyncio
@respx.mock
async def test_request_is_logged(client, caplog):
    caplog.set_level(logging.DEBUG, logger="greenhouse_ingestion.client")
    respx.get("https://mock-gh.test/v1/partner/jobs").mock(
        return_value=Response(200, json=[])
    )

    async with client:
        await client.jobs.list()

    record = next(r for r in caplog.records if r.getMessage() == "ingestion.request")
    assert record.method == "GET"
    assert record.status == 200
    assert record.resource == "jobs"
    assert record.url == "https://mock-gh.test/v1/partner/jobs"
    assert record.duration_ms >= 0
    assert "secret-token" not in caplog.text


@pytest.mark.asyncio
@respx.mock
async def test_transport_error_is_logged(client, caplog):
    caplog.set_level(logging.WARNING, logger="greenhouse_ingestion.client")
    respx.get("https://mock-gh.test/v1/partner/jobs").mock(
        side_effect=httpx.ConnectTimeout("slow")
    )

    async with client:
        with pytest.raises(TransportError):
            await client.jobs.list()

    record = next(
        r for r in caplog.records if r.getMessage() == "ingestion.transport_error"
    )
    assert record.levelno == logging.WARNING
    assert record.resource == "jobs"


def test_logfmt_formatter_renders_extras():
    record = logging.LogRecord(
        name="greenhouse_ingestion.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="ingestion.request",
        args=(),
        exc_info=None,
    )
    record.method = "GET"
    record.status = 200
    record.url = "https://mock-gh.test/v1/partner/jobs?x=a b"

    line = LogfmtFormatter().format(record)

    assert line.startswith("level=debug logger=greenhouse_ingestion.client")
    assert "event=ingestion.request" in line
    assert "method=GET" in line
    assert "status=200" in line
    assert 'url="https://mock-gh.test/v1/partner/jobs?x=a b"' in line
    assert "duration_ms" not in line


def test_setup_logging_configures_package_logger_once():
    root_handlers = list(logging.getLogger().handlers)

    log = setup_logging("debug")
    log = setup_logging("debug")

    ours = [h for h in log.handlers if isinstance(h.formatter, LogfmtFormatter)]
    assert log.name == "greenhouse_ingestion"
    assert log.level == logging.DEBUG
    assert len(ours) == 1
    assert logging.getLogger().handlers == root_handlers

    for h in ours:
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)
