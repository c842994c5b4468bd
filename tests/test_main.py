"""
Tests for the fetch, parse and notify pipeline.
"""

from unittest.mock import Mock, patch

import pytest

from feedwatch.config.settings import Config
from feedwatch.crawlers import HttpStatusError
from feedwatch.main import run_agent
from feedwatch.notify import BaseNotifier
from feedwatch.parsers import TokenizerError


FEED = (
    "<rss><channel>"
    "<item><title>A</title><description>first</description></item>"
    "<item><title>B</title><description>second</description></item>"
    "</channel></rss>"
)


def make_session(status_code=200, text=FEED):
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.headers = {"Content-Type": "application/rss+xml; charset=utf-8"}
    session = Mock()
    session.headers = {}
    session.get.return_value = response
    return session


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("feedwatch.retry.time.sleep"):
        yield


@pytest.fixture
def config():
    return Config(target_url="https://lwn.net/headlines/rss", crawl_mode="rss")


class TestRunAgent:
    """Test run_agent end to end with mocked HTTP."""

    def test_notifies_each_item(self, config):
        """Test the notifier receives every parsed item in order."""
        notifier = Mock(spec=BaseNotifier)

        records = run_agent(config, notifier=notifier, session=make_session())

        assert [r.title for r in records] == ["A", "B"]
        notifier.send.assert_called_once_with(records)

    def test_default_notifier_logs(self, config, caplog):
        """Test the configured notifier is used when none is given."""
        config.notify_log = True
        config.notify_console = False

        with caplog.at_level("INFO"):
            run_agent(config, session=make_session())

        assert "A: first" in caplog.messages
        assert "B: second" in caplog.messages

    def test_fetch_failure_propagates(self, config, caplog):
        """Test retrieval errors are logged and re-raised without notifying."""
        notifier = Mock(spec=BaseNotifier)

        with pytest.raises(HttpStatusError):
            run_agent(config, notifier=notifier, session=make_session(status_code=404))

        notifier.send.assert_not_called()
        assert "Crawl failed" in caplog.text

    def test_parse_failure_propagates(self, config):
        """Test a malformed feed yields no notifications."""
        notifier = Mock(spec=BaseNotifier)

        with pytest.raises(TokenizerError):
            run_agent(config, notifier=notifier, session=make_session(text="<rss><item>"))

        notifier.send.assert_not_called()

    def test_empty_feed(self, config):
        """Test an empty feed still reaches the notifier."""
        notifier = Mock(spec=BaseNotifier)

        records = run_agent(config, notifier=notifier, session=make_session(text="<rss/>"))

        assert records == []
        notifier.send.assert_called_once_with([])
