"""Tests for structured logging."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import capture_logs

from textquest.core.logging import bind_context, clear_context, configure_logging, get_logger
from textquest.models import Entity, Item, helmet


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def restore_structlog() -> Generator[None, None, None]:
    """Put structlog back to its defaults after a test configures it."""
    yield
    clear_context()
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_structlog")
    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that JSON lines carry the event and the app tag."""
        configure_logging(level="DEBUG", json_format=True)

        get_logger("test").info("Item equipped", entity="Hero", item="Hammer")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["event"] == "Item equipped"
        assert entry["entity"] == "Hero"
        assert entry["app"] == "textquest"
        assert entry["level"] == "info"

    @pytest.mark.usefixtures("restore_structlog")
    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that events below the level are dropped."""
        configure_logging(level="WARNING", json_format=True)

        get_logger("test").debug("Hidden")

        assert "Hidden" not in capsys.readouterr().err

    @pytest.mark.usefixtures("restore_structlog")
    def test_bound_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that bound context appears on every entry."""
        configure_logging(level="INFO", json_format=True)
        bind_context(session="farm-run")

        get_logger("test").info("Rewards granted")

        entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert entry["session"] == "farm-run"


class TestEntityEvents:
    """Tests for events emitted by entity operations."""

    def test_equip_logged(self) -> None:
        """Test that equipping logs the slot."""
        entity = Entity(name="Hero")
        entity.add_item(helmet(defense=2))

        with capture_logs() as logs:
            entity.equip_item("Helmet")

        equipped = [log for log in logs if log["event"] == "Item equipped"]
        assert equipped[0]["entity"] == "Hero"
        assert equipped[0]["slot"] == "helmet"

    def test_rejection_logged_at_info(self) -> None:
        """Test that rejections are logged at info level."""
        entity = Entity()
        entity.add_item(Item(name="Stone"))

        with capture_logs() as logs:
            entity.equip_item("Stone")

        assert [log["log_level"] for log in logs if log["event"] == "Equip rejected"] == ["info"]

    def test_rewards_logged_without_hook(self) -> None:
        """Test that rewards fall back to the log."""
        with capture_logs() as logs:
            Entity().add_rewards(7)

        rewards = [log for log in logs if log["event"] == "Rewards granted"]
        assert rewards[0]["gold"] == 7
        assert rewards[0]["item"] is None
