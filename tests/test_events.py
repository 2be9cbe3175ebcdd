"""Tests for one-shot event channels."""

from grid_snake.events import Channel, GameOverEvent, GameOverReason, GrowthEvent


class TestChannel:
    def test_starts_empty(self):
        channel: Channel[GrowthEvent] = Channel()
        assert len(channel) == 0
        assert not channel

    def test_drain_returns_in_order_and_empties(self):
        channel: Channel[GameOverEvent] = Channel()
        channel.send(GameOverEvent(GameOverReason.WALL))
        channel.send(GameOverEvent(GameOverReason.SELF))
        events = channel.drain()
        assert [e.reason for e in events] == [
            GameOverReason.WALL, GameOverReason.SELF,
        ]
        assert channel.drain() == []

    def test_clear(self):
        channel: Channel[GrowthEvent] = Channel()
        channel.send(GrowthEvent())
        channel.clear()
        assert not channel
