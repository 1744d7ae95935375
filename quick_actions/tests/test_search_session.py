"""Tests for last-request-wins searching."""

import asyncio

from quick_actions.services.ranker import search
from quick_actions.services.search_session import SearchSession


class TestSearchSession:
    """Superseded searches never deliver results."""

    def test_search_returns_hits(self, scenario_index):
        session = SearchSession(scenario_index)
        hits = asyncio.run(session.search("sa"))
        assert [hit.command.title for hit in hits] == ["Save As…"]

    def test_newer_query_supersedes_older(self, scenario_index):
        session = SearchSession(scenario_index)

        async def scenario():
            first = asyncio.create_task(session.search("sa"))
            second = asyncio.create_task(session.search("fn"))
            return await first, await second

        first, second = asyncio.run(scenario())

        assert first is None
        assert [hit.command.title for hit in second] == ["Find Next"]

    def test_cancel_drops_in_flight_results(self, scenario_index):
        session = SearchSession(scenario_index)

        async def scenario():
            task = asyncio.create_task(session.search("sa"))
            await asyncio.sleep(0)
            session.cancel()
            return await task

        assert asyncio.run(scenario()) is None

    def test_large_index_is_searched_in_thread(self, scenario_index):
        session = SearchSession(scenario_index, offload_threshold=0)
        hits = asyncio.run(session.search("fn"))
        assert hits == search(scenario_index, "fn")

    def test_snapshot_is_immutable(self, scenario_index):
        session = SearchSession(scenario_index)
        scenario_index.clear()
        assert len(session.commands) == 3

    def test_empty_query(self, scenario_index):
        session = SearchSession(scenario_index)
        assert asyncio.run(session.search("")) == []
