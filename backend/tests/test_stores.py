"""Tests for the in-memory team and opportunity stores."""

import pytest

from models.schemas.opportunity import Opportunity
from models.schemas.team import Team
from services.demo_data import DEMO_OPPORTUNITIES, DEMO_TEAMS, seed_stores
from services.stores import InMemoryOpportunityStore, InMemoryTeamStore, TeamStore


class TestInMemoryTeamStore:
    def test_is_a_team_store(self):
        assert isinstance(InMemoryTeamStore(), TeamStore)

    def test_add_assigns_id(self):
        store = InMemoryTeamStore()
        team = store.add(Team(name="Quant Desk"))
        assert team.id
        assert store.get(team.id) == team

    def test_add_keeps_given_id(self):
        store = InMemoryTeamStore()
        assert store.add(Team(id="t1")).id == "t1"

    def test_duplicate_id_rejected(self):
        store = InMemoryTeamStore([Team(id="t1")])
        with pytest.raises(ValueError):
            store.add(Team(id="t1"))

    def test_get_missing_returns_none(self):
        assert InMemoryTeamStore().get("missing") is None

    def test_list_preserves_insertion_order(self):
        store = InMemoryTeamStore([Team(id="b"), Team(id="a"), Team(id="c")])
        assert [t.id for t in store.list()] == ["b", "a", "c"]
        assert len(store) == 3

    def test_update_replaces_and_keeps_id(self):
        store = InMemoryTeamStore([Team(id="t1", size=3)])
        updated = store.update("t1", Team(id="other", size=5))
        assert updated.id == "t1"
        assert store.get("t1").size == 5
        assert store.get("other") is None

    def test_update_missing(self):
        with pytest.raises(KeyError):
            InMemoryTeamStore().update("t1", Team())

    def test_delete(self):
        store = InMemoryTeamStore([Team(id="t1")])
        store.delete("t1")
        assert store.get("t1") is None
        with pytest.raises(KeyError):
            store.delete("t1")


class TestInMemoryOpportunityStore:
    def test_round_trip(self):
        store = InMemoryOpportunityStore()
        opp = store.add(Opportunity(title="Fintech ML Team"))
        assert store.get(opp.id).title == "Fintech ML Team"


class TestDemoData:
    def test_seed_stores(self):
        teams, opportunities = InMemoryTeamStore(), InMemoryOpportunityStore()
        seed_stores(teams, opportunities)
        assert len(teams) == len(DEMO_TEAMS)
        assert len(opportunities) == len(DEMO_OPPORTUNITIES)
        assert teams.get("team_quant_nyc").industry == "Financial Services"
