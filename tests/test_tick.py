"""Tests for deciding a whole tick of agents."""

import random

import pytest

from taiga.ai import RegularRabbitAI, RegularWolfAI, RemoteAI
from taiga.config.decision_config import DecisionConfig
from taiga.entities import Cell, Grass
from taiga.exceptions import InvalidVisibilityError
from taiga.geo import Direction, Position
from taiga.tick import Decision, DecisionRequest, TickDecider, decide
from taiga.visibility import Visibility


def _requests(zoo, open_field):
    wolf = zoo.create_wolf(Position(0, 0), health_part=0.2)
    rabbit = zoo.create_rabbit(Position(4, 4), health_part=0.2)
    sleeper = zoo.create_rabbit(Position(2, 2))

    wolf_view = open_field(5, 5, [rabbit.as_unit()])
    rabbit_view = open_field(5, 5, [wolf.as_unit()], grass={Position(4, 4): Grass(5, 5)})
    return [
        DecisionRequest(RegularWolfAI(rng=random.Random(1)), wolf, wolf_view),
        DecisionRequest(RegularRabbitAI(rng=random.Random(2)), rabbit, rabbit_view),
        DecisionRequest(RemoteAI(), sleeper, Visibility.empty(5, 5)),
    ]


def test_decide_single_agent(zoo, open_field):
    request = _requests(zoo, open_field)[0]
    decision = decide(request)
    assert decision == Decision(
        unit_id=request.agent.unit_id,
        direction=Direction.SE,
        food=request.visibility.visible_units[0],
    )


@pytest.mark.parametrize("workers", [1, 4])
def test_decisions_returned_in_request_order(zoo, open_field, workers):
    requests = _requests(zoo, open_field)
    decisions = TickDecider(DecisionConfig(max_workers=workers)).decide_all(requests)

    assert [d.unit_id for d in decisions] == [r.agent.unit_id for r in requests]
    wolf_decision, rabbit_decision, sleeper_decision = decisions
    assert wolf_decision.direction is Direction.SE
    # Grown grass underfoot outweighs the distant wolf: eat and stay.
    assert rabbit_decision.food == Grass(5, 5)
    assert rabbit_decision.direction is None
    assert sleeper_decision == Decision(sleeper_decision.unit_id, None, None)


def test_deciding_does_not_touch_snapshots(zoo, open_field):
    requests = _requests(zoo, open_field)
    before = [r.visibility for r in requests]
    TickDecider(DecisionConfig(max_workers=2)).decide_all(requests)
    assert [r.visibility for r in requests] == before


def test_empty_tick():
    assert TickDecider().decide_all([]) == []


def test_engine_errors_propagate(zoo):
    rabbit = zoo.create_rabbit(Position(0, 0))
    bad = Visibility.of([Cell(Position(9, 9))], [], 3, 3)
    requests = [DecisionRequest(RegularRabbitAI(), rabbit, bad)] * 2
    with pytest.raises(InvalidVisibilityError):
        TickDecider(DecisionConfig(max_workers=2)).decide_all(requests)
