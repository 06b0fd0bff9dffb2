"""Tests for classifying perceived units into attitudes."""

from taiga.ai.attitudes import (
    PROLIFERATING,
    Attitude,
    classify,
    classify_positions,
    good_partner,
)
from taiga.entities import Pregnancy, Sex
from taiga.geo import Position


class TestClassify:
    """Test single-unit classification."""

    def test_wolf_is_a_threat_to_rabbits(self, zoo):
        rabbit = zoo.create_rabbit(Position(0, 0))
        wolf = zoo.wolf_unit(Position(2, 0))
        assert classify(rabbit, wolf, eats_prey=False) == {Attitude.THREAT}

    def test_rabbit_is_food_to_wolves(self, zoo):
        wolf = zoo.create_wolf(Position(0, 0))
        rabbit = zoo.rabbit_unit(Position(2, 0))
        assert classify(wolf, rabbit, eats_prey=True) == {Attitude.FOOD_SOURCE}

    def test_prey_ignored_when_observer_does_not_hunt(self, zoo):
        wolf = zoo.create_wolf(Position(0, 0))
        rabbit = zoo.rabbit_unit(Position(2, 0))
        assert classify(wolf, rabbit, eats_prey=False) == frozenset()

    def test_adult_of_opposite_sex_is_a_mate(self, zoo):
        me = zoo.create_rabbit(Position(0, 0), sex=Sex.FEMALE)
        other = zoo.rabbit_unit(Position(1, 0), sex=Sex.MALE)
        assert classify(me, other, eats_prey=False) == {Attitude.MATE}

    def test_same_sex_kin_is_a_rival(self, zoo):
        me = zoo.create_wolf(Position(0, 0), sex=Sex.MALE)
        other = zoo.wolf_unit(Position(1, 0), sex=Sex.MALE)
        assert classify(me, other, eats_prey=True) == {Attitude.RIVAL}

    def test_juvenile_kin_is_a_rival(self, zoo):
        me = zoo.create_wolf(Position(0, 0), sex=Sex.MALE)
        cub = zoo.wolf_unit(Position(1, 0), sex=Sex.FEMALE, adult=False)
        assert classify(me, cub, eats_prey=True) == {Attitude.RIVAL}

    def test_pregnancy_on_either_side_makes_a_rival(self, zoo):
        me = zoo.create_rabbit(Position(0, 0), sex=Sex.FEMALE, pregnancy=Pregnancy(0.5))
        male = zoo.rabbit_unit(Position(1, 0), sex=Sex.MALE)
        assert not good_partner(me, male)
        assert classify(me, male, eats_prey=False) == {Attitude.RIVAL}

        me = zoo.create_rabbit(Position(0, 0), sex=Sex.MALE)
        pregnant = zoo.rabbit_unit(Position(1, 0), sex=Sex.FEMALE, pregnancy=Pregnancy(0.1))
        assert classify(me, pregnant, eats_prey=False) == {Attitude.RIVAL}


class TestClassifyPositions:
    """Test grouping classified units by position."""

    def test_attitudes_union_per_position(self, zoo):
        me = zoo.create_rabbit(Position(0, 0), sex=Sex.FEMALE)
        shared = Position(3, 3)
        units = [
            zoo.wolf_unit(shared),
            zoo.rabbit_unit(shared, sex=Sex.MALE),
            zoo.rabbit_unit(Position(1, 1), sex=Sex.FEMALE),
        ]
        result = classify_positions(me, units, eats_prey=False)
        assert result == {
            shared: {Attitude.THREAT, Attitude.MATE},
            Position(1, 1): {Attitude.RIVAL},
        }

    def test_unclassified_units_are_left_out(self, zoo):
        wolf = zoo.create_wolf(Position(0, 0))
        result = classify_positions(wolf, [zoo.rabbit_unit(Position(1, 1))], eats_prey=False)
        assert result == {}

    def test_observer_itself_is_skipped(self, zoo):
        me = zoo.create_rabbit(Position(2, 2))
        assert classify_positions(me, [me.as_unit()], eats_prey=False) == {}


def test_only_threat_and_rival_proliferate():
    assert PROLIFERATING == {Attitude.THREAT, Attitude.RIVAL}
