"""Tests for the Character record: construction, accessors, rename, release."""

import pytest

from gamechar.domain.character import Character
from gamechar.domain.errors import (
    CharacterReleasedError,
    CharacterValidationError,
    ErrorKind,
    InvalidAttackPower,
    InvalidHealth,
    InvalidName,
)
from gamechar.domain.roster import Roster, default_roster
from gamechar.domain.rules import CharacterLimits


class TestConstruction:
    def test_explicit(self, roster: Roster) -> None:
        leo = Character("Leonardo da Vinci", 1000, 20, roster=roster)
        assert leo.name == "Leonardo da Vinci"
        assert leo.health == 1000
        assert leo.attack_power == 20
        assert leo.personal_id == 0
        assert leo.to_string() == "Leonardo da Vinci 1000 20"

    def test_default(self, roster: Roster) -> None:
        npc = Character(roster=roster)
        assert npc.name == "Name"
        assert npc.health == -1
        assert npc.attack_power == 0
        assert npc.is_invincible
        assert str(npc) == "Name -1 0"

    def test_ids_increase_across_entry_points(self, roster: Roster) -> None:
        a = Character("Alpha", 5, 5, roster=roster)
        b = Character(roster=roster)
        c = Character("Gamma", 5, 5, roster=roster)
        assert [a.personal_id, b.personal_id, c.personal_id] == [0, 1, 2]

    @pytest.mark.parametrize(
        "args,error",
        [
            (("", 10, 10), InvalidName),
            (("jack", 10, 10), InvalidName),
            (("Jack", 0, 10), InvalidHealth),
            (("Jack", 1001, 10), InvalidHealth),
            (("Jack", 10, 501), InvalidAttackPower),
            (("jack", 0, 501), InvalidName),
        ],
    )
    def test_rejected_input_raises(
        self, roster: Roster, args: tuple[str, int, int], error: type[Exception]
    ) -> None:
        with pytest.raises(error):
            Character(*args, roster=roster)

    def test_failed_construction_consumes_nothing(self, roster: Roster) -> None:
        Character("Jack", 10, 30, roster=roster)
        with pytest.raises(InvalidHealth):
            Character("Jack", 0, 30, roster=roster)
        assert roster.id_count == 1
        assert roster.live_count == 1
        assert Character("Jill", 10, 30, roster=roster).personal_id == 1

    def test_errors_carry_kind(self, roster: Roster) -> None:
        with pytest.raises(CharacterValidationError) as info:
            Character("Jack", 10, 9000, roster=roster)
        assert info.value.kind == ErrorKind.INVALID_ATTACK_POWER
        assert "500" in info.value.message

    def test_validation_errors_are_value_errors(self, roster: Roster) -> None:
        with pytest.raises(ValueError):
            Character("", roster=roster)

    def test_negative_attack_power_allowed(self, roster: Roster) -> None:
        assert Character("Pacifist", 1, -50, roster=roster).to_string() == "Pacifist 1 -50"

    def test_roster_limits_apply(self) -> None:
        roster = Roster(CharacterLimits(max_health=100))
        with pytest.raises(InvalidHealth):
            Character("Jack", 101, 0, roster=roster)

    def test_default_roster_used_when_none_given(self) -> None:
        before_ids = default_roster().id_count
        before_live = default_roster().live_count
        npc = Character()
        assert npc.personal_id == before_ids
        assert Character.object_count() == before_live + 1
        npc.release()
        assert Character.object_count() == before_live
        assert Character.id_count() == before_ids + 1


class TestAccessors:
    def test_reads_are_stable(self, roster: Roster) -> None:
        jack = Character("Jack", 10, 30, roster=roster)
        assert jack.to_string() == jack.to_string()
        assert jack.personal_id == jack.personal_id

    def test_health_and_attack_are_read_only(self, roster: Roster) -> None:
        jack = Character("Jack", 10, 30, roster=roster)
        with pytest.raises(AttributeError):
            jack.health = 20  # type: ignore[misc]
        with pytest.raises(AttributeError):
            jack.attack_power = 20  # type: ignore[misc]
        with pytest.raises(AttributeError):
            jack.personal_id = 7  # type: ignore[misc]

    def test_counts(self, roster: Roster) -> None:
        Character(roster=roster)
        Character(roster=roster)
        assert Character.object_count(roster) == 2
        assert Character.id_count(roster) == 2

    def test_repr(self, roster: Roster) -> None:
        jack = Character("Jack", 10, 30, roster=roster)
        assert repr(jack) == "Character(id=0, name='Jack', health=10, attack_power=30)"
        jack.release()
        assert repr(jack) == "Character(id=0, released)"


class TestSetName:
    def test_rename(self, roster: Roster) -> None:
        npc = Character(roster=roster)
        npc.set_name("B")
        assert npc.name == "B"
        assert npc.to_string() == "B -1 0"

    def test_rejected_rename_keeps_name(self, roster: Roster) -> None:
        npc = Character(roster=roster)
        npc.set_name("B")
        with pytest.raises(InvalidName):
            npc.set_name("")
        assert npc.name == "B"

    def test_rename_does_not_touch_counters(self, roster: Roster) -> None:
        npc = Character(roster=roster)
        npc.set_name("Bob")
        assert roster.id_count == 1
        assert roster.live_count == 1


class TestRelease:
    def test_release_decrements_live_count(self, roster: Roster) -> None:
        a = Character(roster=roster)
        b = Character(roster=roster)
        a.release()
        assert roster.live_count == 1
        assert a.released
        assert not b.released

    def test_double_release_raises(self, roster: Roster) -> None:
        npc = Character(roster=roster)
        npc.release()
        with pytest.raises(CharacterReleasedError):
            npc.release()
        assert roster.live_count == 0

    def test_use_after_release_raises(self, roster: Roster) -> None:
        npc = Character(roster=roster)
        npc.release()
        with pytest.raises(CharacterReleasedError):
            _ = npc.name
        with pytest.raises(CharacterReleasedError):
            npc.to_string()
        with pytest.raises(CharacterReleasedError):
            npc.set_name("Other")

    def test_context_manager_releases(self, roster: Roster) -> None:
        with Character("Jack", 10, 30, roster=roster) as jack:
            assert roster.live_count == 1
        assert jack.released
        assert roster.live_count == 0

    def test_context_manager_tolerates_early_release(self, roster: Roster) -> None:
        with Character(roster=roster) as npc:
            npc.release()
        assert roster.live_count == 0

    def test_context_manager_releases_on_error(self, roster: Roster) -> None:
        with pytest.raises(KeyError), Character(roster=roster):
            raise KeyError("boom")
        assert roster.live_count == 0

    def test_release_order_irrelevant(self, roster: Roster) -> None:
        chars = [Character(roster=roster) for _ in range(3)]
        for character in (chars[1], chars[2], chars[0]):
            character.release()
        assert roster.live_count == 0
        assert roster.id_count == 3


class TestReferenceScenario:
    def test_full_lifecycle(self, roster: Roster) -> None:
        leo = Character("Leonardo da Vinci", 1000, 20, roster=roster)
        assert leo.to_string() == "Leonardo da Vinci 1000 20"
        assert leo.personal_id == 0
        assert Character.object_count(roster) == 1

        npc = Character(roster=roster)
        assert npc.to_string() == "Name -1 0"
        assert npc.personal_id == 1
        assert Character.id_count(roster) == 2

        npc.set_name("B")
        assert npc.name == "B"
        with pytest.raises(InvalidName):
            npc.set_name("")
        assert npc.name == "B"

        jack = Character("Jack", 10, 30, roster=roster)
        assert jack.personal_id == 2
        assert Character.object_count(roster) == 3

        for character in (jack, leo, npc):
            character.release()
        assert Character.object_count(roster) == 0
        assert Character.id_count(roster) == 3

        with pytest.raises(InvalidHealth):
            Character("Zero", 0, 1, roster=roster)
        assert Character.id_count(roster) == 3
