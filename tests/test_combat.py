import random

import pytest

from redstone.abilities import Ability, AbilityType, new_ability_for_level
from redstone.classes import PlayerClass
from redstone.combat import (
    CombatGame,
    is_ability_magical,
    is_ability_ranged,
    is_monster_ability_magical,
    is_monster_ability_ranged,
)
from redstone.common import Attributes, Position
from redstone.dungeon import blank_dungeon
from redstone.monster import Monster, MonsterType, monster_basic_attack
from redstone.player import Player
from redstone.state import DungeonState, Mode


class FixedRandom(random.Random):
    """Random source whose random() always gives the same value."""

    def __init__(self, value):
        super().__init__(7)
        self.value = value

    def random(self):
        return self.value


def make_monster(health=1000, drop_rate=0.0, charisma=0, gold=20, exp_value=10):
    return Monster(
        name="Rat",
        symbol="r",
        monster_type=MonsterType.ANIMAL,
        level=1,
        attributes=Attributes(strength=3, agility=5, charisma=charisma),
        health=health,
        max_health=health,
        gold=gold,
        drop_rate=drop_rate,
        exp_value=exp_value,
        abilities=[monster_basic_attack(1)],
        position=Position(3, 4),
    )


def make_game(value, player_class=PlayerClass.WARRIOR, monster=None):
    game = CombatGame(
        player=Player("Hero", player_class),
        dungeons=[DungeonState(blank_dungeon(10, 10, 1))],
        rng=FixedRandom(value),
    )
    monster = monster if monster is not None else make_monster()
    game.current_dungeon().monsters.append(monster)
    game.start_combat(monster)
    return game, monster


def test_start_and_end_combat():
    game, monster = make_game(0.0)
    assert game.mode == Mode.COMBAT
    assert game.current_target is monster
    assert game.messages[-1] == "You engage in combat with Rat!"
    game.end_combat()
    assert game.mode == Mode.EXPLORING
    assert game.current_target is None


def test_killing_blow_rewards_player_and_drops_item():
    monster = make_monster(health=1)
    game, _ = make_game(0.0, monster=monster)
    gold, exp = game.player.gold, game.player.experience
    assert game.use_ability(0)
    assert game.player.gold == gold + monster.gold
    assert game.player.experience == exp + monster.exp_value
    assert game.current_dungeon().monsters == []
    assert game.mode == Mode.EXPLORING
    items = game.current_dungeon().items
    assert len(items) == 1
    assert (items[0].position.x, items[0].position.y) == (monster.position.x, monster.position.y)


def test_miss_on_both_sides_changes_no_health():
    game, monster = make_game(0.99)
    health = game.player.health
    assert game.use_ability(0)
    assert monster.health == monster.max_health
    assert game.player.health == health
    assert any("but miss Rat" in m for m in game.messages)
    assert game.messages[-1] == "Rat uses Attack but misses you!"
    assert game.mode == Mode.COMBAT


def test_hit_lowers_monster_health():
    game, monster = make_game(0.0)
    game.use_ability(0)
    assert monster.health < monster.max_health
    assert game.player.health < game.player.max_health


def test_invalid_ability_index():
    game, _ = make_game(0.0)
    assert not game.use_ability(5)
    assert game.messages[-1] == "Invalid ability!"


def test_cooldown_blocks_second_use():
    game, _ = make_game(0.99, player_class=PlayerClass.ROGUE)
    assert game.use_ability(0)
    mana = game.player.mana
    assert not game.use_ability(0)
    assert game.player.mana == mana
    assert any("still on cooldown" in m for m in game.messages)


def test_not_enough_mana():
    game, _ = make_game(0.0, player_class=PlayerClass.MAGE)
    game.player.mana = 0
    assert not game.use_ability(0)
    assert game.messages[-1] == "Not enough mana!"


def test_heal_restores_health_up_to_max():
    game, _ = make_game(0.99)
    game.player.abilities.append(new_ability_for_level(PlayerClass.WARRIOR, 2))
    game.player.health = 50
    assert game.use_ability(1)
    assert 50 < game.player.health <= game.player.max_health


def test_monster_can_defeat_player():
    game, _ = make_game(0.0)
    game.player.health = 1
    game.use_ability(0)
    assert game.game_over
    assert game.messages[-1] == "You have been defeated!"


def test_use_ability_without_target_raises():
    game, _ = make_game(0.0)
    game.end_combat()
    with pytest.raises(RuntimeError):
        game.use_ability(0)


def test_flee_succeeds():
    game, _ = make_game(0.0)
    assert game.attempt_to_flee()
    assert game.mode == Mode.EXPLORING
    assert game.current_target is None


def test_flee_fails_and_monster_strikes():
    game, _ = make_game(0.99)
    assert not game.attempt_to_flee()
    assert game.mode == Mode.COMBAT
    assert "You failed to escape!" in game.messages


def test_persuade_outside_combat_is_refused():
    game, _ = make_game(0.0)
    game.end_combat()
    assert not game.attempt_to_persuade()


def test_persuade_succeeds():
    game, monster = make_game(0.0)
    gold = game.player.gold
    assert game.attempt_to_persuade()
    assert gold < game.player.gold <= gold + monster.gold // 2 + 1
    assert game.current_dungeon().monsters == []
    assert game.mode == Mode.EXPLORING


def test_persuade_fails():
    game, monster = make_game(0.99)
    assert not game.attempt_to_persuade()
    assert game.current_dungeon().monsters == [monster]
    assert any("not interested" in m for m in game.messages)


@pytest.mark.parametrize(
    "name, magical, ranged, monster_magical, monster_ranged",
    [
        ("Fireball", True, True, True, True),
        ("Shoot", False, True, False, False),
        ("Slash", False, False, False, False),
        ("Hellfire", False, False, True, False),
        ("Toxic Spit", False, False, False, True),
    ],
)
def test_ability_classification(name, magical, ranged, monster_magical, monster_ranged):
    ability = Ability(name, "", 0, 0, AbilityType.ATTACK, 1)
    assert is_ability_magical(ability) is magical
    assert is_ability_ranged(ability) is ranged
    assert is_monster_ability_magical(ability) is monster_magical
    assert is_monster_ability_ranged(ability) is monster_ranged