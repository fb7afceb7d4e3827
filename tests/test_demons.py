import random

import pytest

from redstone.demons import create_demon_abilities, demon_templates, generate_demon
from redstone.monster import Monster, MonsterType


def _demon(name, level):
    return Monster(name=name, symbol="x", monster_type=MonsterType.DEMON, level=level)


def test_templates_names():
    names = [t.name for t in demon_templates()]
    assert names == ["Imp", "Fallen One", "Hellhound", "Vortex", "Balrog"]


def test_low_level_demon_has_only_basic_attack():
    monster = _demon("Imp", 2)
    create_demon_abilities(monster)
    assert [a.name for a in monster.abilities] == ["Attack"]


def test_balrog_gets_inferno():
    monster = _demon("Balrog", 8)
    create_demon_abilities(monster)
    assert [a.name for a in monster.abilities] == ["Attack", "Hellfire", "Inferno"]
    assert monster.abilities[2].mana_cost == 10


def test_vortex_gets_chaos_nova_with_effect():
    monster = _demon("Vortex", 5)
    create_demon_abilities(monster)
    names = [a.name for a in monster.abilities]
    assert names == ["Attack", "Hellfire", "Chaos Nova"]
    assert monster.abilities[2].effect.name == "Chaos"


@pytest.mark.parametrize("seed", range(20))
def test_generated_demon_invariants(seed):
    monster = generate_demon(4, random.Random(seed))
    assert monster.monster_type == MonsterType.DEMON
    assert monster.health == monster.max_health
    assert monster.mana == monster.max_mana
    assert 4 <= monster.gold < 15 * 4 + 4
    assert monster.abilities[0].name == "Attack"
    template_names = {t.name for t in demon_templates() if 2 <= t.level <= 6}
    assert monster.name in template_names


def test_level_eight_is_always_balrog():
    names = {generate_demon(8, random.Random(seed)).name for seed in range(15)}
    assert names == {"Balrog"}


def test_same_seed_same_demon():
    a = generate_demon(5, random.Random(42))
    b = generate_demon(5, random.Random(42))
    assert (a.name, a.gold, a.behavior) == (b.name, b.gold, b.behavior)


def test_level_zero_raises():
    with pytest.raises(ValueError):
        generate_demon(0, random.Random(1))