"""Turn-based fights between the player and a single monster."""

from __future__ import annotations

from redstone.abilities import Ability, AbilityType
from redstone.common import Position
from redstone.consumables import generate_item
from redstone.monster import Monster
from redstone.state import GameState, Mode

_PLAYER_MAGICAL = frozenset(
    {"Magic Missile", "Fireball", "Frost Nova", "Arcane Explosion", "Ice Bolt", "Lightning Strike"}
)
_PLAYER_RANGED = frozenset({"Shoot", "Quick Shot", "Rain of Arrows", "Magic Missile", "Fireball"})
_MONSTER_MAGICAL = frozenset(
    {
        "Fireball", "Hellfire", "Mind Blast", "Necrotic Blast", "Freeze",
        "Lightning Strike", "Eye Ray", "Cosmic Horror", "Elemental Surge",
    }
)
_MONSTER_RANGED = frozenset({"Toxic Spit", "Fireball", "Lightning Strike", "Eye Ray"})


def is_ability_magical(ability: Ability) -> bool:
    return ability.name in _PLAYER_MAGICAL


def is_ability_ranged(ability: Ability) -> bool:
    return ability.name in _PLAYER_RANGED


def is_monster_ability_magical(ability: Ability) -> bool:
    return ability.name in _MONSTER_MAGICAL


def is_monster_ability_ranged(ability: Ability) -> bool:
    return ability.name in _MONSTER_RANGED


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _hit_chance(attacker_agility: int, defender_agility: int) -> float:
    return _clamp(0.8 + (attacker_agility - defender_agility) * 0.02, 0.5, 0.95)


class CombatGame(GameState):
    """Game state with the rules of combat."""

    def _target(self) -> Monster:
        if self.current_target is None:
            raise RuntimeError("there is no monster to fight")
        return self.current_target

    def start_combat(self, target: Monster) -> None:
        self.mode = Mode.COMBAT
        self.current_target = target
        self.add_message(f"You engage in combat with {target.name}!")

    def end_combat(self) -> None:
        self.mode = Mode.EXPLORING
        self.current_target = None

    def use_ability(self, ability_index: int) -> bool:
        """Use one of the player's abilities on the current target.

        Returns False if the ability cannot be used now; the reason goes to the log.
        """
        target = self._target()
        player = self.player

        if not 0 <= ability_index < len(player.abilities):
            self.add_message("Invalid ability!")
            return False

        ability = player.abilities[ability_index]
        if ability.current_cd > 0:
            self.add_message(f"{ability.name} is still on cooldown for {ability.current_cd} turns!")
            return False
        if player.mana < ability.mana_cost:
            self.add_message("Not enough mana!")
            return False

        player.mana -= ability.mana_cost
        ability.current_cd = ability.cooldown

        power = ability.power
        attrs = player.attributes
        if ability.ability_type == AbilityType.ATTACK:
            if is_ability_magical(ability):
                power += attrs.intelligence // 3
            elif is_ability_ranged(ability):
                power += attrs.agility // 3
            else:
                power += attrs.strength // 3
        elif ability.ability_type == AbilityType.HEAL:
            power += attrs.intelligence // 4

        if ability.ability_type == AbilityType.ATTACK:
            if self.rng.random() <= _hit_chance(attrs.agility, target.attributes.agility):
                target.health -= power
                self.add_message(f"You use {ability.name} and deal {power} damage to {target.name}!")
                if target.health <= 0:
                    self._handle_monster_defeat(target)
                    return True
            else:
                self.add_message(f"You use {ability.name} but miss {target.name}!")
        elif ability.ability_type == AbilityType.HEAL:
            player.health = min(player.health + power, player.max_health)
            self.add_message(f"You use {ability.name} and heal for {power} health!")
        elif ability.ability_type == AbilityType.BUFF:
            self.add_message(f"You use {ability.name} and feel stronger!")
        elif ability.ability_type == AbilityType.DEBUFF:
            self.add_message(f"You use {ability.name} and weaken {target.name}!")

        self._monster_attack()
        return True

    def attempt_to_flee(self) -> bool:
        """Try to leave the fight; on failure the monster strikes."""
        target = self._target()
        chance = _clamp(0.4 + (self.player.attributes.agility - target.attributes.agility) * 0.05, 0.2, 0.8)
        if self.rng.random() < chance:
            self.add_message("You escaped from combat!")
            self.end_combat()
            return True
        self.add_message("You failed to escape!")
        self._monster_attack()
        return False

    def attempt_to_persuade(self) -> bool:
        """Try to talk the monster into paying up and leaving; on failure it strikes."""
        if self.mode != Mode.COMBAT:
            return False
        player = self.player
        monster = self._target()

        chance = _clamp((player.attributes.charisma - monster.attributes.charisma) * 0.03, 0.0, 0.6)
        if self.rng.random() < chance:
            extra_gold = self.rng.randrange(max(monster.gold // 2, 1)) + 1
            player.gold += extra_gold
            self.add_message(f"You persuade {monster.name} to give you {extra_gold} gold!")

            if self.rng.random() < 0.2 and monster.drop_rate > 0:
                new_item = generate_item(self.current_level + 1, self.rng)
                if player.pick_up_item(new_item):
                    self.add_message(f"The {monster.name} also gives you {new_item.name}!")
                else:
                    self.add_message("Your inventory is full, so you can't take the offered item.")
                    new_item.position = Position(monster.position.x, monster.position.y)
                    self.add_item(new_item)

            self.remove_monster(monster)
            self.end_combat()
            return True

        self.add_message(f"You try to persuade {monster.name}, but they're not interested!")
        self._monster_attack()
        return False

    def _monster_attack(self) -> None:
        player = self.player
        monster = self._target()
        ability = monster.choose_ability(self.rng)

        power = ability.power
        attrs = monster.attributes
        if ability.ability_type == AbilityType.ATTACK:
            if is_monster_ability_magical(ability):
                power += attrs.intelligence // 3
            elif is_monster_ability_ranged(ability):
                power += attrs.agility // 3
            else:
                power += attrs.strength // 3

        if self.rng.random() <= _hit_chance(attrs.agility, player.attributes.agility):
            player.health -= power
            self.add_message(f"{monster.name} uses {ability.name} and deals {power} damage to you!")
            if player.health <= 0:
                self.game_over = True
                self.add_message("You have been defeated!")
        else:
            self.add_message(f"{monster.name} uses {ability.name} but misses you!")

    def _handle_monster_defeat(self, monster: Monster) -> None:
        player = self.player
        self.add_message(
            f"You defeated {monster.name}! Gained {monster.exp_value} experience and {monster.gold} gold."
        )
        leveled_up = player.gain_experience(monster.exp_value)
        player.gold += monster.gold
        if leveled_up:
            self.add_message(
                f"Level up! You are now level {player.level}. Health and mana fully restored."
            )

        if self.rng.random() <= monster.drop_rate:
            new_item = generate_item(self.current_level + 1, self.rng)
            new_item.position = Position(monster.position.x, monster.position.y)
            self.add_item(new_item)
            self.add_message(f"The {monster.name} dropped {new_item.name}!")

        self.remove_monster(monster)
        self.end_combat()