"""Monster battle: parties, damage rules and the turn-based game loop."""

from __future__ import annotations

import dataclasses
import random
import sys
from collections import deque
from typing import Callable, Sequence

from monsterbattle.gems import (
    GEM_LETTERS,
    BanishInfo,
    Element,
    compact_gems,
    fill_empty_gems,
    format_gems,
    identify_removable_gems,
    move_gem,
    parse_command,
    random_gems,
)

BLUR_DAMAGE = 10
RECOVER_NUM = 20
COMBO_BASE = 1.5
COMMAND_LENGTH = 2

_ATTACK_ELEMENTS = (Element.FLAME, Element.AQUA, Element.LEAF, Element.GROUND)
_BOOST_ROWS = (
    (1.0, 0.5, 2.0, 1.0),
    (2.0, 1.0, 1.0, 0.5),
    (0.5, 1.0, 1.0, 2.0),
    (1.0, 2.0, 0.5, 1.0),
)
_BOOST = {
    (attacker, defender): factor
    for attacker, factors in zip(_ATTACK_ELEMENTS, _BOOST_ROWS)
    for defender, factor in zip(_ATTACK_ELEMENTS, factors)
}

_RULE = "-------------------------\n"


@dataclasses.dataclass
class Monster:
    name: str
    element: Element
    max_hp: int
    hp: int
    attack: int
    defense: int

    def label(self) -> str:
        """Name framed by the element's mark."""
        mark = self.element.mark
        return f"{mark}{self.name}{mark}"


@dataclasses.dataclass
class Party:
    player_name: str
    monsters: list[Monster]
    hp: int
    average_defense: int
    max_hp: int


@dataclasses.dataclass
class BattleField:
    party: Party
    enemy: Monster
    gems: list[Element] = dataclasses.field(default_factory=list)


def assemble_team(player_name: str, monsters: Sequence[Monster]) -> Party:
    """Build a party whose HP is the sum of its members' HP."""
    if not monsters:
        raise ValueError("a party needs at least one monster")
    total_hp = sum(monster.hp for monster in monsters)
    average_defense = sum(monster.defense for monster in monsters) // len(monsters)
    return Party(player_name, list(monsters), total_hp, average_defense, total_hp)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _boost(attacker: Element, defender: Element) -> float:
    try:
        return _BOOST[attacker, defender]
    except KeyError:
        raise ValueError(f"no damage affinity between {attacker.name} and {defender.name}") from None


def _combo_multiplier(info: BanishInfo, combo: int) -> float:
    if combo < 2:
        return 1.0
    return COMBO_BASE ** max(0, info.count - 3 + combo)


def randomized_damage(base: int, blur: int, rng: random.Random) -> int:
    """Vary base by up to blur percent either way."""
    percent = rng.randrange(blur * 2 + 1) - blur + 100
    return _trunc_div(base * percent, 100)


def compute_enemy_attack(enemy: Monster, party: Party, rng: random.Random) -> int:
    """Damage the enemy deals to the party; always at least one."""
    damage = randomized_damage(enemy.attack - party.average_defense, BLUR_DAMAGE, rng)
    return max(damage, 1)


def compute_party_attack(
    enemy: Monster, attacker: Monster, info: BanishInfo, combo: int, rng: random.Random
) -> int:
    """Damage a party monster deals, boosted by element affinity and combos."""
    base = int((attacker.attack - enemy.defense) * _boost(attacker.element, enemy.element))
    return randomized_damage(int(base * _combo_multiplier(info, combo)), BLUR_DAMAGE, rng)


def compute_recovery_amount(party: Party, info: BanishInfo, combo: int, rng: random.Random) -> int:
    """HP restored by banishing soul gems."""
    recover = randomized_damage(int(RECOVER_NUM * _combo_multiplier(info, combo)), BLUR_DAMAGE, rng)
    if party.hp >= party.max_hp:
        recover = party.max_hp - party.hp
    return recover


class Game:
    """Runs battles, reading commands and writing the field as text."""

    def __init__(
        self,
        rng: random.Random | None = None,
        read: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._read = read if read is not None else input
        self._write = write if write is not None else sys.stdout.write
        self._pending: deque[str] = deque()

    def _next_token(self) -> str:
        while not self._pending:
            self._pending.extend(self._read().split())
        token = self._pending.popleft()
        if len(token) > COMMAND_LENGTH:
            self._pending.appendleft(token[COMMAND_LENGTH:])
            token = token[:COMMAND_LENGTH]
        return token

    def _show_gems(self, gems: Sequence[Element]) -> None:
        self._write(format_gems(gems) + "\n")

    def traverse_dungeon(self, dungeon: Sequence[Monster], party: Party) -> int:
        """Fight every monster in turn; return how many were defeated."""
        self._write(f"{party.player_name}のパーティ(HP={party.hp})はダンジョンに到着した\n")
        self.display_team(party)
        wins = sum(self.engage_combat(party, enemy) for enemy in dungeon)
        self._write(f"{party.player_name}のパーティはダンジョンを制覇した！\n")
        return wins

    def engage_combat(self, party: Party, enemy: Monster) -> bool:
        """Alternate turns until one side falls; True when the enemy is beaten."""
        field = BattleField(party, enemy, random_gems(self.rng))
        self._write(f"{enemy.label()}が現れた！\n\n")
        while party.hp > 0 and enemy.hp > 0:
            self.player_turn(field)
            if enemy.hp > 0:
                self.enemy_turn(field)
        if enemy.hp <= 0:
            self._write(f"{enemy.label()}を倒した！\n\n")
            self._write(f"{party.player_name}はさらに奥へと進んだ\n\n")
            return True
        self._write("敵モンスターに敗れた！\n")
        return False

    def player_turn(self, field: BattleField) -> None:
        self._write(f"【{field.party.player_name}のターン】\n")
        self.display_battlefield(field)
        while True:
            self._write("コマンド?>")
            try:
                from_pos, to_pos = parse_command(self._next_token())
            except ValueError:
                continue
            break
        self._show_gems(field.gems)
        for state in move_gem(field.gems, from_pos, to_pos):
            field.gems = state
            self._show_gems(state)
        self.check_all_gems(field)

    def enemy_turn(self, field: BattleField) -> None:
        self._write(f"【{field.enemy.label()}のターン】\n")
        damage = compute_enemy_attack(field.enemy, field.party, self.rng)
        field.party.hp -= damage
        self._write(f"{damage} のダメージを受けた\n\n")

    def _compact(self, field: BattleField) -> None:
        field.gems = compact_gems(field.gems)
        self._show_gems(field.gems)

    def check_all_gems(self, field: BattleField) -> None:
        """Banish runs, chaining combos, and refill the row."""
        info = identify_removable_gems(field.gems)
        if not info:
            return
        combo = 1
        self.remove_gems(field, info, combo)
        self._compact(field)
        for _ in range(2):
            while info := identify_removable_gems(field.gems):
                combo += 1
                self.remove_gems(field, info, combo)
                self._compact(field)
            field.gems = fill_empty_gems(field.gems, self.rng)
            self._show_gems(field.gems)
            self._write("\n")

    def remove_gems(self, field: BattleField, info: BanishInfo, combo: int) -> None:
        field.gems = [
            Element.EMPTY if index in info.positions else gem
            for index, gem in enumerate(field.gems)
        ]
        self._show_gems(field.gems)
        if info.element in _ATTACK_ELEMENTS:
            self.perform_attack(field, info, combo)
        elif info.element is Element.SOUL:
            self.recover_health(field, info, combo)

    def perform_attack(self, field: BattleField, info: BanishInfo, combo: int) -> None:
        enemy = field.enemy
        for attacker in field.party.monsters:
            if attacker.element is not info.element:
                continue
            damage = compute_party_attack(enemy, attacker, info, combo, self.rng)
            enemy.hp -= damage
            if combo == 1:
                self._write(f"{attacker.label()}の攻撃 !\n")
            else:
                self._write(f"{attacker.label()}の攻撃 ! {combo} COMBO!\n")
            self._write(f"{enemy.label()}に {damage} のダメージを与えた\n\n")

    def recover_health(self, field: BattleField, info: BanishInfo, combo: int) -> None:
        if combo >= 2:
            self._write(
                f"allBanishNum: {info.count}, comboNum: {combo}, "
                f"comboPlus: {_combo_multiplier(info, combo):f}\n\n"
            )
        amount = compute_recovery_amount(field.party, info, combo, self.rng)
        field.party.hp += amount
        self._write(f"HPが {amount} 回復した!\n")

    def display_team(self, party: Party) -> None:
        self._write("パーティ編成------\n")
        for monster in party.monsters:
            self._write(
                f"{monster.label()} HP={monster.hp} "
                f"Attack={monster.attack} Defence={monster.defense}\n"
            )
        self._write("-------------\n")

    def display_battlefield(self, field: BattleField) -> None:
        enemy, party = field.enemy, field.party
        self._write(_RULE)
        self._write(f"{enemy.label()} HP= {enemy.hp} / {enemy.max_hp} \n\n\n")
        self._write("".join(f"{monster.label()} " for monster in party.monsters) + "\n")
        self._write(f" HP= {party.hp} / {party.max_hp}\n")
        self._write(_RULE)
        self._write(" " + "".join(f"{letter} " for letter in GEM_LETTERS) + "\n")
        self._show_gems(field.gems)
        self._write(_RULE)


def default_dungeon() -> list[Monster]:
    return [
        Monster("Slime", Element.AQUA, 100, 100, 10, 5),
        Monster("Goblin", Element.GROUND, 200, 200, 20, 15),
        Monster("Crow", Element.LEAF, 300, 300, 30, 25),
        Monster("Bear", Element.LEAF, 400, 400, 40, 30),
        Monster("Devil", Element.FLAME, 800, 800, 50, 40),
    ]


def default_party_monsters() -> list[Monster]:
    return [
        Monster("Efreet", Element.FLAME, 150, 150, 25, 10),
        Monster("Wing", Element.LEAF, 150, 150, 15, 10),
        Monster("Tiger", Element.GROUND, 150, 150, 20, 5),
        Monster("Leviathan", Element.AQUA, 150, 150, 20, 15),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    write = sys.stdout.write
    game = Game(write=write)
    write("*** Monster Battle ***\n")
    dungeon = default_dungeon()
    party = assemble_team("test", default_party_monsters())
    try:
        wins = game.traverse_dungeon(dungeon, party)
    except (EOFError, KeyboardInterrupt):
        write("\n")
        return 1
    write("***GAME CLEAR!***\n" if wins == len(dungeon) else "***GAME OVER***\n")
    write(f"倒したモンスター数＝{wins}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())