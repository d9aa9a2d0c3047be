import random

import pytest

from monsterbattle.battle import (
    BattleField,
    Game,
    Monster,
    Party,
    assemble_team,
    compute_enemy_attack,
    compute_party_attack,
    compute_recovery_amount,
    default_dungeon,
    default_party_monsters,
    main,
    randomized_damage,
)
from monsterbattle.gems import BanishInfo, Element, identify_removable_gems, move_gem

MARK_TO_ELEMENT = {element.mark: element for element in Element}


def row(marks):
    return [MARK_TO_ELEMENT[mark] for mark in marks]


class PickRng:
    """Random source whose randrange answer is chosen by a function."""

    def __init__(self, pick):
        self.pick = pick

    def randrange(self, n):
        return self.pick(n)


MIDDLE = PickRng(lambda n: n // 2)
LOWEST = PickRng(lambda n: 0)
HIGHEST = PickRng(lambda n: n - 1)


def scripted(*lines):
    lines_iter = iter(lines)
    return lambda: next(lines_iter)


def make_game(rng=MIDDLE, read=None):
    out = []
    return Game(rng=rng, read=read or scripted(), write=out.append), out


def make_party(*monsters):
    return assemble_team("hero", list(monsters))


def test_label_uses_element_mark():
    assert Monster("Slime", Element.AQUA, 100, 100, 10, 5).label() == "~Slime~"
    assert Monster("Devil", Element.FLAME, 800, 800, 50, 40).label() == "*Devil*"


def test_assemble_team_sums_hp():
    monsters = default_party_monsters()
    party = assemble_team("test", monsters)
    assert party.hp == party.max_hp == sum(m.hp for m in monsters)
    assert party.average_defense == 10
    assert party.player_name == "test"


def test_assemble_team_needs_members():
    with pytest.raises(ValueError):
        assemble_team("test", [])


def test_default_dungeon_order():
    assert [m.name for m in default_dungeon()] == ["Slime", "Goblin", "Crow", "Bear", "Devil"]


def test_randomized_damage_centre_and_bounds():
    base = 1000
    assert randomized_damage(base, 10, MIDDLE) == base
    low = randomized_damage(base, 10, LOWEST)
    high = randomized_damage(base, 10, HIGHEST)
    assert low < base < high
    rng = random.Random(7)
    for _ in range(100):
        assert low <= randomized_damage(base, 10, rng) <= high


def test_randomized_damage_truncates_towards_zero():
    assert randomized_damage(-5, 10, LOWEST) == -4


def test_enemy_attack_is_at_least_one():
    party = make_party(Monster("Wall", Element.GROUND, 50, 50, 1, 500))
    enemy = Monster("Gnat", Element.AQUA, 10, 10, 1, 0)
    assert compute_enemy_attack(enemy, party, HIGHEST) == 1


def test_affinity_doubles_damage():
    attacker = Monster("Efreet", Element.FLAME, 150, 150, 60, 10)
    weak = Monster("Crow", Element.LEAF, 300, 300, 30, 20)
    neutral = Monster("Devil", Element.FLAME, 300, 300, 30, 20)
    info = BanishInfo(Element.FLAME, 0, 3)
    boosted = compute_party_attack(weak, attacker, info, 1, MIDDLE)
    plain = compute_party_attack(neutral, attacker, info, 1, MIDDLE)
    assert boosted == 2 * plain


def test_combo_increases_damage():
    attacker = Monster("Efreet", Element.FLAME, 150, 150, 60, 10)
    enemy = Monster("Devil", Element.FLAME, 300, 300, 30, 20)
    info = BanishInfo(Element.FLAME, 0, 3)
    single = compute_party_attack(enemy, attacker, info, 1, MIDDLE)
    combo = compute_party_attack(enemy, attacker, info, 2, MIDDLE)
    assert combo > single


def test_soul_element_has_no_affinity():
    attacker = Monster("Ghost", Element.SOUL, 10, 10, 10, 1)
    enemy = Monster("Slime", Element.AQUA, 10, 10, 10, 1)
    with pytest.raises(ValueError):
        compute_party_attack(enemy, attacker, BanishInfo(Element.SOUL, 0, 3), 1, MIDDLE)


def test_recovery_at_or_above_max():
    party = make_party(Monster("Tiger", Element.GROUND, 150, 150, 20, 5))
    info = BanishInfo(Element.SOUL, 0, 3)
    assert compute_recovery_amount(party, info, 1, MIDDLE) == 0
    party.hp = party.max_hp + 5
    assert compute_recovery_amount(party, info, 1, MIDDLE) == -5
    party.hp = party.max_hp - 50
    assert compute_recovery_amount(party, info, 1, MIDDLE) > 0


def test_player_turn_retries_until_valid_command():
    party = make_party(Monster("Efreet", Element.FLAME, 150, 150, 25, 10))
    enemy = Monster("Slime", Element.AQUA, 100, 100, 10, 5)
    gems = row("*~%#+*~%#+*~%#")
    field = BattleField(party, enemy, list(gems))
    game, out = make_game(read=scripted("AA", "ZZ AB"))
    game.player_turn(field)
    assert list(move_gem(gems, 0, 1))[-1] == field.gems
    assert "".join(out).count("コマンド?>") == 3
    assert enemy.hp == enemy.max_hp


def test_check_all_gems_attacks_and_refills():
    party = make_party(Monster("Efreet", Element.FLAME, 150, 150, 100, 10))
    enemy = Monster("Devil", Element.FLAME, 1000, 1000, 50, 0)
    field = BattleField(party, enemy, row("***~%#+~%#+~#+"))
    game, out = make_game()
    game.check_all_gems(field)
    assert enemy.hp < enemy.max_hp
    assert Element.EMPTY not in field.gems
    assert "*Efreet*の攻撃 !" in "".join(out)


def test_check_all_gems_without_runs_changes_nothing():
    party = make_party(Monster("Efreet", Element.FLAME, 150, 150, 100, 10))
    enemy = Monster("Devil", Element.FLAME, 1000, 1000, 50, 0)
    gems = row("*~%#+*~%#+*~%#")
    field = BattleField(party, enemy, list(gems))
    game, out = make_game()
    game.check_all_gems(field)
    assert field.gems == gems
    assert out == []


def test_soul_gems_recover_health():
    party = make_party(Monster("Tiger", Element.GROUND, 150, 150, 20, 5))
    party.hp -= 100
    before = party.hp
    enemy = Monster("Slime", Element.AQUA, 100, 100, 10, 5)
    field = BattleField(party, enemy, row("+++~%#*~%#*~#*"))
    game, out = make_game()
    game.check_all_gems(field)
    assert party.hp > before
    assert "回復した!" in "".join(out)


def test_enemy_turn_damages_party():
    party = make_party(Monster("Tiger", Element.GROUND, 150, 150, 20, 5))
    enemy = Monster("Bear", Element.LEAF, 400, 400, 40, 30)
    field = BattleField(party, enemy, row("*~%#+*~%#+*~%#"))
    game, out = make_game()
    game.enemy_turn(field)
    lost = party.max_hp - party.hp
    assert lost == compute_enemy_attack(enemy, party, MIDDLE)
    assert f"{lost} のダメージを受けた" in "".join(out)


def test_display_battlefield_shows_letters_and_hp():
    party = make_party(Monster("Tiger", Element.GROUND, 150, 150, 20, 5))
    enemy = Monster("Slime", Element.AQUA, 100, 100, 10, 5)
    field = BattleField(party, enemy, row("*~%#+*~%#+*~%#"))
    game, out = make_game()
    game.display_battlefield(field)
    text = "".join(out)
    assert " A B C D E F G H I J K L M N \n" in text
    assert "~Slime~ HP= 100 / 100" in text
    assert " HP= 150 / 150\n" in text


def test_traverse_dungeon_counts_defeated_monsters():
    dungeon = default_dungeon()
    party = assemble_team("test", default_party_monsters())
    game, out = make_game(rng=random.Random(11), read=lambda: "AB")
    wins = game.traverse_dungeon(dungeon, party)
    assert wins == sum(monster.hp <= 0 for monster in dungeon)
    if wins < len(dungeon):
        assert party.hp <= 0
    assert "".join(out).startswith("testのパーティ(HP=600)はダンジョンに到着した\n")


def test_main_plays_a_full_game(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda *args: "AB")
    assert main([]) == 0
    text = capsys.readouterr().out
    assert text.startswith("*** Monster Battle ***\n")
    assert "倒したモンスター数＝" in text
    assert ("***GAME CLEAR!***" in text) != ("***GAME OVER***" in text)


def test_main_stops_on_end_of_input(monkeypatch, capsys):
    def no_input(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 1
    assert "倒したモンスター数" not in capsys.readouterr().out


def test_identify_after_move_matches_field():
    gems = row("**~*%#+~%#+~%#")
    moved = list(move_gem(gems, 2, 3))[-1]
    assert identify_removable_gems(moved) == BanishInfo(Element.FLAME, 0, 3)