from dungeonkit.stats import Health, Stat, Stats


def test_stat_without_bonus_is_base():
    assert Stat(base=42).value() == 42


def test_stat_bonus_changes_value():
    stat = Stat(base=10)
    before = stat.value()
    stat.bonus = 5
    assert stat.value() > before


def test_health_dead_at_zero_and_below():
    assert Health(value=0, max=10).is_dead()
    assert Health(value=-3, max=10).is_dead()
    assert not Health(value=1, max=10).is_dead()


def test_set_base_assigns_every_stat():
    stats = Stats()
    stats.set_base(hp=45, attack=49, special_attack=65, defense=48, special_defense=64, speed=45)
    assert stats.health.base == 45
    assert stats.attack.base == 49
    assert stats.special_attack.base == 65
    assert stats.defense.base == 48
    assert stats.special_defense.base == 64
    assert stats.speed.base == 45


def test_set_base_keeps_bonus():
    stats = Stats()
    stats.attack.bonus = 7
    stats.set_base(1, 2, 3, 4, 5, 6)
    assert stats.attack.bonus == 7


def test_health_from_stats_is_full():
    stats = Stats()
    stats.set_base(30, 1, 1, 1, 1, 1)
    health = Health.from_stats(stats)
    assert health.value == stats.health.value()
    assert health.max == health.value
    assert not health.is_dead()


def test_default_stats_are_independent():
    a, b = Stats(), Stats()
    a.speed.base = 9
    assert b.speed.base == 0