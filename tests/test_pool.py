import random

import pytest

from drillbox.pool import (
    Coord,
    Direction,
    Pool,
    Predator,
    Victim,
    main,
    random_coord,
    random_direction,
    step_move_to,
)


def _pool(m, n, seed=0):
    return Pool(m, n, random.Random(seed))


def _never(coord):
    return False


def test_coord_equality():
    assert Coord(1, 2) == Coord(1, 2)
    assert Coord(1, 2) != Coord(2, 1)


def test_pool_rejects_empty_size():
    with pytest.raises(ValueError):
        Pool(0, 3)


def test_step_up_on_empty_pool():
    pool = _pool(3, 3)
    assert step_move_to(pool, Coord(0, 0), Direction.UP, _never) == Coord(0, 1)


def test_step_turns_clockwise_at_edge():
    pool = _pool(3, 3)
    assert step_move_to(pool, Coord(0, 2), Direction.UP, _never) == Coord(1, 2)


def test_step_turns_when_occupied():
    pool = _pool(3, 3)
    blocked = {Coord(1, 2)}
    result = step_move_to(pool, Coord(1, 1), Direction.UP, lambda c: c in blocked)
    assert result == Coord(2, 1)


def test_step_fully_blocked_stays():
    pool = _pool(1, 1)
    assert step_move_to(pool, Coord(0, 0), Direction.LEFT, _never) == Coord(0, 0)


def test_add_and_query_fish():
    pool = _pool(3, 3)
    pool.add_fish(Coord(0, 0), Victim(Coord(0, 0), pool))
    pool.add_fish(Coord(2, 2), Predator(Coord(2, 2), pool))
    assert pool.is_fish_at(Coord(0, 0))
    assert not pool.is_predator_at(Coord(0, 0))
    assert pool.is_predator_at(Coord(2, 2))
    assert not pool.is_fish_at(Coord(1, 1))
    assert (pool.victim_count, pool.predator_count) == (1, 1)


def test_add_to_occupied_cell_raises():
    pool = _pool(2, 2)
    pool.add_fish(Coord(0, 0), Victim(Coord(0, 0), pool))
    with pytest.raises(ValueError):
        pool.add_fish(Coord(0, 0), Predator(Coord(0, 0), pool))


def test_out_of_range_raises():
    pool = _pool(2, 2)
    with pytest.raises(IndexError):
        pool.is_fish_at(Coord(2, 0))


def test_remove_fish():
    pool = _pool(2, 2)
    victim = Victim(Coord(1, 1), pool)
    pool.add_fish(Coord(1, 1), victim)
    assert pool.remove_fish(Coord(1, 1)) is victim
    assert pool.victims_empty()
    assert pool.remove_fish(Coord(1, 1)) is None


def test_nearest_victim():
    pool = _pool(5, 5)
    assert pool.nearest_victim_to(Coord(0, 0)) is None
    pool.add_fish(Coord(4, 4), Victim(Coord(4, 4), pool))
    pool.add_fish(Coord(1, 0), Victim(Coord(1, 0), pool))
    assert pool.nearest_victim_to(Coord(0, 0)) == Coord(1, 0)
    assert pool.nearest_victim_to(Coord(4, 3)) == Coord(4, 4)


def test_set_victims_places_distinct_fish():
    pool = _pool(3, 3)
    pool.set_victims(9)
    assert pool.victim_count == 9
    assert len({v.coord for v in pool.victims}) == 9


def test_set_too_many_raises():
    pool = _pool(2, 2)
    pool.set_victims(3)
    with pytest.raises(ValueError):
        pool.set_predators(2)


def test_predator_eats_adjacent_victim():
    pool = _pool(3, 3)
    pool.add_fish(Coord(1, 1), Victim(Coord(1, 1), pool))
    predator = Predator(Coord(0, 1), pool)
    pool.add_fish(Coord(0, 1), predator)
    assert predator.move() == Coord(1, 1)
    assert pool.victims_empty()
    assert pool.is_predator_at(Coord(1, 1))
    assert not pool.is_fish_at(Coord(0, 1))


def test_victim_moves_to_only_free_cell():
    for seed in range(8):
        pool = _pool(1, 2, seed)
        victim = Victim(Coord(0, 0), pool)
        pool.add_fish(Coord(0, 0), victim)
        assert victim.move() == Coord(0, 1)
        assert pool.is_fish_at(Coord(0, 1))
        assert not pool.is_fish_at(Coord(0, 0))


def test_blocked_victim_stays():
    pool = _pool(1, 1)
    victim = Victim(Coord(0, 0), pool)
    pool.add_fish(Coord(0, 0), victim)
    assert victim.move() == Coord(0, 0)


def test_render_empty_cell():
    assert _pool(1, 1).render() == "Cells:\n[e \n]"


def test_simulate_invariants():
    pool = _pool(5, 5, seed=3)
    pool.set_victims(12)
    pool.set_predators(3)
    victims, predators = pool.simulate(40)
    assert predators == 3
    assert 0 <= victims <= 12
    picture = pool.render()
    assert picture.count("V") == victims
    assert picture.count("P") == predators
    coords = [f.coord for f in pool.victims + pool.predators]
    assert len(set(coords)) == len(coords)


def test_random_helpers_stay_in_range():
    rng = random.Random(7)
    seen = {random_direction(rng) for _ in range(200)}
    assert seen == set(Direction)
    for _ in range(200):
        c = random_coord(3, 4, rng)
        assert 0 <= c.x < 3 and 0 <= c.y < 4


def test_main_reports(capsys):
    assert main(["--seed", "1", "--steps", "5"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("5, 5\n12, 3\n")
    assert "Predators size: 3" in out