"""Tests for the seeded systems: RNG, terrain generation, spawning, scripts."""

import logging
import math
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from tests.helpers.arena import Arena
from worms.config import GameConfig
from worms.core.enums import Domain
from worms.core.world import World
from worms.systems.controller import CommandScript, parse_script
from worms.systems.rng import DeterministicRNG
from worms.systems.spawner import WORM_NAMES, WormSpawner
from worms.systems.terrain_gen import generate_terrain
from worms.utils.logging import setup_logging


class TestDeterministicRNG:
    def test_same_seed_same_values(self):
        a, b = DeterministicRNG(7), DeterministicRNG(7)
        for key in range(20):
            assert a.next_float(Domain.SPAWN, key, 0) == b.next_float(Domain.SPAWN, key, 0)

    def test_domains_are_separated(self):
        rng = DeterministicRNG(7)
        assert rng.next_float(Domain.SPAWN, 1, 0) != rng.next_float(Domain.TERRAIN, 1, 0)

    def test_seeds_differ(self):
        assert DeterministicRNG(1).next_float(Domain.SPAWN, 0, 0) != DeterministicRNG(2).next_float(Domain.SPAWN, 0, 0)

    def test_heading_range(self):
        rng = DeterministicRNG(9)
        for key in range(100):
            assert 0.0 <= rng.next_heading(Domain.SPAWN, key, 0) < 2 * math.pi

    def test_ranges(self):
        rng = DeterministicRNG(3)
        for key in range(200):
            f = rng.next_float(Domain.TERRAIN, key, 1)
            assert 0.0 <= f < 1.0
            assert 4 <= rng.next_int(Domain.TERRAIN, key, 2, 4, 9) <= 9
            assert -1.0 <= rng.next_uniform(Domain.TERRAIN, key, 3, -1.0, 1.0) < 1.0


class TestTerrainGeneration:
    def test_ground_stays_in_band(self):
        config = GameConfig(world_seed=11)
        terrain = generate_terrain(config, DeterministicRNG(config.world_seed))
        for col in range(terrain.columns):
            x = (col + 0.5) * config.world_width / config.terrain_columns
            height = terrain.ground_height(x)
            assert 0.15 * config.world_height - 1e-6 <= height <= 0.60 * config.world_height + 1e-6

    def test_same_seed_same_terrain(self):
        config = GameConfig(world_seed=5)
        a = generate_terrain(config, DeterministicRNG(5))
        b = generate_terrain(config, DeterministicRNG(5))
        assert [a.ground_height(x / 10) for x in range(200)] == [b.ground_height(x / 10) for x in range(200)]


class TestSpawner:
    def test_worms_land_on_the_ground(self):
        config = GameConfig(world_seed=21)
        rng = DeterministicRNG(config.world_seed)
        world = World(generate_terrain(config, rng), config)
        spawner = WormSpawner(rng)
        first = spawner.spawn(world)
        second = spawner.spawn(world, radius=0.4, name="Zed")
        assert first is not None and second is not None
        assert first.name == WORM_NAMES[0]
        assert second.name == "Zed"
        assert second.radius == 0.4
        for worm in (first, second):
            assert world.is_adjacent_position(worm.position, worm.radius)
            assert world.lies_within_world(worm.position, worm.radius)
            assert 0.0 <= worm.direction < 2 * math.pi
        assert world.worms == [first, second]

    def test_spawning_is_reproducible(self):
        config = GameConfig(world_seed=8)
        positions = []
        for _ in range(2):
            rng = DeterministicRNG(config.world_seed)
            world = World(generate_terrain(config, rng), config)
            positions.append(WormSpawner(rng).spawn(world).position)
        assert positions[0] == positions[1]

    def test_all_names_are_valid(self):
        arena = Arena()
        for i, name in enumerate(WORM_NAMES):
            arena.add_worm(name, 10 + i * 10)


class TestCommandScript:
    def test_parse(self):
        assert parse_script(["move", "", "turn -0.5", "SHOOT 20"]) == [
            ("move", []), ("turn", [-0.5]), ("shoot", [20]),
        ]

    @pytest.mark.parametrize("lines", [
        ["dance"], ["turn"], ["turn 1 2"], ["turn abc"], ["shoot high"], ["shoot 10 20"], ["move 3"],
    ])
    def test_parse_errors(self, lines):
        with pytest.raises(ValueError):
            parse_script(lines)

    def test_bad_argument_fails_before_play(self):
        with pytest.raises(ValueError):
            CommandScript(["shoot high", "turn 0.1"])

    def test_out_of_range_yield_is_skipped(self):
        arena = Arena()
        script = CommandScript(["shoot 150", "turn 0.1"])
        bot = arena.add_worm("Bot", 50, controller=script)
        arena.add_worm("Ann", 150)
        arena.world.start_game()
        arena.world.run_controllers(1)
        assert script.skipped == 1
        assert script.executed == 1
        assert bot.action_points == bot.max_action_points - 1

    def test_unbound_script(self):
        with pytest.raises(RuntimeError):
            CommandScript(["move"]).run()

    def test_scripted_turn(self):
        arena = Arena()
        script = CommandScript(["turn 0.5", "next_weapon", "shoot 10"])
        bot = arena.add_worm("Bot", 50, controller=script)
        human = arena.add_worm("Ann", 150)
        arena.world.start_game()
        assert arena.world.pending_controller is bot
        played = arena.world.run_controllers(5)
        assert played == 1
        assert script.worm is bot
        assert script.executed == 3
        assert script.skipped == 0
        assert bot.direction == pytest.approx(0.5)
        assert bot.current_weapon_name == "Bazooka"
        assert arena.world.active_worm is human

    def test_refused_commands_are_skipped(self):
        arena = Arena()
        script = CommandScript(["turn nan", "fall", "turn 0.1"])
        bot = arena.add_worm("Bot", 50, controller=script)
        arena.add_worm("Ann", 150)
        arena.world.start_game()
        arena.world.run_controllers(1)
        assert script.executed == 1
        assert script.skipped == 2
        assert bot.direction == pytest.approx(0.1)

    def test_script_stops_when_turn_passes(self):
        arena = Arena()
        script = CommandScript(["jump", "turn 0.1"])
        bot = arena.add_worm("Bot", 50, direction=math.pi / 4, controller=script)
        arena.add_worm("Ann", 150)
        arena.world.start_game()
        arena.world.run_controllers(1)
        assert script.executed == 1
        assert script.skipped == 0
        assert bot.direction == pytest.approx(math.pi / 4)

    def test_run_controllers_is_bounded(self):
        arena = Arena()
        arena.add_worm("Bot", 50, controller=CommandScript(["next_weapon"]))
        arena.add_worm("Cat", 150, controller=CommandScript(["next_weapon"]))
        arena.world.start_game()
        assert arena.world.run_controllers(6) == 6
        assert arena.world.pending_controller is not None


class TestLoggingSetup:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        access = logging.getLogger("uvicorn.access").level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("uvicorn.access").setLevel(access)

    def test_level_and_single_handler(self):
        setup_logging("warning")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_debug_keeps_access_lines(self):
        setup_logging("DEBUG")
        assert logging.getLogger("uvicorn.access").level == logging.DEBUG
