"""
Tests for the trajectory engine.

Validates:
  - Trajectory shape (origin start, ground end, apex tracking)
  - Reference scenarios produce plausible distances and heights
  - Non-spin-responsive balls ignore spin entirely
  - Edge cases (tiny speed, vertical launch, runaway cutoff)
"""

import dataclasses
import logging
import math

import pytest

from golfshot.ball_flight import (
    calculate_trajectory,
    normalize_shot,
    simulate_shot,
    summarize_trajectory,
)
from golfshot.models.ball import BallType
from golfshot.models.physics import DEFAULT_PHYSICS, SimulationSettings
from golfshot.models.shot import ShotParameters, Side, WeatherConditions
from golfshot.utils.constants import MPH_TO_MS


def _make_shot(ball_speed=150, launch_angle=12, launch_direction=0,
               launch_direction_side=Side.RIGHT, spin=2500, spin_axis=0,
               spin_direction=Side.RIGHT, ball_type=BallType.RPT):
    return ShotParameters(
        ball_speed=ball_speed,
        launch_angle=launch_angle,
        launch_direction=launch_direction,
        launch_direction_side=launch_direction_side,
        spin=spin,
        spin_axis=spin_axis,
        spin_direction=spin_direction,
        ball_type=ball_type,
    )


class TestNormalizeShot:
    """Tests for unit and sign normalization."""

    def test_speed_converted_to_ms(self):
        launch = normalize_shot(_make_shot(ball_speed=100))
        assert launch.speed == pytest.approx(44.704)

    def test_left_launch_direction_is_negative(self):
        launch = normalize_shot(_make_shot(launch_direction=10,
                                           launch_direction_side=Side.LEFT))
        assert launch.launch_direction == pytest.approx(-math.radians(10))
        assert launch.launch_direction_deg == -10

    def test_left_spin_axis_is_negative(self):
        launch = normalize_shot(_make_shot(spin_axis=8, spin_direction="left"))
        assert launch.spin_axis == pytest.approx(-math.radians(8))

    def test_non_spin_ball_drops_spin(self):
        """Range balls fly as if spin and spin axis were zero."""
        launch = normalize_shot(_make_shot(spin=5000, spin_axis=20,
                                           ball_type=BallType.RANGE))
        assert launch.spin_rate == 0.0
        assert launch.spin_axis == 0.0

    def test_string_ball_type_accepted(self):
        launch = normalize_shot(_make_shot(ball_type="Premium Ball"))
        assert launch.ball_type is BallType.PREMIUM


class TestTrajectoryShape:
    """Shape properties that hold for any valid shot."""

    @pytest.mark.parametrize("shot", [
        _make_shot(),
        _make_shot(ball_speed=80, launch_angle=45, spin=0),
        _make_shot(ball_speed=120, launch_angle=20, ball_type=BallType.RANGE, spin=None),
        _make_shot(ball_speed=60, launch_angle=30, launch_direction=10,
                   launch_direction_side=Side.LEFT, spin=6000, spin_axis=10),
    ])
    def test_shape(self, shot):
        points = calculate_trajectory(shot)
        first, final = points[0], points[-1]

        # Starts at the origin with the launch speed
        assert (first.x, first.y, first.z) == (0.0, 0.0, 0.0)
        assert first.time == 0.0
        assert first.velocity == pytest.approx(shot.ball_speed * MPH_TO_MS)

        # Ends on the ground
        assert final.y == 0.0

        # Final altitude is the apex of the whole flight
        for p in points[:-1]:
            assert final.altitude >= p.y
            assert final.altitude >= p.altitude

    def test_altitude_is_running_maximum(self):
        points = calculate_trajectory(_make_shot())
        running = 0.0
        for p in points[:-1]:
            running = max(running, p.y)
            assert p.altitude == pytest.approx(running)
            assert p.altitude >= p.y

    def test_samples_every_fifth_step(self):
        points = calculate_trajectory(_make_shot())
        assert points[1].time == pytest.approx(0.005)
        assert points[2].time == pytest.approx(0.010)

    def test_sample_interval_is_configurable(self):
        coarse = calculate_trajectory(_make_shot())
        fine = calculate_trajectory(_make_shot(), settings=SimulationSettings(sample_every=1))
        assert len(fine) > 4 * len(coarse)
        # The terminal state does not depend on decimation
        assert fine[-1] == coarse[-1]

    def test_sampled_point_fields(self):
        points = calculate_trajectory(_make_shot(launch_direction=5))
        p = points[len(points) // 2]
        assert p.distance == pytest.approx(math.hypot(p.x, p.z))
        assert p.total == p.distance
        assert p.carry == p.x
        assert p.side == p.z
        assert p.drag > 0
        assert p.lift > 0

    def test_echoed_inputs(self):
        shot = _make_shot(launch_direction=4, launch_direction_side=Side.LEFT,
                          spin_axis=6, spin_direction=Side.LEFT)
        final = calculate_trajectory(shot)[-1]
        assert final.ball_speed == 150
        assert final.launch_angle == 12
        assert final.launch_direction == -4
        assert final.spin_axis == -6
        assert final.spin == 2500

    def test_deterministic(self):
        assert calculate_trajectory(_make_shot()) == calculate_trajectory(_make_shot())


class TestReferenceScenarios:
    """Reference shots with loose, tuning-independent bounds."""

    def test_drive_carry(self):
        """150 mph, 12°, 2500 rpm RPT drive carries 200-260 m."""
        points = calculate_trajectory(_make_shot())
        final = points[-1]
        assert 200 <= final.carry <= 260
        assert math.isfinite(final.total)
        assert final.velocity < points[0].velocity
        assert final.altitude > 10

    def test_steep_shot_peaks_higher(self):
        """A slow, steep shot carries less but peaks higher than a drive."""
        drive = calculate_trajectory(_make_shot())[-1]
        lob = calculate_trajectory(_make_shot(ball_speed=80, launch_angle=45, spin=0))[-1]
        assert lob.altitude > drive.altitude
        assert lob.carry < drive.carry

    @pytest.mark.parametrize("ball_type", [BallType.RANGE, BallType.PREMIUM])
    def test_non_spin_balls_ignore_spin(self, ball_type):
        """Non-RPT balls give identical output whatever the spin inputs."""
        with_spin = calculate_trajectory(_make_shot(spin=5000, spin_axis=30,
                                                    spin_direction=Side.LEFT,
                                                    ball_type=ball_type))
        no_spin = calculate_trajectory(_make_shot(spin=0, ball_type=ball_type))
        missing = calculate_trajectory(_make_shot(spin=None, spin_axis=None,
                                                  ball_type=ball_type))
        assert with_spin == no_spin
        assert missing == no_spin

    def test_range_ball_carries_less(self):
        rpt = calculate_trajectory(_make_shot())[-1]
        range_ball = calculate_trajectory(_make_shot(ball_type=BallType.RANGE))[-1]
        assert range_ball.carry < rpt.carry

    def test_carry_peaks_once_over_launch_angle(self):
        """Carry rises then falls as launch angle sweeps 0→90°."""
        carries = [calculate_trajectory(_make_shot(launch_angle=a))[-1].carry
                   for a in range(0, 91, 10)]
        peak = carries.index(max(carries))
        assert 0 < peak < len(carries) - 1
        assert all(a < b for a, b in zip(carries[:peak], carries[1:peak + 1]))
        assert all(a > b for a, b in zip(carries[peak:], carries[peak + 1:]))

    def test_higher_speed_more_distance(self):
        slow = calculate_trajectory(_make_shot(ball_speed=110))[-1]
        fast = calculate_trajectory(_make_shot(ball_speed=160))[-1]
        assert fast.carry > slow.carry


class TestShotShape:
    """Direction and curvature."""

    def test_fade_goes_right(self):
        """Spin axis tilted right curves the ball right."""
        final = calculate_trajectory(_make_shot(launch_direction=2, spin_axis=15))[-1]
        assert final.side > 0

    def test_draw_goes_left(self):
        final = calculate_trajectory(_make_shot(launch_direction=2,
                                                launch_direction_side=Side.LEFT,
                                                spin_axis=15,
                                                spin_direction=Side.LEFT))[-1]
        assert final.side < 0

    def test_straight_shot_has_no_side(self):
        final = calculate_trajectory(_make_shot())[-1]
        assert final.side == 0.0

    def test_pull_starts_left(self):
        points = calculate_trajectory(_make_shot(launch_direction=5,
                                                 launch_direction_side=Side.LEFT))
        assert points[10].z < 0


class TestGroundPhase:
    """Final point after bounce and roll."""

    def test_roll_adds_distance(self):
        final = calculate_trajectory(_make_shot())[-1]
        assert final.total > final.carry
        assert final.total == pytest.approx(math.hypot(final.x, final.z))
        assert final.distance == final.total

    def test_carry_is_contact_x(self):
        """Carry is the x of the last flight state, not the resting x."""
        points = calculate_trajectory(_make_shot())
        final = points[-1]
        assert final.carry >= points[-2].x
        assert final.carry != final.x

    def test_straight_shot_rolls_along_descent_angle(self):
        """Roll follows (cos β, 0, sin β); a descending landing drifts to -z."""
        final = calculate_trajectory(_make_shot())[-1]
        assert final.side == 0.0
        assert final.z < 0
        roll = math.hypot(final.x - final.carry, final.z - final.side)
        assert -roll < final.z
        assert final.x > final.carry

    def test_backspin_shortens_roll(self):
        low = calculate_trajectory(_make_shot(ball_speed=120, launch_angle=20, spin=1000))[-1]
        high = calculate_trajectory(_make_shot(ball_speed=120, launch_angle=20, spin=8000))[-1]
        assert (high.total - high.carry) < (low.total - low.carry)


class TestEdgeCases:
    """Boundary inputs must finish with finite output."""

    @pytest.mark.parametrize("ball_speed,launch_angle", [
        (0.1, 0),
        (0.1, 90),
        (200, 0),
        (200, 90),
        (1, 45),
    ])
    def test_boundaries_finite(self, ball_speed, launch_angle):
        points = calculate_trajectory(_make_shot(ball_speed=ball_speed,
                                                 launch_angle=launch_angle))
        assert len(points) >= 2
        final = points[-1]
        assert final.y == 0.0
        for value in (final.x, final.z, final.velocity, final.altitude,
                      final.total, final.carry, final.time):
            assert math.isfinite(value)

    def test_runaway_flight_is_cut_off(self, caplog):
        """Pathological lift keeps the ball up; the 15 s cutoff ends the run."""
        shot = _make_shot(ball_speed=200, launch_angle=30, spin=10000)
        with caplog.at_level(logging.WARNING, logger="golfshot.ball_flight"):
            points = calculate_trajectory(shot)

        final = points[-1]
        assert final.time == pytest.approx(15.0, abs=0.01)
        assert final.y == 0.0
        assert final.altitude > 0
        assert final.total == pytest.approx(math.hypot(final.carry, final.side))
        assert "did not return to ground" in caplog.text

    def test_normal_shot_logs_no_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="golfshot.ball_flight"):
            calculate_trajectory(_make_shot())
        assert caplog.records == []


class TestAtmosphereOptions:
    """Weather and altitude-dependent air density."""

    def test_thin_air_carries_further(self):
        hot = WeatherConditions(temperature=35, air_pressure=950, humidity=80)
        standard = calculate_trajectory(_make_shot())[-1]
        thin = calculate_trajectory(_make_shot(), weather=hot)[-1]
        assert thin.carry > standard.carry

    def test_standard_weather_matches_default(self):
        standard = calculate_trajectory(_make_shot())[-1]
        weather = calculate_trajectory(_make_shot(), weather=WeatherConditions())[-1]
        assert weather.carry == pytest.approx(standard.carry, rel=1e-3)

    def test_altitude_density_changes_flight(self):
        physics = dataclasses.replace(DEFAULT_PHYSICS, altitude_density=True)
        standard = calculate_trajectory(_make_shot())[-1]
        thinning = calculate_trajectory(_make_shot(), physics=physics)[-1]
        assert thinning.carry != standard.carry
        assert thinning.carry == pytest.approx(standard.carry, rel=0.02)


class TestPipeline:
    """summarize_trajectory and simulate_shot."""

    def test_summary_reads_final_point(self):
        points = calculate_trajectory(_make_shot())
        summary = summarize_trajectory(points)
        final = points[-1]
        assert summary.carry == final.carry
        assert summary.total == final.total
        assert summary.apex == final.altitude
        assert summary.side == final.side
        assert summary.flight_time == final.time
        assert summary.landing_speed == final.velocity

    def test_empty_trajectory_summary(self):
        summary = summarize_trajectory([])
        assert summary.carry == 0.0
        assert summary.total == 0.0

    def test_simulate_shot(self, caplog):
        with caplog.at_level(logging.INFO, logger="golfshot.ball_flight"):
            points, summary = simulate_shot(_make_shot())
        assert summary.carry == points[-1].carry
        assert "Shot computed" in caplog.text

    def test_simulate_shot_rejects_invalid(self):
        with pytest.raises(ValueError):
            simulate_shot(_make_shot(ball_speed=250))

    def test_simulate_shot_requires_spin_for_rpt(self):
        with pytest.raises(ValueError):
            simulate_shot(_make_shot(spin=None))
