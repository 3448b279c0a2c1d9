"""
Physics constants, tuning coefficients and reference launch data for golfshot.

All values here are fixed at import time. The engine reads them through the
immutable configuration objects in golfshot.models.physics; nothing in the
package mutates them.
"""

# =============================================================================
# Ball Physics Constants
# =============================================================================

# Air properties at standard conditions (sea level, 15°C)
AIR_DENSITY = 1.225            # kg/m³
AIR_VISCOSITY = 1.81e-5        # Pa·s
GRAVITY = 9.81                 # m/s²

# Golf ball properties
BALL_MASS = 0.0459             # kg
BALL_RADIUS = 0.02135          # m (1.68 inches diameter)

# Atmosphere model
SCALE_HEIGHT = 7200.0          # m, exponential density falloff
TAPER_START_ALTITUDE = 35_000.0   # m, linear taper begins
TAPER_END_ALTITUDE = 100_000.0    # m, density reaches zero
DRY_AIR_GAS_CONSTANT = 287.058     # J/(kg·K)
WATER_VAPOR_GAS_CONSTANT = 461.495  # J/(kg·K)

# =============================================================================
# Aerodynamic Tuning (one self-consistent set)
# =============================================================================

CD_ZERO = 0.23                 # Base drag coefficient
CL_ZERO = 0.12                 # Base lift coefficient
SPIN_LIFT_FACTOR = 0.5         # Lift per unit of surface-speed ratio
SPIN_DRAG_FACTOR = 0.05        # Extra drag at the reference spin rate
REFERENCE_SPIN_RPM = 10_000.0

# Reynolds-number regimes. The adjustment ramps linearly between the two
# bounds of each transition so the drag force stays continuous.
RE_LAMINAR = 4.0e4             # full laminar penalty at or below
RE_LAMINAR_END = 7.5e4         # penalty gone at or above
RE_TURBULENT = 2.0e5           # turbulent reduction starts
RE_TURBULENT_END = 2.5e5       # full reduction at or above
LAMINAR_DRAG_PENALTY = 0.10
TURBULENT_DRAG_REDUCTION = 0.05

# =============================================================================
# Ground Interaction
# =============================================================================

BOUNCE_COEFFICIENT = 0.38
BOUNCE_FRICTION = 0.38
ROLL_FRICTION = 0.28
SHALLOW_LANDING_DEG = 30.0     # below this the bounce is damped
FAST_LANDING_SPEED = 30.0      # m/s, above this the bounce is damped
MIN_BOUNCE_DAMPING = 0.5
SPIN_ROLL_DAMPING = 0.8        # roll lost at reference spin, flat landing

# =============================================================================
# Simulation
# =============================================================================

TIME_STEP = 0.001              # s
SAMPLE_EVERY = 5               # record every Nth step
MAX_FLIGHT_TIME = 15.0         # s, runaway cutoff

# =============================================================================
# Unit Conversions
# =============================================================================

MPH_TO_MS = 0.44704            # mph → m/s
CELSIUS_TO_KELVIN = 273.15
HPA_TO_PA = 100.0

# =============================================================================
# Input Domain
# =============================================================================

MAX_BALL_SPEED_MPH = 200.0
MAX_LAUNCH_ANGLE_DEG = 90.0
MAX_LAUNCH_DIRECTION_DEG = 90.0
MAX_SPIN_RPM = 10_000.0
MAX_SPIN_AXIS_DEG = 90.0

# Weather limits (temperature °C, pressure hPa, humidity %)
WEATHER_LIMITS = {
    "temperature": (-20.0, 50.0),
    "air_pressure": (900.0, 1100.0),
    "humidity": (0.0, 100.0),
}

# =============================================================================
# Ball Types: drag and lift multipliers
# =============================================================================

BALL_TYPE_COEFFICIENTS = {
    "RPT Ball":     (1.0, 1.0),   # spin-responsive
    "Range Ball":   (1.2, 0.8),   # higher drag, lower lift
    "Premium Ball": (1.1, 0.9),
}

# =============================================================================
# Reference Launch Windows (Trackman / Ping studies)
# =============================================================================

# club category → club speed window (mph) and optimal launch windows
OPTIMAL_LAUNCH_WINDOWS = {
    "driver": {
        "speed_range": (85.0, 105.0),
        "launch_angle": (12.5, 14.0),
        "spin_rate": (2200.0, 2500.0),
        "smash_factor": 1.48,
        "carry_yards": (230.0, 275.0),
    },
    "fairway": {
        "speed_range": (75.0, 90.0),
        "launch_angle": (13.0, 15.0),
        "spin_rate": (3000.0, 3500.0),
        "smash_factor": 1.47,
        "carry_yards": (195.0, 230.0),
    },
    "iron": {
        "speed_range": (65.0, 85.0),
        "launch_angle": (16.0, 18.0),
        "spin_rate": (4500.0, 5000.0),
        "smash_factor": 1.44,
        "carry_yards": (165.0, 195.0),
    },
}

DRIVER_MIN_CLUB_SPEED = 85.0
FAIRWAY_MIN_CLUB_SPEED = 75.0
