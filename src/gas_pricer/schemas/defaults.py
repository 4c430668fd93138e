"""Default parameter values for the gas pricer.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas. Prices are in whole gas-price units (e.g. wei per gas);
rates are in gas per second averaged over one epoch.
"""

# --- Pricer Defaults ---
# 0 means "unset": the pricer starts at the floor.
DEFAULT_INITIAL_PRICE = 0.0
DEFAULT_FLOOR_PRICE = 1.0
# Desired steady-state demand the controller stabilizes around.
DEFAULT_TARGET_RATE = 10.0
# Largest move allowed in one epoch: 0.5 = +/-50%.
DEFAULT_MAX_CHANGE_FRACTION = 0.5

# --- Replay Defaults ---
DEFAULT_REPLAY_NAME = "Unnamed replay"
