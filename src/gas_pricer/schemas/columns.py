"""Column names for price-update DataFrames."""


class ColumnNames:
    """Strongly typed column names for replay DataFrames."""

    EPOCH = "epoch"
    OBSERVED_RATE = "observed_rate"
    TARGET_RATE = "target_rate"
    PREVIOUS_PRICE = "previous_price"
    NEXT_PRICE = "next_price"
    ADJUSTMENT_FACTOR = "adjustment_factor"
    AT_FLOOR = "at_floor"

    ALL = [
        EPOCH,
        OBSERVED_RATE,
        TARGET_RATE,
        PREVIOUS_PRICE,
        NEXT_PRICE,
        ADJUSTMENT_FACTOR,
        AT_FLOOR,
    ]
