import math

# Pip value of 1 standard lot (100,000 units) in account currency
PIP_VALUE_PER_STANDARD_LOT = 10.0

# Broker minimum lot / lot step
MIN_LOT_SIZE = 0.01

# 1 pip = 0.0001 on EURUSD-style pairs, 0.01 on gold and JPY pairs
STANDARD_PIP_MULTIPLIER = 10000
GOLD_JPY_PIP_MULTIPLIER = 100

TRUTHY_FLAGS = ("on", "true")


def parse_price(value, field):
    """Parse a form/JSON value into a finite float, or raise ValueError."""
    if value is None:
        raise ValueError(f"{field} is required")
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError(f"{field} is required")

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be a number")

    if not math.isfinite(number):
        raise ValueError(f"{field} must be a finite number")

    return number


def is_gold_or_jpy(value):
    # checkbox sends "on", JSON clients send true / "true"
    if value is True:
        return True
    return isinstance(value, str) and value in TRUTHY_FLAGS


def _round_half_up(value, field):
    if not math.isfinite(value):
        raise ValueError(f"{field} is out of range")
    return math.floor(value + 0.5)


def calculate_pip_difference(entry, stop, gold_or_jpy):
    """
    Whole pips between entry and stop loss.

    Gold/JPY quotes have 2 decimals (4444.44 - 4444.43 = 1 pip),
    other majors have 4 decimals (1.1234 - 1.1233 = 1 pip).
    """
    multiplier = GOLD_JPY_PIP_MULTIPLIER if gold_or_jpy else STANDARD_PIP_MULTIPLIER
    return _round_half_up(abs((entry - stop) * multiplier), "pip distance")


def round_to_broker_lot(value):
    lot = float(value)

    if lot <= 0:
        return 0.0
    if lot < MIN_LOT_SIZE:
        return MIN_LOT_SIZE

    return _round_half_up(lot * 100, "lot size") / 100


def calculate_lot_size(entry_price, stop_loss_price, account_balance,
                       risk_percentage, gold_or_jpy_pair=None):
    entry = parse_price(entry_price, "entryPrice")
    stop = parse_price(stop_loss_price, "stopLossPrice")
    balance = parse_price(account_balance, "accountBalance")
    risk_pct = parse_price(risk_percentage, "riskPercentageUWantToRisk")

    pips_lose = calculate_pip_difference(entry, stop, is_gold_or_jpy(gold_or_jpy_pair))

    risk_amount = balance * (risk_pct / 100)

    lot_size = 0.0
    if pips_lose > 0:
        lot_size = risk_amount / (pips_lose * PIP_VALUE_PER_STANDARD_LOT)
        lot_size = round_to_broker_lot(lot_size)

    return {
        "recommendedLotSize": f"{lot_size:.2f}",
        "pipsIfLoose": f"{pips_lose:.2f}",
    }
