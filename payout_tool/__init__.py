__all__ = ["parse_range", "Interval", "build_payout_model", "PayoutModel", "convert"]

from .ranges import parse_range, Interval
from .structure import build_payout_model, PayoutModel
from .main import convert
